"""Exception hierarchy for WAV Framer."""
from wav_framer.exceptions.base import WavFramerError
from wav_framer.exceptions.audio import (
    AudioProcessingError,
    FormatMismatchError,
    WavReadError,
)
from wav_framer.exceptions.write import DurableWriteError

__all__ = [
    "WavFramerError",
    "AudioProcessingError",
    "FormatMismatchError",
    "WavReadError",
    "DurableWriteError",
]
