"""Audio input package for WAV Framer."""

from wav_framer.audio.decoder import WavDecoder
from wav_framer.audio.info import AudioInfo, AudioInfoRetriever
from wav_framer.audio.validation import AudioValidator

__all__ = [
    "WavDecoder",
    "AudioInfo",
    "AudioInfoRetriever",
    "AudioValidator",
]
