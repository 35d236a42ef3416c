"""Sample processing package for WAV Framer."""

from wav_framer.processing.encoder import ClassicWavEncoder
from wav_framer.processing.normalizer import normalize_length
from wav_framer.processing.pipeline import ConversionResult, FrameConverter

__all__ = [
    "ClassicWavEncoder",
    "normalize_length",
    "ConversionResult",
    "FrameConverter",
]
