"""Configuration package for WAV Framer."""

# Re-export enums
from wav_framer.config.enums import SampleEncoding, WriteMode

# Re-export models
from wav_framer.config.models import ConversionConfig, PcmFormat

__all__ = [
    # Enums
    "SampleEncoding",
    "WriteMode",
    # Models
    "ConversionConfig",
    "PcmFormat",
]
