"""WAV Framer: fixed-length 24-bit/48 kHz mono WAV conversion."""

from wav_framer.constants import VERSION

__version__ = VERSION
