"""Classic PCM WAV encoding for WAV Framer.

Produces the minimal two-chunk layout: a 44-byte header (``RIFF``/``WAVE``,
a 16-byte ``fmt `` chunk with format tag 1, and the ``data`` chunk header)
followed by little-endian two's complement samples.
"""

import struct

import numpy as np

from wav_framer.config import PcmFormat
from wav_framer.constants import FMT_CHUNK_SIZE

# RIFF id, RIFF size, WAVE id, fmt id, fmt size, format tag, channels,
# sample rate, byte rate, block align, bits per sample, data id, data size
_HEADER = struct.Struct("<4sI4s4sIHHIIHH4sI")

_U32_MAX = 0xFFFFFFFF


class ClassicWavEncoder:
    """Serialize integer samples into a byte-exact classic PCM WAV file."""

    def __init__(self, fmt: PcmFormat | None = None) -> None:
        self.fmt = fmt or PcmFormat()

    @property
    def sample_range(self) -> tuple[int, int]:
        """Inclusive signed range representable at the format's bit depth."""
        half = 1 << (self.fmt.bits_per_sample - 1)
        return -half, half - 1

    def encode(self, samples) -> bytes:
        """Build the complete WAV file for ``samples``.

        Size fields are derived from the actual number of samples. Odd-length
        data is followed by one zero pad byte, counted in the RIFF size but
        not in the ``data`` chunk size.

        Raises:
            ValueError: If the file would exceed the 4 GiB RIFF limit
        """
        payload = self.encode_samples(samples)
        data_bytes = len(payload)
        pad = data_bytes % 2
        riff_size = 4 + (8 + FMT_CHUNK_SIZE) + (8 + data_bytes + pad)
        if riff_size > _U32_MAX:
            raise ValueError(f"WAV data too large for RIFF: {data_bytes} bytes")

        header = _HEADER.pack(
            b"RIFF", riff_size, b"WAVE",
            b"fmt ", FMT_CHUNK_SIZE,
            self.fmt.audio_format,
            self.fmt.channels,
            self.fmt.sample_rate,
            self.fmt.byte_rate,
            self.fmt.block_align,
            self.fmt.bits_per_sample,
            b"data", data_bytes,
        )
        return header + payload + b"\x00" * pad

    def encode_samples(self, samples) -> bytes:
        """Clamp samples to the signed range and pack them little-endian."""
        low, high = self.sample_range
        clamped = np.clip(np.asarray(samples, dtype=np.int64).reshape(-1), low, high)
        # Low-order bytes of the little-endian int64 are the two's complement value
        width = self.fmt.bytes_per_sample
        raw = clamped.astype("<i8").view(np.uint8).reshape(-1, 8)[:, :width]
        return raw.tobytes()
