"""Audio information retrieval for WAV Framer."""

import logging
from pathlib import Path
from typing import NamedTuple

import soundfile as sf

from wav_framer.config import SampleEncoding
from wav_framer.exceptions import WavReadError

logger = logging.getLogger(__name__)

# libsndfile major formats that are RIFF/WAVE containers
WAV_FORMATS = frozenset({"WAV", "WAVEX"})

# libsndfile subtype -> (encoding, bits per sample) for linear PCM codecs
SUBTYPE_LAYOUTS: dict[str, tuple[SampleEncoding, int]] = {
    "PCM_S8": (SampleEncoding.INT, 8),
    "PCM_U8": (SampleEncoding.INT, 8),
    "PCM_16": (SampleEncoding.INT, 16),
    "PCM_24": (SampleEncoding.INT, 24),
    "PCM_32": (SampleEncoding.INT, 32),
    "FLOAT": (SampleEncoding.FLOAT, 32),
    "DOUBLE": (SampleEncoding.FLOAT, 64),
}


class AudioInfo(NamedTuple):
    """WAV format descriptor read from a file header."""
    samplerate: int
    channels: int
    encoding: SampleEncoding | None
    bits_per_sample: int | None
    frames: int
    format: str
    subtype: str


class AudioInfoRetriever:
    """Retrieve WAV header information using soundfile."""

    def get_info(self, path: Path) -> AudioInfo:
        """Get the format descriptor for a WAV file.

        Args:
            path: Path to the audio file

        Returns:
            AudioInfo describing sample rate, channels and sample layout.
            ``encoding`` and ``bits_per_sample`` are None for codecs that
            are not linear PCM.

        Raises:
            WavReadError: If the file is missing, empty, unreadable or not
                a RIFF/WAVE container
        """
        if not path.exists():
            raise WavReadError(path, "file does not exist")
        if path.stat().st_size == 0:
            raise WavReadError(path, "file is empty")

        try:
            info = sf.info(str(path))
        except (RuntimeError, OSError) as e:
            raise WavReadError(path, str(e)) from e

        if info.format not in WAV_FORMATS:
            raise WavReadError(path, f"not a RIFF/WAVE file (format {info.format})")

        encoding, bits = SUBTYPE_LAYOUTS.get(info.subtype, (None, None))
        logger.debug(
            "%s: format=%s subtype=%s rate=%d channels=%d frames=%d",
            path, info.format, info.subtype, info.samplerate, info.channels, info.frames,
        )
        return AudioInfo(
            samplerate=info.samplerate,
            channels=info.channels,
            encoding=encoding,
            bits_per_sample=bits,
            frames=info.frames,
            format=info.format,
            subtype=info.subtype,
        )
