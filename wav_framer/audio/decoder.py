"""24-bit mono WAV decoding for WAV Framer."""

import logging
from pathlib import Path

import numpy as np
import soundfile as sf

from wav_framer.audio.info import AudioInfoRetriever
from wav_framer.audio.validation import AudioValidator
from wav_framer.exceptions import WavReadError

logger = logging.getLogger(__name__)

# libsndfile left-justifies 24-bit samples when reading as int32
_INT24_SHIFT = 8


class WavDecoder:
    """Read a validated 24-bit mono WAV file into sign-extended samples."""

    def __init__(
        self,
        info_retriever: AudioInfoRetriever | None = None,
        validator: AudioValidator | None = None,
    ) -> None:
        self.info_retriever = info_retriever or AudioInfoRetriever()
        self.validator = validator or AudioValidator()

    def decode(self, path: Path) -> np.ndarray:
        """Validate ``path`` and return its samples.

        Args:
            path: Input WAV file

        Returns:
            1-D int32 array of 24-bit sample values in [-2^23, 2^23-1]

        Raises:
            WavReadError: If the file cannot be opened or parsed
            FormatMismatchError: If the header is not 48 kHz/mono/int/24-bit
        """
        info = self.info_retriever.get_info(path)
        self.validator.validate(info, path)

        try:
            data, _ = sf.read(str(path), dtype="int32", always_2d=False)
        except (RuntimeError, OSError) as e:
            raise WavReadError(path, str(e)) from e

        samples = np.right_shift(np.asarray(data, dtype=np.int32).reshape(-1), _INT24_SHIFT)
        logger.debug("Decoded %d samples from %s", len(samples), path)
        return samples
