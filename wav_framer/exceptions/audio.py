"""Input-side audio exceptions for WAV Framer."""

from pathlib import Path
from typing import Any

from wav_framer.exceptions.base import WavFramerError


class AudioProcessingError(WavFramerError):
    """Raised when the input audio cannot be used for conversion.

    This exception is raised for issues such as:
    - Missing, empty or corrupted WAV files
    - Containers that are not RIFF/WAVE
    - Audio parameters outside the required profile
    """


class WavReadError(AudioProcessingError):
    """Raised when an input file cannot be opened or parsed as WAV."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"open {path}: {reason}")
        self.path = path
        self.reason = reason


class FormatMismatchError(AudioProcessingError):
    """Raised when a WAV header field differs from the required profile.

    ``field`` is one of ``sample_rate``, ``channels``, ``encoding`` or
    ``bit_depth``; ``expected`` and ``actual`` hold the compared values.
    """

    def __init__(
        self,
        field: str,
        expected: Any,
        actual: Any,
        message: str,
        *,
        path: Path | None = None,
    ) -> None:
        super().__init__(f"{path}: {message}" if path is not None else message)
        self.field = field
        self.expected = expected
        self.actual = actual
        self.path = path
