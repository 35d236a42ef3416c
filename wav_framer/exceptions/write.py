"""Output-side exceptions for WAV Framer."""

from pathlib import Path

from wav_framer.exceptions.base import WavFramerError


class DurableWriteError(WavFramerError):
    """Raised when the output file cannot be written or committed.

    ``operation`` names the failing step (``create``, ``write``, ``fsync``,
    ``rename``) and ``path`` the file it was applied to.
    """

    def __init__(self, operation: str, path: Path, reason: str) -> None:
        super().__init__(f"{operation} {path}: {reason}")
        self.operation = operation
        self.path = path
        self.reason = reason
