"""Output protocols for WAV Framer."""

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class OutputHandler(Protocol):
    """Protocol for user-facing output (console, logging, etc.)."""

    def print(self, message: str, **kwargs) -> None:
        """Print an informational message."""
        ...

    def info(self, message: str) -> None:
        """Print an informational message (alias for print)."""
        ...

    def warning(self, message: str) -> None:
        """Print a warning message."""
        ...

    def error(self, message: str) -> None:
        """Print an error message."""
        ...

    def success(self, message: str) -> None:
        """Print a completion message."""
        ...


@runtime_checkable
class FileWriter(Protocol):
    """Protocol for strategies that persist a byte buffer to a path."""

    def write(self, path: Path, data: bytes) -> None:
        """Write ``data`` to ``path``, raising DurableWriteError on failure."""
        ...
