"""Configuration enums for WAV Framer."""

from enum import Enum, auto


class SampleEncoding(Enum):
    """Numeric representation of PCM samples in a WAV file."""

    INT = auto()
    FLOAT = auto()

    def __str__(self) -> str:
        return "integer" if self is SampleEncoding.INT else "float"


class WriteMode(str, Enum):
    """Selectable strategies for persisting the output file."""

    ATOMIC = "atomic"
    DIRECT = "direct"

    def __str__(self) -> str:  # pragma: no cover - convenience for Typer display
        return self.value
