"""Root-level pytest configuration and shared fixtures.

This module provides fixtures that are universally applicable across
all test modules. Fixtures here should be:
- Stateless or cheap to build per test
- Generic enough for reuse across unit and integration tests
- Well-documented with clear purpose
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

import numpy as np
import pytest
import soundfile as sf
from pytest_mock import MockerFixture


# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def tmp_input_dir(tmp_path: Path) -> Path:
    """Create a temporary input directory for test files.

    Returns:
        Path to a clean temporary directory for input files.
    """
    input_dir = tmp_path / "input"
    input_dir.mkdir(parents=True, exist_ok=True)
    return input_dir


@pytest.fixture
def tmp_output_dir(tmp_path: Path) -> Path:
    """Create a temporary output directory for converted files.

    Returns:
        Path to a clean temporary directory for output files.
    """
    output_dir = tmp_path / "output"
    output_dir.mkdir(parents=True, exist_ok=True)
    return output_dir


# =============================================================================
# WAV File Fixtures
# =============================================================================

@pytest.fixture
def create_wav(tmp_input_dir: Path) -> Callable[..., Path]:
    """Factory fixture for writing real WAV files with soundfile.

    For ``PCM_24`` files ``samples`` holds 24-bit integer values. For any
    other subtype ``samples`` holds floats in [-1, 1]; when omitted, ``frames``
    zero samples are written.

    Returns:
        Callable that writes a WAV file and returns its path.

    Example:
        >>> path = create_wav([1, -1, 8388607], filename="short.wav")
    """
    def _create(
        samples: Sequence[int] | np.ndarray | None = None,
        *,
        filename: str = "input.wav",
        samplerate: int = 48000,
        channels: int = 1,
        subtype: str = "PCM_24",
        frames: int = 1024,
    ) -> Path:
        path = tmp_input_dir / filename
        if subtype == "PCM_24":
            values = np.zeros(frames, dtype=np.int32) if samples is None else np.asarray(samples, dtype=np.int32)
            # soundfile takes 24-bit values left-justified in int32
            data = np.left_shift(values, 8)
        else:
            values = np.zeros(frames, dtype=np.float32) if samples is None else np.asarray(samples, dtype=np.float32)
            data = values
        if channels > 1:
            data = np.repeat(data.reshape(-1, 1), channels, axis=1)
        sf.write(str(path), data, samplerate, subtype=subtype, format="WAV")
        return path

    return _create


@pytest.fixture
def read_wav_samples() -> Callable[[Path], np.ndarray]:
    """Return a reader yielding the 24-bit integer samples of a WAV file."""
    def _read(path: Path) -> np.ndarray:
        data, _ = sf.read(str(path), dtype="int32", always_2d=False)
        return np.right_shift(np.asarray(data, dtype=np.int32), 8)

    return _read


# =============================================================================
# Output Handler Fixtures
# =============================================================================

@pytest.fixture
def mock_output_handler(mocker: MockerFixture):
    """Create a mock OutputHandler for dependency injection.

    Returns:
        Mock object implementing the OutputHandler protocol.
    """
    handler = mocker.MagicMock()
    handler.info = mocker.MagicMock()
    handler.warning = mocker.MagicMock()
    handler.error = mocker.MagicMock()
    handler.success = mocker.MagicMock()
    return handler


# =============================================================================
# Configuration Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
