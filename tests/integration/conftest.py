"""Integration test configuration and fixtures."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest


def pytest_collection_modifyitems(items):
    """Automatically mark all tests in integration/ with @pytest.mark.integration."""
    for item in items:
        if "/integration/" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def ramp_samples() -> np.ndarray:
    """Known 24-bit sample values spanning the full signed range."""
    return np.linspace(-8388608, 8388607, 2000).astype(np.int32)


@pytest.fixture
def existing_output(tmp_output_dir: Path) -> Path:
    """An output path that already holds previous content."""
    path = tmp_output_dir / "out.wav"
    path.write_bytes(b"previous content")
    return path
