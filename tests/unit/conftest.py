"""Unit test shared fixtures.

Fixtures here are available to all unit tests but not integration tests.
Focus on lightweight mocks and fast execution.
"""

from __future__ import annotations

from typing import Any

import pytest

from wav_framer.audio.info import AudioInfo
from wav_framer.config import SampleEncoding


# =============================================================================
# Automatic Markers
# =============================================================================

def pytest_collection_modifyitems(items):
    """Automatically mark all tests in unit/ directory with @pytest.mark.unit."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Sample Data Factories
# =============================================================================

@pytest.fixture
def audio_info_factory():
    """Factory fixture for creating AudioInfo descriptors.

    Returns:
        Callable that creates an AudioInfo with a valid 48 kHz/mono/24-bit
        profile unless fields are overridden.

    Example:
        >>> info = audio_info_factory(samplerate=44100)
        >>> assert info.channels == 1
    """
    def _create(**overrides: Any) -> AudioInfo:
        fields: dict[str, Any] = {
            "samplerate": 48000,
            "channels": 1,
            "encoding": SampleEncoding.INT,
            "bits_per_sample": 24,
            "frames": 1024,
            "format": "WAV",
            "subtype": "PCM_24",
        }
        fields.update(overrides)
        return AudioInfo(**fields)

    return _create
