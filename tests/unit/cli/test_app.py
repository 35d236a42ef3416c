"""Unit tests for CLI app configuration."""

from __future__ import annotations

import typer

from wav_framer.cli.app import app
from wav_framer.cli.commands import convert


class TestAppConfiguration:
    """Tests for Typer app configuration."""

    def test_app_is_typer_instance(self) -> None:
        """Test that app is a Typer instance."""
        assert isinstance(app, typer.Typer)

    def test_app_has_single_convert_command(self) -> None:
        """Test that convert is the only registered command."""
        assert len(app.registered_commands) == 1
        command = app.registered_commands[0]
        assert command.name == "convert"
        assert command.callback is convert
