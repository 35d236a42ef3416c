"""CLI application definition for WAV Framer."""

import typer

from wav_framer.cli.commands import convert

app = typer.Typer(
    add_completion=False,
    help="Fixed-length 24-bit/48 kHz mono WAV converter.",
)

# Single command: invoked as `wav-framer INPUT OUTPUT`
app.command(name="convert", help="Convert a WAV file to 1024 samples")(convert)
