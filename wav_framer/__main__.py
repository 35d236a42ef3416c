"""Entry point for the WAV Framer CLI.

Allows ``python -m wav_framer <input.wav> <output.wav>``.
"""

from wav_framer.cli.app import app


if __name__ == "__main__":
    app()
