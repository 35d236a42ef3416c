"""Base exception classes for WAV Framer."""


class WavFramerError(Exception):
    """Base class for user-facing errors.

    Every failure the CLI reports to the user inherits from this class so a
    single handler can turn it into an error message and a non-zero exit.
    """
