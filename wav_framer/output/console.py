"""Console-based output handler for WAV Framer."""

from rich.console import Console
from rich.markup import escape


class ConsoleOutputHandler:
    """Rich Console-based output handler.

    Informational output goes to ``console`` (stdout), errors to
    ``error_console`` (stderr).
    """

    def __init__(self, console: Console | None = None, error_console: Console | None = None) -> None:
        self.console = console or Console()
        self.error_console = error_console or Console(stderr=True)

    def print(self, message: str, **kwargs) -> None:
        """Print an informational message."""
        self.console.print(message, **kwargs)

    def info(self, message: str) -> None:
        """Print an informational message."""
        self.print(message, markup=False, highlight=False, soft_wrap=True)

    def success(self, message: str) -> None:
        """Print a completion message."""
        self.info(message)

    def warning(self, message: str) -> None:
        """Print a warning message."""
        self.error_console.print(f"[yellow]Warning:[/yellow] {escape(message)}", soft_wrap=True)

    def error(self, message: str) -> None:
        """Print an error message."""
        self.error_console.print(f"[red]Error:[/red] {escape(message)}", soft_wrap=True)
