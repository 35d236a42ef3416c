"""CLI command implementations for WAV Framer."""

import logging
from pathlib import Path

import typer
from rich.console import Console

from wav_framer.config import ConversionConfig, WriteMode
from wav_framer.constants import VERSION
from wav_framer.exceptions import WavFramerError
from wav_framer.output import ConsoleOutputHandler
from wav_framer.processing import FrameConverter

# Configure logging
logging.basicConfig(
    level=logging.WARNING,  # Default to WARNING level
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)

USAGE = "Usage: wav-framer <input_24b_48k_mono.wav> <output.wav>"


def version_callback(value: bool) -> None:
    """Handle version flag callback for Typer CLI.

    Args:
        value: Whether the version flag was provided
    """
    if value:
        typer.echo(f"WAV Framer v{VERSION}")
        raise typer.Exit()


def convert(
        paths: list[Path] | None = typer.Argument(
            None, metavar="INPUT OUTPUT", show_default=False,
            help="24-bit/48 kHz mono input WAV followed by the output WAV path"
        ),
        write_mode: WriteMode = typer.Option(
            WriteMode.ATOMIC, "--write-mode",
            help="atomic: temp file, fsync and rename; direct: overwrite in place"
        ),
        dir_sync: bool = typer.Option(
            True, "--dir-sync/--no-dir-sync",
            help="fsync the output directory after an atomic rename"
        ),
        version: bool = typer.Option(
            False, "--version", "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit."
        ),
        verbose: bool = typer.Option(
            False, "--verbose",
            help="Enable verbose debug output"
        ),
) -> None:
    """Convert a 24-bit/48 kHz mono WAV into a 1024-sample classic PCM WAV."""

    # Configure logging level based on verbose flag
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")
    else:
        logging.getLogger().setLevel(logging.WARNING)

    error_console = Console(stderr=True)
    output_handler = ConsoleOutputHandler(error_console=error_console)

    if not paths or len(paths) != 2:
        error_console.print(USAGE, markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(code=1)

    input_path, output_path = paths
    config = ConversionConfig(write_mode=write_mode, sync_directory=dir_sync)

    try:
        result = FrameConverter(config).convert(input_path, output_path)
    except WavFramerError as e:
        output_handler.error(str(e))
        raise typer.Exit(code=1)

    output_handler.success(
        f"OK: wrote classic PCM WAV (fmt=16, tag=1), 24-bit/48k/mono, "
        f"{result.samples} samples -> {result.output_path}"
    )
