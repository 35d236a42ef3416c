"""Output handling package for WAV Framer."""

from wav_framer.output.console import ConsoleOutputHandler
from wav_framer.output.factory import get_writer
from wav_framer.output.protocols import FileWriter, OutputHandler
from wav_framer.output.writers import AtomicFileWriter, DirectFileWriter, temp_path_for

__all__ = [
    "ConsoleOutputHandler",
    "get_writer",
    "FileWriter",
    "OutputHandler",
    "AtomicFileWriter",
    "DirectFileWriter",
    "temp_path_for",
]
