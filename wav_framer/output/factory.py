"""Factory functions for file writers."""

from typing import cast

from wav_framer.config import WriteMode
from wav_framer.output.protocols import FileWriter
from wav_framer.output.writers import AtomicFileWriter, DirectFileWriter


def get_writer(mode: WriteMode, *, sync_directory: bool = True) -> FileWriter:
    """Factory function to get the write strategy for the given mode.

    Args:
        mode: The requested write mode
        sync_directory: Whether the atomic writer fsyncs the parent directory

    Returns:
        FileWriter: The appropriate writer instance
    """
    writers = {
        WriteMode.ATOMIC: AtomicFileWriter(sync_directory=sync_directory),
        WriteMode.DIRECT: DirectFileWriter(),
    }
    return cast(FileWriter, writers[WriteMode(mode)])
