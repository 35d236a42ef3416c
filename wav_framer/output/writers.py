"""File write strategies for WAV Framer.

``AtomicFileWriter`` guarantees that the destination holds either its old
content or the complete new content: the buffer goes to a hidden temp file
in the same directory, is flushed and fsynced, and is then renamed over the
destination. ``DirectFileWriter`` simply overwrites the destination.
"""

import logging
import os
from pathlib import Path

from wav_framer.constants import TEMP_SUFFIX
from wav_framer.exceptions import DurableWriteError

logger = logging.getLogger(__name__)


def temp_path_for(path: Path) -> Path:
    """Return the hidden temp path used while writing ``path``.

    The temp file lives in the destination's directory so the final rename
    stays on one filesystem.
    """
    name = path.name or "output.wav"
    return path.parent / f".{name}{TEMP_SUFFIX}"


def sync_directory(directory: Path) -> bool:
    """Best-effort fsync of a directory entry table.

    Returns:
        True if the directory was synced, False if the platform or
        filesystem refused. Errors are logged, never raised.
    """
    try:
        fd = os.open(directory, os.O_RDONLY)
    except OSError as e:
        logger.debug("Cannot open directory %s for sync: %s", directory, e)
        return False
    try:
        os.fsync(fd)
    except OSError as e:
        logger.debug("Directory sync failed for %s: %s", directory, e)
        return False
    finally:
        os.close(fd)
    return True


def _write_file(path: Path, data: bytes, *, fsync: bool) -> None:
    try:
        f = open(path, "wb")
    except OSError as e:
        raise DurableWriteError("create", path, str(e)) from e

    operation = "write"
    try:
        with f:
            f.write(data)
            operation = "flush"
            f.flush()
            if fsync:
                operation = "fsync"
                os.fsync(f.fileno())
    except OSError as e:
        raise DurableWriteError(operation, path, str(e)) from e


def _discard(path: Path) -> None:
    try:
        path.unlink()
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning("Could not remove temp file %s: %s", path, e)


class AtomicFileWriter:
    """Write via temp file, fsync and atomic rename."""

    def __init__(self, sync_directory: bool = True) -> None:
        """Initialize the writer.

        Args:
            sync_directory: fsync the parent directory after the rename.
        """
        self.sync_directory = sync_directory

    def write(self, path: Path, data: bytes) -> None:
        path = Path(path)
        tmp_path = temp_path_for(path)
        logger.debug("Writing %d bytes to temp file %s", len(data), tmp_path)

        try:
            _write_file(tmp_path, data, fsync=True)
            try:
                os.replace(tmp_path, path)
            except OSError as e:
                raise DurableWriteError(
                    "rename",
                    tmp_path,
                    f"cannot replace {path}; temp file and destination must be "
                    f"on the same filesystem ({e})",
                ) from e
        except DurableWriteError:
            _discard(tmp_path)
            raise

        if self.sync_directory:
            sync_directory(path.parent)


class DirectFileWriter:
    """Write straight to the destination without durability guarantees."""

    def write(self, path: Path, data: bytes) -> None:
        path = Path(path)
        logger.debug("Writing %d bytes directly to %s", len(data), path)
        _write_file(path, data, fsync=False)
