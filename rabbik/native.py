"""File protocol and stream for the local machine's file system."""

from __future__ import annotations

import errno
import io
import os
import shutil
import stat
from pathlib import Path
from typing import BinaryIO

from rabbik.file_protocol import FileProtocol, OpenMode

_OPEN_MODES = {
    OpenMode.READ_ONLY: "rb",
    OpenMode.WRITE_TRUNCATE: "wb",
    OpenMode.WRITE_APPEND: "ab",
    OpenMode.READ_WRITE_TRUNCATE: "w+b",
    OpenMode.READ_WRITE_APPEND: "a+b",
}

# Failures of these kinds are reported; other operating-system failures are not.
_REPORTED_ERRORS = (PermissionError, FileNotFoundError, FileExistsError)


class NativeFileStream:
    """A byte stream over an open local file."""

    def __init__(self, handle: BinaryIO, mode: OpenMode) -> None:
        mode = OpenMode(mode)
        self._handle = handle
        self._valid = True
        self._can_read = mode.readable
        self._can_write = mode.writable

    def close(self) -> None:
        if not self._valid:
            return
        self._handle.close()
        self._valid = False

    @property
    def is_valid(self) -> bool:
        return self._valid

    @property
    def can_read(self) -> bool:
        return self._can_read

    @property
    def can_write(self) -> bool:
        return self._can_write

    @property
    def can_random_access(self) -> bool:
        return True

    def _require_valid(self) -> None:
        if not self._valid:
            raise ValueError("Attempted to operate an invalid file stream")

    @property
    def position(self) -> int:
        """The current byte offset from the start of the file."""
        self._require_valid()
        return self._handle.tell()

    @position.setter
    def position(self, value: int) -> None:
        self._require_valid()
        if value < 0:
            raise ValueError("position cannot be negative")
        self._handle.seek(value, os.SEEK_SET)

    @property
    def length(self) -> int:
        """The size of the file in bytes; the position is left unchanged."""
        self._require_valid()
        original = self._handle.tell()
        end = self._handle.seek(0, os.SEEK_END)
        self._handle.seek(original, os.SEEK_SET)
        return end

    def read(self, length: int) -> bytes:
        """Read up to ``length`` bytes; fewer are returned at the end of the file."""
        self._require_valid()
        if not self._can_read:
            raise io.UnsupportedOperation("the stream is not readable")
        if length < 0:
            raise ValueError("length cannot be negative")
        return self._handle.read(length)

    def write(self, data: bytes) -> int:
        """Write ``data`` and return the number of bytes written."""
        self._require_valid()
        if not self._can_write:
            raise io.UnsupportedOperation("the stream is not writable")
        return self._handle.write(bytes(data))

    def __enter__(self) -> NativeFileStream:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class NativeFileProtocol(FileProtocol):
    """Handles plain paths on the local file system."""

    def file_exists(self, path: str) -> bool:
        try:
            status = os.stat(path)
        except (OSError, ValueError):
            return False
        return not stat.S_ISDIR(status.st_mode)

    def directory_exists(self, path: str) -> bool:
        try:
            return os.path.isdir(path)
        except ValueError:
            return False

    def create_file(self, path: str) -> None:
        if self.file_exists(path):
            raise FileExistsError(errno.EEXIST, "The file already exists", path)
        with open(path, "wb"):
            pass

    def create_directory(self, path: str) -> None:
        try:
            os.makedirs(path, exist_ok=True)
        except _REPORTED_ERRORS:
            raise
        except OSError:
            pass

    def open_file(self, path: str, mode: OpenMode) -> NativeFileStream:
        mode = OpenMode(mode)
        if mode.read_only and not self.file_exists(path):
            raise FileNotFoundError(
                errno.ENOENT, "Attempted to open a non-existing file in read-only mode", path
            )
        handle = open(path, _OPEN_MODES[mode])
        return NativeFileStream(handle, mode)

    def remove_file(self, path: str) -> None:
        """Delete a file or an empty directory; a missing path is ignored."""
        target = Path(path)
        try:
            if target.is_dir() and not target.is_symlink():
                target.rmdir()
            else:
                target.unlink()
        except FileNotFoundError:
            return
        except _REPORTED_ERRORS:
            raise
        except OSError:
            pass

    def remove_directory(self, path: str) -> None:
        """Delete ``path`` and everything below it; a missing path is ignored."""
        target = Path(path)
        try:
            if target.is_dir() and not target.is_symlink():
                shutil.rmtree(target)
            else:
                target.unlink()
        except FileNotFoundError:
            return
        except _REPORTED_ERRORS:
            raise
        except OSError:
            pass

    def _entries(self, path: str, directories: bool) -> list[str]:
        if not self.directory_exists(path):
            raise FileNotFoundError(errno.ENOENT, "The directory does not exist", path)
        with os.scandir(path) as entries:
            return sorted(entry.path for entry in entries if entry.is_dir() == directories)

    def list_files(self, path: str) -> list[str]:
        return self._entries(path, directories=False)

    def list_directories(self, path: str) -> list[str]:
        return self._entries(path, directories=True)