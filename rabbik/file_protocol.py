"""File open modes and the interface that file protocol handlers implement."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Any


class OpenMode(IntEnum):
    """How a file is opened."""

    READ_ONLY = 0
    WRITE_TRUNCATE = 1
    WRITE_APPEND = 2
    READ_WRITE_TRUNCATE = 3
    READ_WRITE_APPEND = 4

    @property
    def read_only(self) -> bool:
        return self is OpenMode.READ_ONLY

    @property
    def readable(self) -> bool:
        return self in (
            OpenMode.READ_ONLY,
            OpenMode.READ_WRITE_TRUNCATE,
            OpenMode.READ_WRITE_APPEND,
        )

    @property
    def writable(self) -> bool:
        return self in (
            OpenMode.WRITE_TRUNCATE,
            OpenMode.WRITE_APPEND,
            OpenMode.READ_WRITE_TRUNCATE,
            OpenMode.READ_WRITE_APPEND,
        )

    @property
    def truncates(self) -> bool:
        return self in (OpenMode.WRITE_TRUNCATE, OpenMode.READ_WRITE_TRUNCATE)

    @property
    def appends(self) -> bool:
        return self in (OpenMode.WRITE_APPEND, OpenMode.READ_WRITE_APPEND)


class FileProtocol(ABC):
    """A handler for the paths of one file-system protocol.

    ``owner`` is set to the file system the handler is registered with.
    """

    def __init__(self) -> None:
        self.owner: Any = None

    @abstractmethod
    def file_exists(self, path: str) -> bool:
        """Return True if ``path`` names an existing non-directory."""

    @abstractmethod
    def directory_exists(self, path: str) -> bool:
        """Return True if ``path`` names an existing directory."""

    @abstractmethod
    def create_file(self, path: str) -> None:
        """Create an empty file at ``path``."""

    @abstractmethod
    def create_directory(self, path: str) -> None:
        """Create a directory, with any missing parents, at ``path``."""

    @abstractmethod
    def open_file(self, path: str, mode: OpenMode) -> Any:
        """Open ``path`` with ``mode`` and return a file stream."""

    @abstractmethod
    def remove_file(self, path: str) -> None:
        """Delete the file at ``path``."""

    @abstractmethod
    def remove_directory(self, path: str) -> None:
        """Delete the directory at ``path`` and everything in it."""

    @abstractmethod
    def list_files(self, path: str) -> list[str]:
        """Return the paths of the files directly inside ``path``."""

    @abstractmethod
    def list_directories(self, path: str) -> list[str]:
        """Return the paths of the directories directly inside ``path``."""