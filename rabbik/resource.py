"""Loadable assets and the handlers that read and write them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable


class Resource:
    """Base class for assets that are loaded from and saved to files."""


class ResourceFileHandler(ABC):
    """Reads and writes resources for a set of file extensions."""

    def __init__(self, extensions: Iterable[str] = ()) -> None:
        self._extensions = tuple(extensions)

    def can_handle(self, extension: str) -> bool:
        """Return True if ``extension`` is one this handler supports."""
        return extension in self._extensions

    def supported_extensions(self) -> list[str]:
        """Return the supported extensions in the order they were given."""
        return list(self._extensions)

    @abstractmethod
    def load(self, path: str) -> Resource:
        """Read the resource stored at ``path``."""

    @abstractmethod
    def save(self, path: str, resource: Resource) -> None:
        """Write ``resource`` to ``path``."""