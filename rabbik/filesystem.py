"""A file system that routes protocol-prefixed paths to their handlers."""

from __future__ import annotations

from enum import Enum

from rabbik import debug
from rabbik.file_protocol import FileProtocol, OpenMode
from rabbik.native import NativeFileProtocol, NativeFileStream

_PROTOCOL_SEPARATOR = "://"


class Protocol(Enum):
    """The kinds of location a path can address."""

    NULL = 0
    NATIVE = 1
    RESOURCE = 2
    PERSISTENT = 3
    END = 4

    @property
    def is_valid(self) -> bool:
        return Protocol.NULL.value < self.value < Protocol.END.value


class FileSystem:
    """Dispatches ``name://path`` paths to protocol handlers.

    Paths without a protocol prefix, or with an empty one, are native paths.
    """

    def __init__(self) -> None:
        self._protocols: dict[str, Protocol] = {}
        self._handlers: dict[Protocol, FileProtocol] = {}
        self._add_protocol("file", Protocol.NATIVE)
        self._add_protocol_handler(Protocol.NATIVE, NativeFileProtocol())
        self._add_protocol("res", Protocol.RESOURCE)
        self._add_protocol("user", Protocol.PERSISTENT)

    def _add_protocol(self, name: str, protocol: Protocol) -> None:
        self._protocols[name] = protocol

    def _add_protocol_handler(self, protocol: Protocol, handler: FileProtocol) -> None:
        handler.owner = self
        self._handlers[protocol] = handler

    def get_protocol(self, name: str) -> Protocol:
        """Return the protocol registered as ``name``, or ``Protocol.NULL``."""
        return self._protocols.get(name, Protocol.NULL)

    def protocol_handler(self, protocol: Protocol) -> FileProtocol | None:
        """Return the handler for ``protocol``, or None if there is none."""
        return self._handlers.get(protocol)

    def _resolve(self, path: str) -> tuple[FileProtocol, str]:
        name, separator, rest = path.partition(_PROTOCOL_SEPARATOR)
        if not separator:
            name, rest = "", path
        protocol = self.get_protocol(name) if name else Protocol.NATIVE
        if not protocol.is_valid:
            raise ValueError(f"Invalid path protocol: {name!r}")
        handler = self.protocol_handler(protocol)
        if handler is None:
            debug.fatal("Protocol handler not found!")
        return handler, rest

    def file_exists(self, path: str) -> bool:
        handler, rest = self._resolve(path)
        return handler.file_exists(rest)

    def directory_exists(self, path: str) -> bool:
        handler, rest = self._resolve(path)
        return handler.directory_exists(rest)

    def create_file(self, path: str) -> None:
        handler, rest = self._resolve(path)
        handler.create_file(rest)

    def create_directory(self, path: str) -> None:
        handler, rest = self._resolve(path)
        handler.create_directory(rest)

    def open_file(self, path: str, mode: OpenMode) -> NativeFileStream:
        """Open ``path``; a read-only open of a missing file fails."""
        handler, rest = self._resolve(path)
        return handler.open_file(rest, mode)

    def remove_file(self, path: str) -> None:
        handler, rest = self._resolve(path)
        handler.remove_file(rest)

    def remove_directory(self, path: str) -> None:
        handler, rest = self._resolve(path)
        handler.remove_directory(rest)

    def list_files(self, path: str) -> list[str]:
        handler, rest = self._resolve(path)
        return handler.list_files(rest)

    def list_directories(self, path: str) -> list[str]:
        handler, rest = self._resolve(path)
        return handler.list_directories(rest)