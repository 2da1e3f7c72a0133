"""Parsed paths that address nodes and their properties."""

from __future__ import annotations


class NodePath:
    """A parsed node path such as ``/root/player:position:x``.

    The part before the first ``:`` is a ``/``-separated list of node names;
    the parts after it are sub-names. A leading ``/`` makes the path absolute.
    """

    __slots__ = ("_absolute", "_names", "_subnames")

    def __init__(self, path: str = "") -> None:
        self._absolute = path.startswith("/")
        node_part, *subnames = path.split(":")
        self._names = tuple(part for part in node_part.split("/") if part)
        self._subnames = tuple(part for part in subnames if part)

    @property
    def is_absolute(self) -> bool:
        return self._absolute

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    @property
    def subnames(self) -> tuple[str, ...]:
        return self._subnames

    @property
    def name_count(self) -> int:
        return len(self._names)

    def name(self, index: int) -> str:
        """Return the node name at ``index``."""
        if not 0 <= index < len(self._names):
            raise IndexError("index out of bounds")
        return self._names[index]

    @property
    def subname_count(self) -> int:
        return len(self._subnames)

    def subname(self, index: int) -> str:
        """Return the sub-name at ``index``."""
        if not 0 <= index < len(self._subnames):
            raise IndexError("index out of bounds")
        return self._subnames[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NodePath):
            return NotImplemented
        return (self._absolute, self._names, self._subnames) == (
            other._absolute,
            other._names,
            other._subnames,
        )

    def __hash__(self) -> int:
        return hash((self._absolute, self._names, self._subnames))

    def __str__(self) -> str:
        text = ("/" if self._absolute else "") + "/".join(self._names)
        return "".join([text, *(f":{sub}" for sub in self._subnames)])

    def __repr__(self) -> str:
        return f"NodePath({str(self)!r})"