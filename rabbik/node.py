"""The scene-tree node and its naming rules."""

from __future__ import annotations

import itertools
from collections.abc import Callable
from enum import Enum
from typing import Any

from rabbik import debug

_AUTO_NAME_PREFIX = "@@"
_ORDINAL_LIMIT = 25565


class NodeError(RuntimeError):
    """Raised when a node operation is not allowed."""


class ChildNameValidation(Enum):
    """How a colliding child name is replaced."""

    NOT_SPECIFIED = "not_specified"
    ORDINAL = "ordinal"
    FAST = "fast"


class Node:
    """A node in a tree of game objects."""

    INVALID_CHARS = (".", "/", ":", "\r", "\n")
    _auto_names = itertools.count()

    def __init__(self) -> None:
        self._name = self.generate_auto_name()
        self._children: list[Node] = []
        self._parent: Node | None = None
        self._index = -1
        self._tree: Any = None
        self._children_locked = False
        self._listeners: dict[str, list[Callable[..., None]]] = {}

    # Hierarchy

    @property
    def parent(self) -> Node | None:
        return self._parent

    @property
    def has_parent(self) -> bool:
        return self._parent is not None

    @property
    def children_count(self) -> int:
        return len(self._children)

    @property
    def children(self) -> tuple[Node, ...]:
        return tuple(self._children)

    def child_at(self, index: int) -> Node:
        if not 0 <= index < len(self._children):
            raise IndexError("index out of bounds")
        return self._children[index]

    def child_by_name(self, name: str) -> Node | None:
        if not name:
            return None
        return next((child for child in self._children if child._name == name), None)

    def is_child(self, node: Node | None) -> bool:
        return node is not None and any(child is node for child in self._children)

    def add_child(self, node: Node, index: int = -1) -> None:
        """Insert ``node`` as a child at ``index``; -1 appends it."""
        if not self.can_add_child:
            raise NodeError(
                "The node is busy preparing its children. Do not add or remove children "
                "of the parent in on_entered_tree(), on_ready() or on_exiting_tree()."
            )
        if node is None:
            raise NodeError("node is None")
        if node is self:
            raise NodeError("node can't be a child of itself")
        if index > len(self._children):
            raise IndexError("index out of bounds")
        if node.has_parent:
            raise NodeError("node already has a parent")
        if index < 0:
            index = len(self._children)

        node._name = self.validate_child_name(node._name, None, node._name, self)
        self._children.insert(index, node)
        node._parent = self
        self._reindex(index)
        node.assign_tree(self._tree)

    def remove_child(self, child: Node) -> bool:
        """Detach ``child``; return False if it is not a child of this node."""
        if child is None:
            raise NodeError("child is None")
        if child is self:
            raise NodeError("child can't be itself")
        if not child.has_parent:
            return False
        position = child._index
        if not (0 <= position < len(self._children) and self._children[position] is child):
            return False

        child.assign_tree(None)
        child._parent = None
        del self._children[position]
        self._reindex(position)
        child._index = -1
        return True

    def _reindex(self, start: int) -> None:
        for position, child in enumerate(self._children[start:], start):
            child._index = position

    @property
    def can_add_child(self) -> bool:
        """False while the node is preparing or releasing its children."""
        return not self._children_locked

    @property
    def index(self) -> int:
        """Position inside the parent, or -1 without a parent."""
        return self._index

    def destroy(self) -> None:
        """Destroy all children, last first, and detach from the parent."""
        while self._children:
            self._children[-1].destroy()
        if self._parent is not None:
            self._parent.remove_child(self)

    # Naming

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, name: str) -> None:
        if name == self._name:
            return
        # Names starting with @@ are reserved for automatic names.
        if name.startswith(_AUTO_NAME_PREFIX):
            return
        parent = self._parent
        self._name = self.validate_child_name(
            self._name, parent, self.validate_name(name), parent
        )

    def set_name_unchecked(self, name: str) -> None:
        """Set the name without any validation."""
        self._name = name

    @staticmethod
    def validate_name(name: str) -> str:
        """Remove invalid characters; fall back to an automatic name if empty."""
        result = name
        for char in Node.INVALID_CHARS:
            result = result.replace(char, "")
        return result or Node.generate_auto_name()

    @staticmethod
    def validate_child_name(
        original_name: str,
        original_parent: Node | None,
        target_name: str,
        target_parent: Node | None,
        method: ChildNameValidation = ChildNameValidation.NOT_SPECIFIED,
    ) -> str:
        """Return a name for a node moving into ``target_parent`` that does not collide."""
        if target_parent is None:
            return target_name
        if original_parent is target_parent and original_name == target_name:
            return target_name
        if target_parent.child_by_name(target_name) is None:
            return target_name

        if method is ChildNameValidation.NOT_SPECIFIED:
            method = ChildNameValidation.FAST

        if method is ChildNameValidation.ORDINAL:
            stem = target_name.rstrip("0123456789")
            for number in range(1, _ORDINAL_LIMIT + 1):
                candidate = f"{stem}{number}"
                if original_parent is target_parent and candidate == original_name:
                    return original_name
                if target_parent.child_by_name(candidate) is None:
                    return candidate
        return Node.generate_auto_name()

    @staticmethod
    def generate_auto_name() -> str:
        """Return a fresh automatic name that no other automatic name shares."""
        return f"{_AUTO_NAME_PREFIX}{next(Node._auto_names)}"

    # Tree membership

    @property
    def tree(self) -> Any:
        return self._tree

    @property
    def is_in_tree(self) -> bool:
        return self._tree is not None

    def assign_tree(self, tree: Any) -> None:
        """Enter ``tree``, or leave the current tree when ``tree`` is None."""
        if self._tree is None and tree is None:
            return
        if self._tree is not None and tree is not None:
            debug.fatal("Cannot assign the tree when the node is already in another tree!")

        if tree is not None:
            self._tree = tree
            self._children_locked = True
            try:
                self.on_entered_tree()
                for child in tuple(self._children):
                    child.assign_tree(tree)
                self.on_ready()
            finally:
                self._children_locked = False
        else:
            self._children_locked = True
            try:
                for child in tuple(self._children):
                    child.assign_tree(None)
                self.on_exiting_tree()
            finally:
                self._children_locked = False
            self._tree = None

    def propagate_update(self, delta: float) -> None:
        self.on_update(delta)
        for child in tuple(self._children):
            child.propagate_update(delta)

    def propagate_physics_update(self, delta: float) -> None:
        self.on_physics_update(delta)
        for child in tuple(self._children):
            child.propagate_physics_update(delta)

    # Hooks

    def _connect(self, event: str, callback: Callable[..., None]) -> None:
        """Register ``callback`` to run when the hook named ``event`` fires."""
        self._listeners.setdefault(event, []).append(callback)

    def _notify(self, event: str, *args: Any) -> None:
        for callback in tuple(self._listeners.get(event, ())):
            callback(*args)

    def on_entered_tree(self) -> None:
        """Called right after this node entered the tree."""
        self._notify("entered_tree")

    def on_ready(self) -> None:
        """Called once all children have entered the tree."""
        self._notify("ready")

    def on_update(self, delta: float) -> None:
        """Called on each logic update with the elapsed seconds."""
        self._notify("update", delta)

    def on_physics_update(self, delta: float) -> None:
        """Called on each physics update with the elapsed seconds."""
        self._notify("physics_update", delta)

    def on_exiting_tree(self) -> None:
        """Called right before this node leaves the tree."""
        self._notify("exiting_tree")

    # Diagnostics

    def tree_structure(self, level: int = 0) -> str:
        """Render this node and its descendants as an indented outline."""
        is_last = False
        parent = self._parent
        if parent is not None and parent._parent is not None:
            is_last = parent._index == parent._parent.children_count - 1

        prefix = ""
        for depth in range(level):
            bar = "│  " if depth < level - 1 and not is_last else ""
            prefix = f"{bar}\t{prefix}"

        symbol = ""
        if level > 0:
            if parent is None:
                symbol = "┌  "
            elif self._index == parent.children_count - 1:
                symbol = "└  "
            else:
                symbol = "├  "

        text = f"{prefix}{symbol}{self._index}: {self._name} ({type(self).__name__})\n"
        return text + "".join(child.tree_structure(level + 1) for child in self._children)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, index={self._index})"