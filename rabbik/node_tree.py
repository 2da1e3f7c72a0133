"""The default application loop: a tree of nodes."""

from __future__ import annotations

from rabbik import debug
from rabbik.app_loop import AppLoop
from rabbik.engine import Engine
from rabbik.node import Node
from rabbik.time import Time
from rabbik.vector import Vector2


def _active_engine() -> Engine:
    engine = Engine.get_instance()
    if engine is None:
        raise RuntimeError("No engine is active")
    return engine


class NodeTree(AppLoop):
    """Manages a tree of nodes; only nodes joined to the tree are active.

    With ``stop_when_no_window`` set, the loop stops once every window is gone.
    """

    def __init__(self) -> None:
        super().__init__()
        self.stop_when_no_window = True
        root = Node()
        # The root has no parent but sits at position 0 of the tree.
        root._index = 0
        root.set_name_unchecked("Root")
        self._root: Node | None = root

    @property
    def root(self) -> Node | None:
        """The root node, or None once the tree has stopped."""
        return self._root

    def _no_windows_left(self) -> bool:
        return (
            self.stop_when_no_window
            and _active_engine().window_system.window_count <= 0
        )

    def on_start(self) -> None:
        """Open the first window and bring the nodes into the tree."""
        window = _active_engine().window_system.create_window()
        window.title = "Rabbik Engine"
        window.size = Vector2(1280, 720)
        window.visible = True
        window.resizable = True
        window.maximize_button = True

        if self._root is not None:
            self._root.assign_tree(self)
            debug.info(self._root.tree_structure())

    def on_update(self, time: Time) -> None:
        if self._no_windows_left():
            self.should_run = False
        elif self._root is not None:
            self._root.propagate_update(time.delta)

    def on_physics_update(self, time: Time) -> None:
        if self._no_windows_left():
            self.should_run = False
        elif self._root is not None:
            self._root.propagate_physics_update(time.delta)

    def on_render(self) -> None:
        """The tree has nothing of its own to draw."""

    def on_stop(self) -> None:
        """Destroy every node below the root and drop the root."""
        if self._root is not None:
            self._root.destroy()
            self._root = None