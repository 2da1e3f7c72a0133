"""Native windows and the system that owns them."""

from __future__ import annotations

import itertools
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass

from rabbik.vector import Vector2

WindowID = int


@dataclass(frozen=True)
class MonitorInfo:
    """Placement and density of one display."""

    name: str
    position: Vector2
    size: Vector2
    dpi: float


class Window(ABC):
    """A native window of the platform.

    Subclasses create the native window in their constructor and report
    through ``is_valid`` whether that worked. Every property setter raises
    when the platform refuses the change.
    """

    NULL_ID: WindowID = -1

    def __init__(self) -> None:
        self._id: WindowID = Window.NULL_ID
        self._manager: WindowSystem | None = None

    @property
    def id(self) -> WindowID:
        """The id given by the owning window system, or ``NULL_ID``."""
        return self._id

    @property
    def manager(self) -> WindowSystem | None:
        """The window system that owns this window."""
        return self._manager

    @property
    @abstractmethod
    def is_valid(self) -> bool:
        """Whether the native window exists."""

    @property
    @abstractmethod
    def title(self) -> str:
        """The window title."""

    @title.setter
    @abstractmethod
    def title(self, value: str) -> None:
        """Change the window title."""

    @property
    @abstractmethod
    def position(self) -> Vector2:
        """The position of the content area on screen."""

    @position.setter
    @abstractmethod
    def position(self, value: Vector2) -> None:
        """Move the content area on screen."""

    @property
    @abstractmethod
    def size(self) -> Vector2:
        """The size of the content area."""

    @size.setter
    @abstractmethod
    def size(self, value: Vector2) -> None:
        """Resize the content area."""

    @property
    @abstractmethod
    def visible(self) -> bool:
        """Whether the window is shown."""

    @visible.setter
    @abstractmethod
    def visible(self, value: bool) -> None:
        """Show or hide the window."""

    @property
    @abstractmethod
    def minimized(self) -> bool:
        """Whether the window is minimised."""

    @minimized.setter
    @abstractmethod
    def minimized(self, value: bool) -> None:
        """Minimise or restore the window."""

    @property
    @abstractmethod
    def maximized(self) -> bool:
        """Whether the window is maximised."""

    @maximized.setter
    @abstractmethod
    def maximized(self, value: bool) -> None:
        """Maximise or restore the window."""

    @property
    @abstractmethod
    def close_button(self) -> bool:
        """Whether the close button is enabled."""

    @close_button.setter
    @abstractmethod
    def close_button(self, value: bool) -> None:
        """Enable or disable the close button."""

    @property
    @abstractmethod
    def maximize_button(self) -> bool:
        """Whether the maximise button is present."""

    @maximize_button.setter
    @abstractmethod
    def maximize_button(self, value: bool) -> None:
        """Add or remove the maximise button."""

    @property
    @abstractmethod
    def minimize_button(self) -> bool:
        """Whether the minimise button is present."""

    @minimize_button.setter
    @abstractmethod
    def minimize_button(self, value: bool) -> None:
        """Add or remove the minimise button."""

    @property
    @abstractmethod
    def border(self) -> bool:
        """Whether the window has a border and caption."""

    @border.setter
    @abstractmethod
    def border(self, value: bool) -> None:
        """Add or remove the border and caption."""

    @property
    @abstractmethod
    def resizable(self) -> bool:
        """Whether the user can resize the window."""

    @resizable.setter
    @abstractmethod
    def resizable(self, value: bool) -> None:
        """Allow or forbid resizing by the user."""


class WindowSystem(ABC):
    """Creates, tracks and destroys the native windows of the platform."""

    def __init__(self) -> None:
        self._ids = itertools.count(Window.NULL_ID + 1)
        self._windows: dict[WindowID, Window] = {}
        self._lock = threading.Lock()

    @abstractmethod
    def new_window(self) -> Window:
        """Build a platform window with the default style, hidden."""

    @abstractmethod
    def update(self) -> None:
        """Process pending platform window events."""

    def create_window(self) -> Window:
        """Create, register and return a new window.

        Raises RuntimeError if the native window could not be initialised.
        """
        window = self.new_window()
        with self._lock:
            window._id = next(self._ids)
            window._manager = self
            self._windows[window._id] = window
        if not window.is_valid:
            self.destroy_window(window.id)
            raise RuntimeError("Failed to initialize a window")
        return window

    def get_window(self, window_id: WindowID) -> Window | None:
        """Return the window with ``window_id``, or None if there is none."""
        with self._lock:
            return self._windows.get(window_id)

    @property
    def window_count(self) -> int:
        with self._lock:
            return len(self._windows)

    def window_exists(self, window_id: WindowID) -> bool:
        with self._lock:
            return window_id in self._windows

    def destroy_window(self, window_id: WindowID) -> None:
        """Forget the window with ``window_id``; KeyError if it does not exist."""
        with self._lock:
            if window_id not in self._windows:
                raise KeyError(f"window id {window_id} not found")
            del self._windows[window_id]

    def destroy_all_windows(self) -> None:
        with self._lock:
            self._windows.clear()