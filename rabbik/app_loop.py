"""The interface the engine drives each frame."""

from __future__ import annotations

from abc import ABC, abstractmethod

from rabbik.time import Time


class AppLoop(ABC):
    """Controls how the application runs its logic."""

    def __init__(self) -> None:
        self._should_run = False

    @abstractmethod
    def on_start(self) -> None:
        """Called when the loop starts; do initialisation here."""

    @abstractmethod
    def on_update(self, time: Time) -> None:
        """Called every frame update."""

    @abstractmethod
    def on_physics_update(self, time: Time) -> None:
        """Called every physics update."""

    @abstractmethod
    def on_render(self) -> None:
        """Called after each frame update to draw."""

    @abstractmethod
    def on_stop(self) -> None:
        """Called after ``should_run`` becomes False; do cleanup here."""

    @property
    def should_run(self) -> bool:
        """Whether the engine keeps running this loop."""
        return self._should_run

    @should_run.setter
    def should_run(self, value: bool) -> None:
        self._should_run = bool(value)