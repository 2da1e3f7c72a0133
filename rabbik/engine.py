"""The engine: owns the subsystems and drives the application loop."""

from __future__ import annotations

import time as systime

from rabbik import debug
from rabbik.app_loop import AppLoop
from rabbik.filesystem import FileSystem
from rabbik.time import Time
from rabbik.window import WindowSystem

_SLEEP_MARGIN = 0.005


class Engine:
    """Holds everything an application needs to run.

    The most recently created engine is the active one, available through
    :meth:`get_instance` until it is closed.
    """

    _instance: Engine | None = None

    def __init__(self, window_system: WindowSystem) -> None:
        Engine._instance = self
        self._app_loop: AppLoop | None = None
        self._time = Time()
        self._target_fps = 60.0
        self._fps = 0.0
        self._fps_update_frequency = 1.0

        debug.info("Rabbik Engine Development")
        debug.info("===== Initializing =====")
        debug.info("==> File System")
        self._file_system = FileSystem()
        debug.info("==> Window System")
        self._window_system = window_system
        debug.info("===== Ready =====")

    @staticmethod
    def get_instance() -> Engine | None:
        """Return the active engine, or None."""
        return Engine._instance

    def close(self) -> None:
        """Stop being the active engine."""
        if Engine._instance is self:
            Engine._instance = None

    def __enter__(self) -> Engine:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def app_loop(self) -> AppLoop | None:
        return self._app_loop

    @app_loop.setter
    def app_loop(self, loop: AppLoop | None) -> None:
        self._app_loop = loop

    @property
    def time(self) -> Time:
        return self._time

    @property
    def target_fps(self) -> float:
        """The update rate limit; zero or less means no limit."""
        return self._target_fps

    @target_fps.setter
    def target_fps(self, value: float) -> None:
        self._target_fps = float(value)

    @property
    def fps(self) -> float:
        """The measured update rate."""
        return self._fps

    @property
    def fps_update_frequency(self) -> float:
        """Seconds between updates of the measured rate."""
        return self._fps_update_frequency

    @fps_update_frequency.setter
    def fps_update_frequency(self, value: float) -> None:
        self._fps_update_frequency = float(value)

    @property
    def window_system(self) -> WindowSystem:
        return self._window_system

    @property
    def file_system(self) -> FileSystem:
        return self._file_system

    def _frame_period(self) -> float:
        return 1.0 / self._target_fps if self._target_fps > 0 else 0.0

    def run(self) -> None:
        """Run the assigned loop until it stops; blocks until then."""
        debug.info("===== Starting =====")
        loop = self._app_loop
        if loop is None:
            debug.fatal("No AppLoop has been assigned.")

        loop.should_run = True
        loop.on_start()
        debug.info("App loop started.")

        start = systime.perf_counter()
        last_update = start - self._frame_period()
        next_update = start
        last_fps_check = start
        update_times = 0

        while loop.should_run:
            now = systime.perf_counter()
            if now < next_update:
                continue

            self._window_system.update()
            self._time.advance(now - last_update)
            loop.on_update(self._time)
            loop.on_render()

            update_times += 1
            elapsed = now - last_fps_check
            if elapsed >= self._fps_update_frequency and elapsed > 0:
                self._fps = update_times / elapsed
                update_times = 0
                last_fps_check = now

            last_update = now
            period = self._frame_period()
            if period > 0:
                next_update += period
                while next_update < last_update:
                    next_update += period
            else:
                next_update = last_update

            remaining = next_update - systime.perf_counter() - _SLEEP_MARGIN
            if remaining > 0:
                systime.sleep(remaining)

        loop.on_stop()
        debug.info("AppLoop finished running.")