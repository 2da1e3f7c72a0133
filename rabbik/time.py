"""Frame timing state."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Time:
    """Scaled and unscaled frame deltas and running totals."""

    scale: float = 1.0
    physics_scale: float = 1.0
    unscaled_physics_delta: float = 60.0
    unscaled_delta: float = 0.0
    total_frames: int = 0
    total: float = 0.0
    unscaled_total: float = 0.0

    @property
    def delta(self) -> float:
        """The last frame's delta multiplied by ``scale``."""
        return self.unscaled_delta * self.scale

    @property
    def physics_delta(self) -> float:
        """The physics delta multiplied by ``physics_scale``."""
        return self.unscaled_physics_delta * self.physics_scale

    def advance(self, unscaled_delta: float) -> None:
        """Record a new frame that took ``unscaled_delta`` seconds."""
        self.unscaled_delta = unscaled_delta
        self.unscaled_total += unscaled_delta
        self.total += self.delta
        self.total_frames += 1