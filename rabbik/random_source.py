"""A seedable pseudo-random number generator."""

from __future__ import annotations

import random
import time


class RandomSource:
    """Pseudo-random numbers; seeded from the clock when no seed is given."""

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = time.time_ns() & 0xFFFFFFFF
        self._engine = random.Random(seed)

    def next_int(self, min_value: int, max_value: int) -> int:
        """Return an integer in [min_value, max_value); min_value if they are equal."""
        if min_value > max_value:
            raise ValueError("min_value cannot be greater than max_value")
        if min_value == max_value:
            return min_value
        return self._engine.randrange(min_value, max_value)

    def _next_real(self, min_value: float, max_value: float) -> float:
        if min_value > max_value:
            raise ValueError("min_value cannot be greater than max_value")
        value = min_value + (max_value - min_value) * self._engine.random()
        # Rounding can land exactly on the upper bound; keep the range half-open.
        return min_value if value >= max_value and max_value > min_value else value

    def next_float(self, min_value: float = 0.0, max_value: float = 1.0) -> float:
        """Return a float in [min_value, max_value)."""
        return self._next_real(min_value, max_value)

    def next_double(self, min_value: float = 0.0, max_value: float = 1.0) -> float:
        """Return a double-precision float in [min_value, max_value)."""
        return self._next_real(min_value, max_value)