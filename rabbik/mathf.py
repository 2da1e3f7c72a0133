"""Scalar math helpers and constants."""

from __future__ import annotations

import math

PI = 3.14159274
DEG2RAD = PI / 180
RAD2DEG = 180 / PI
INFINITY = math.inf
NAN = math.nan


def is_nan(value: float) -> bool:
    """Return True if ``value`` is NaN."""
    return math.isnan(value)


def is_infinity(value: float) -> bool:
    """Return True if ``value`` is positive or negative infinity."""
    return math.isinf(value)


def clamp(value: float, min_value: float = 0.0, max_value: float = 1.0) -> float:
    """Limit ``value`` to the range [min_value, max_value]."""
    if value < min_value:
        return min_value
    if value > max_value:
        return max_value
    return value


def lerp(a: float, b: float, time: float) -> float:
    """Linearly interpolate from ``a`` to ``b`` by ``time``."""
    return (b - a) * time + a


def sign(value: float) -> float:
    """Return -1, 1 or 0 according to the sign of ``value``."""
    if value < 0:
        return -1.0
    if value > 0:
        return 1.0
    return 0.0