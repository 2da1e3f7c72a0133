"""RGBA colours with float components."""

from __future__ import annotations

from dataclasses import dataclass

from rabbik import mathf


@dataclass(frozen=True)
class Color:
    """An immutable RGBA colour with components usually in [0, 1]."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    @classmethod
    def from8(cls, r: int = 0, g: int = 0, b: int = 0, a: int = 255) -> Color:
        """Build a colour from 8-bit channel values."""
        for channel in (r, g, b, a):
            if not 0 <= channel <= 255:
                raise ValueError(f"channel value {channel} is outside 0..255")
        return cls(r / 255.0, g / 255.0, b / 255.0, a / 255.0)

    @staticmethod
    def lerp(start: Color, end: Color, time: float) -> Color:
        """Interpolate each channel from ``start`` to ``end``."""
        return Color(
            mathf.lerp(start.r, end.r, time),
            mathf.lerp(start.g, end.g, time),
            mathf.lerp(start.b, end.b, time),
            mathf.lerp(start.a, end.a, time),
        )


Color.CLEAR = Color(0, 0, 0, 0)
Color.BLACK = Color(0, 0, 0, 1)
Color.WHITE = Color(1, 1, 1, 1)
Color.RED = Color(1, 0, 0, 1)
Color.GREEN = Color(0, 1, 0, 1)
Color.BLUE = Color(0, 0, 1, 1)