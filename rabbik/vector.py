"""Two- and three-dimensional vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass

from rabbik import mathf

_Number = (int, float)


def _acos_clamped(value: float) -> float:
    return math.acos(mathf.clamp(value, -1.0, 1.0))


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def normalized(self) -> Vector2:
        """Return a vector of length 1 in the same direction."""
        length = self.length()
        return Vector2(self.x / length, self.y / length)

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, value: float) -> Vector2:
        if not isinstance(value, _Number):
            return NotImplemented
        return Vector2(self.x * value, self.y * value)

    def __rmul__(self, value: float) -> Vector2:
        if not isinstance(value, _Number):
            return NotImplemented
        return Vector2(value * self.x, value * self.y)

    def __truediv__(self, value: float) -> Vector2:
        if not isinstance(value, _Number):
            return NotImplemented
        return Vector2(self.x / value, self.y / value)

    def __rtruediv__(self, value: float) -> Vector2:
        if not isinstance(value, _Number):
            return NotImplemented
        return Vector2(value / self.x, value / self.y)

    def __neg__(self) -> Vector2:
        return self * -1

    def __pos__(self) -> Vector2:
        return self

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    @staticmethod
    def dot(a: Vector2, b: Vector2) -> float:
        return a.x * b.x + a.y * b.y

    @staticmethod
    def cross(a: Vector2, b: Vector2) -> float:
        return a.x * b.y - a.y * b.x

    @staticmethod
    def lerp(a: Vector2, b: Vector2, time: float) -> Vector2:
        return Vector2(mathf.lerp(a.x, b.x, time), mathf.lerp(a.y, b.y, time))

    @staticmethod
    def angle_between(a: Vector2, b: Vector2) -> float:
        """Return the angle in radians between ``a`` and ``b``."""
        return _acos_clamped(Vector2.dot(a.normalized(), b.normalized()))


Vector2.UP = Vector2(0, -1)
Vector2.DOWN = Vector2(0, 1)
Vector2.LEFT = Vector2(-1, 0)
Vector2.RIGHT = Vector2(1, 0)
Vector2.ONE = Vector2(1, 1)
Vector2.ZERO = Vector2(0, 0)


@dataclass(frozen=True)
class Vector3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_vector2(cls, vec2: Vector2, z: float = 0.0) -> Vector3:
        return cls(vec2.x, vec2.y, z)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalized(self) -> Vector3:
        """Return a vector of length 1 in the same direction."""
        length = self.length()
        return Vector3(self.x / length, self.y / length, self.z / length)

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, value: float) -> Vector3:
        if not isinstance(value, _Number):
            return NotImplemented
        return Vector3(self.x * value, self.y * value, self.z * value)

    def __rmul__(self, value: float) -> Vector3:
        if not isinstance(value, _Number):
            return NotImplemented
        return Vector3(value * self.x, value * self.y, value * self.z)

    def __truediv__(self, value: float) -> Vector3:
        if not isinstance(value, _Number):
            return NotImplemented
        return Vector3(self.x / value, self.y / value, self.z / value)

    def __rtruediv__(self, value: float) -> Vector3:
        if not isinstance(value, _Number):
            return NotImplemented
        return Vector3(value / self.x, value / self.y, value / self.z)

    def __neg__(self) -> Vector3:
        return self * -1

    def __pos__(self) -> Vector3:
        return self

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"

    @staticmethod
    def dot(a: Vector3, b: Vector3) -> float:
        return a.x * b.x + a.y * b.y + a.z * b.z

    @staticmethod
    def cross(a: Vector3, b: Vector3) -> Vector3:
        return Vector3(
            a.y * b.z - a.z * b.y,
            a.z * b.x - a.x * b.z,
            a.x * b.y - a.y * b.x,
        )

    @staticmethod
    def lerp(a: Vector3, b: Vector3, time: float) -> Vector3:
        return Vector3(
            mathf.lerp(a.x, b.x, time),
            mathf.lerp(a.y, b.y, time),
            mathf.lerp(a.z, b.z, time),
        )

    @staticmethod
    def angle_between(a: Vector3, b: Vector3) -> float:
        """Return the angle in radians between ``a`` and ``b``."""
        return _acos_clamped(Vector3.dot(a.normalized(), b.normalized()))


Vector3.UP = Vector3(0, 1, 0)
Vector3.DOWN = Vector3(0, -1, 0)
Vector3.LEFT = Vector3(-1, 0, 0)
Vector3.RIGHT = Vector3(1, 0, 0)
Vector3.FORWARD = Vector3(0, 0, 1)
Vector3.BACK = Vector3(0, 0, -1)
Vector3.ONE = Vector3(1, 1, 1)
Vector3.ZERO = Vector3(0, 0, 0)