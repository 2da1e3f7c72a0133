"""Quaternions and 4x4 transform matrices."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence

from rabbik.vector import Vector3

_IDENTITY_ROWS = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)


def _with_entries(entries: dict[tuple[int, int], float]) -> TransformMatrix:
    """Return the identity matrix with the given cells replaced."""
    rows = [list(row) for row in _IDENTITY_ROWS]
    for (row, column), value in entries.items():
        rows[row][column] = value
    return TransformMatrix(rows)


class TransformMatrix:
    """An immutable 4x4 matrix; translation lives in the last row."""

    __slots__ = ("_rows",)

    def __init__(self, rows: Iterable[Sequence[float]] | None = None) -> None:
        if rows is None:
            rows = _IDENTITY_ROWS
        converted = tuple(tuple(float(value) for value in row) for row in rows)
        if len(converted) != 4 or any(len(row) != 4 for row in converted):
            raise ValueError("a transform matrix needs 4 rows of 4 values")
        self._rows = converted

    @classmethod
    def identity(cls) -> TransformMatrix:
        return cls(_IDENTITY_ROWS)

    def __getitem__(self, index: int) -> tuple[float, float, float, float]:
        return self._rows[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TransformMatrix):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        return f"TransformMatrix({[list(row) for row in self._rows]!r})"

    def __matmul__(self, other):
        """Combine with a child matrix, or transform a vector.

        For a matrix, the result applies ``other`` first and then ``self``
        to row vectors. For a :class:`Vector3`, the upper 3x3 part is applied.
        """
        if isinstance(other, TransformMatrix):
            columns = list(zip(*self._rows))
            return TransformMatrix(
                [
                    [sum(a * b for a, b in zip(row, column)) for column in columns]
                    for row in other._rows
                ]
            )
        if isinstance(other, Vector3):
            components = (other.x, other.y, other.z)
            return Vector3(
                *(sum(a * b for a, b in zip(row[:3], components)) for row in self._rows[:3])
            )
        return NotImplemented

    def flattened(self) -> tuple[float, ...]:
        """Return the 16 values in row-major order."""
        return tuple(value for row in self._rows for value in row)

    @staticmethod
    def translate(value: Vector3) -> TransformMatrix:
        return _with_entries({(3, 0): value.x, (3, 1): value.y, (3, 2): value.z})

    @staticmethod
    def scale(value: Vector3) -> TransformMatrix:
        return _with_entries({(0, 0): value.x, (1, 1): value.y, (2, 2): value.z})

    @staticmethod
    def rotate(axis: Vector3, angle: float) -> TransformMatrix:
        return Quaternion.from_axis_angle(axis, angle).to_transform_matrix()

    @staticmethod
    def ortho(
        left: float, right: float, bottom: float, top: float, near: float, far: float
    ) -> TransformMatrix:
        return _with_entries(
            {
                (0, 0): 2 / (right - left),
                (1, 1): 2 / (top - bottom),
                (2, 2): -2 / (far - near),
                (3, 0): -(right + left) / (right - left),
                (3, 1): -(top + bottom) / (top - bottom),
                (3, 2): -(far + near) / (far - near),
            }
        )

    @staticmethod
    def perspective(fov: float, aspect: float, near: float, far: float) -> TransformMatrix:
        tan_fov = math.tan(fov / 2)
        return _with_entries(
            {
                (0, 0): 1 / (aspect * tan_fov),
                (1, 1): 1 / tan_fov,
                (2, 2): -(far + near) / (far - near),
                (2, 3): -1.0,
                (3, 2): -(2 * far * near) / (far - near),
                (3, 3): 0.0,
            }
        )

    @staticmethod
    def look_at(position: Vector3, target: Vector3) -> TransformMatrix:
        up = Vector3(0, 1, 0)
        f = (target - position).normalized()
        s = Vector3.cross(f, up).normalized()
        u = Vector3.cross(s, f)
        return _with_entries(
            {
                (0, 0): s.x,
                (1, 0): s.y,
                (2, 0): s.z,
                (0, 1): u.x,
                (1, 1): u.y,
                (2, 1): u.z,
                (0, 2): -f.x,
                (1, 2): -f.y,
                (2, 2): -f.z,
                (3, 0): -Vector3.dot(s, position),
                (3, 1): -Vector3.dot(u, position),
                (3, 2): Vector3.dot(f, position),
            }
        )


@dataclass(frozen=True)
class Quaternion:
    """An immutable rotation quaternion; the default is the identity."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    NORMALIZE_TOLERANCE = 0.00001

    def squared_magnitude(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w

    def magnitude(self) -> float:
        return math.sqrt(self.squared_magnitude())

    def normalized(self) -> Quaternion:
        """Return a unit quaternion; left as is when zero or already close to unit."""
        mag2 = self.squared_magnitude()
        if mag2 != 0 and abs(mag2 - 1) > self.NORMALIZE_TOLERANCE:
            mag = math.sqrt(mag2)
            return Quaternion(self.x / mag, self.y / mag, self.z / mag, self.w / mag)
        return self

    def conjugated(self) -> Quaternion:
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def __mul__(self, other):
        """Compose with a quaternion, or rotate the normalised form of a vector."""
        if isinstance(other, Quaternion):
            return Quaternion(
                self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y,
                self.w * other.y + self.y * other.w + self.z * other.x - self.x * other.z,
                self.w * other.z + self.z * other.w + self.x * other.y - self.y * other.x,
                self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z,
            )
        if isinstance(other, Vector3):
            n = other.normalized()
            rotated = self * (Quaternion(n.x, n.y, n.z, 0.0) * self.conjugated())
            return Vector3(rotated.x, rotated.y, rotated.z)
        return NotImplemented

    @staticmethod
    def from_axis_angle(axis: Vector3, angle: float) -> Quaternion:
        half = angle * 0.5
        n = axis.normalized()
        sin_half = math.sin(half)
        return Quaternion(n.x * sin_half, n.y * sin_half, n.z * sin_half, math.cos(half))

    @staticmethod
    def from_euler(angle: Vector3) -> Quaternion:
        """Build from pitch (x), yaw (y) and roll (z) in radians."""
        p, y, r = angle.x / 2.0, angle.y / 2.0, angle.z / 2.0
        sinp, siny, sinr = math.sin(p), math.sin(y), math.sin(r)
        cosp, cosy, cosr = math.cos(p), math.cos(y), math.cos(r)
        return Quaternion(
            sinr * cosp * cosy - cosr * sinp * siny,
            cosr * sinp * cosy + sinr * cosp * siny,
            cosr * cosp * siny - sinr * sinp * cosy,
            cosr * cosp * cosy + sinr * sinp * siny,
        ).normalized()

    def to_transform_matrix(self) -> TransformMatrix:
        x, y, z, w = self.x, self.y, self.z, self.w
        x2, y2, z2 = x * x, y * y, z * z
        xy, xz, yz = x * y, x * z, y * z
        wx, wy, wz = w * x, w * y, w * z
        return _with_entries(
            {
                (0, 0): 1 - 2 * (y2 + z2),
                (0, 1): 2 * (xy + wz),
                (0, 2): 2 * (xz - wy),
                (1, 0): 2 * (xy - wz),
                (1, 1): 1 - 2 * (x2 + z2),
                (1, 2): 2 * (yz + wx),
                (2, 0): 2 * (xz + wy),
                (2, 1): 2 * (yz - wx),
                (2, 2): 1 - 2 * (x2 + y2),
            }
        )