"""A node with a 2D position, scale and rotation."""

from __future__ import annotations

from rabbik.node import Node
from rabbik.transform import TransformMatrix
from rabbik.vector import Vector2, Vector3


class Node2D(Node):
    """A node placed in 2D space; rotation is in radians about the Z axis."""

    def __init__(self) -> None:
        super().__init__()
        self._position = Vector2(0, 0)
        self._scale = Vector2(1, 1)
        self._rotation = 0.0
        self._local_transform = TransformMatrix.identity()
        self._local_transform_dirty = True

    @property
    def position(self) -> Vector2:
        return self._position

    @position.setter
    def position(self, value: Vector2) -> None:
        self._position = value
        self._local_transform_dirty = True

    @property
    def scale(self) -> Vector2:
        return self._scale

    @scale.setter
    def scale(self, value: Vector2) -> None:
        self._scale = value
        self._local_transform_dirty = True

    @property
    def rotation(self) -> float:
        return self._rotation

    @rotation.setter
    def rotation(self, value: float) -> None:
        self._rotation = value
        self._local_transform_dirty = True

    @property
    def local_transform(self) -> TransformMatrix:
        """The local transform, rebuilt only after a change."""
        if self._local_transform_dirty:
            self.update_local_transform()
        return self._local_transform

    def update_local_transform(self) -> None:
        t = TransformMatrix.identity()
        t = TransformMatrix.rotate(Vector3(0, 0, 1), self._rotation) @ t
        t = TransformMatrix.scale(Vector3.from_vector2(self._scale, 1)) @ t
        t = TransformMatrix.translate(Vector3.from_vector2(self._position)) @ t
        self._local_transform = t
        self._local_transform_dirty = False