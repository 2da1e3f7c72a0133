"""A node with a 3D position, scale and rotation."""

from __future__ import annotations

from rabbik.node import Node
from rabbik.transform import Quaternion, TransformMatrix
from rabbik.vector import Vector3


class Node3D(Node):
    """A node placed in 3D space; rotation is a quaternion."""

    def __init__(self) -> None:
        super().__init__()
        self._position = Vector3(0, 0, 0)
        self._scale = Vector3(1, 1, 1)
        self._rotation = Quaternion()
        self._local_transform = TransformMatrix.identity()
        self._local_transform_dirty = True

    @property
    def position(self) -> Vector3:
        return self._position

    @position.setter
    def position(self, value: Vector3) -> None:
        self._position = value
        self._local_transform_dirty = True

    @property
    def scale(self) -> Vector3:
        return self._scale

    @scale.setter
    def scale(self, value: Vector3) -> None:
        self._scale = value
        self._local_transform_dirty = True

    @property
    def rotation(self) -> Quaternion:
        return self._rotation

    @rotation.setter
    def rotation(self, value: Quaternion) -> None:
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
        t = self._rotation.to_transform_matrix() @ t
        t = TransformMatrix.scale(self._scale) @ t
        t = TransformMatrix.translate(self._position) @ t
        self._local_transform = t
        self._local_transform_dirty = False