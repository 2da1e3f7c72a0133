import math

import pytest

from rabbik.node import Node
from rabbik.node2d import Node2D
from rabbik.transform import TransformMatrix
from rabbik.vector import Vector2, Vector3


def test_defaults_give_identity():
    node = Node2D()
    assert node.position == Vector2(0, 0)
    assert node.scale == Vector2(1, 1)
    assert node.rotation == 0
    assert node.local_transform == TransformMatrix.identity()


def test_position_goes_to_translation_row():
    node = Node2D()
    node.position = Vector2(3, 4)
    assert node.local_transform[3] == (3.0, 4.0, 0.0, 1.0)


def test_scale_goes_to_diagonal():
    node = Node2D()
    node.scale = Vector2(2, 5)
    matrix = node.local_transform
    assert (matrix[0][0], matrix[1][1], matrix[2][2]) == (2.0, 5.0, 1.0)


def test_rotation_matches_rotate_matrix():
    node = Node2D()
    node.rotation = math.pi / 3
    expected = TransformMatrix.rotate(Vector3(0, 0, 1), math.pi / 3)
    assert node.local_transform.flattened() == pytest.approx(expected.flattened())


def test_translation_unaffected_by_rotation_and_scale():
    node = Node2D()
    node.rotation = 1.2
    node.scale = Vector2(2, 3)
    node.position = Vector2(-1, 7)
    assert node.local_transform[3] == pytest.approx((-1.0, 7.0, 0.0, 1.0))


def test_transform_is_cached_until_changed():
    node = Node2D()
    first = node.local_transform
    assert node.local_transform is first
    node.position = Vector2(1, 1)
    assert node.local_transform is not first
    assert node.local_transform[3][0] == 1.0


def test_node2d_is_a_tree_node():
    parent = Node()
    child = Node2D()
    parent.add_child(child)
    assert child.parent is parent
    assert child.index == 0