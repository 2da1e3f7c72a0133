import math

import pytest

from rabbik.vector import Vector2, Vector3


def test_vector2_constants_follow_screen_coordinates():
    assert Vector2.UP == Vector2(0, -1)
    assert Vector2.DOWN == -Vector2.UP
    assert Vector2.LEFT == -Vector2.RIGHT
    assert Vector2.ONE == Vector2.RIGHT + Vector2.DOWN


def test_vector2_add_sub_round_trip():
    a = Vector2(1.5, -2.0)
    b = Vector2(4.0, 0.25)
    assert (a + b) - b == a


def test_vector2_scalar_multiplication_commutes():
    v = Vector2(2.0, -3.0)
    assert v * 4 == 4 * v
    assert (v * 4) / 4 == v


def test_vector2_rtruediv_divides_scalar_by_components():
    v = Vector2(2.0, 4.0)
    result = 8.0 / v
    assert result.x * v.x == 8.0
    assert result.y * v.y == 8.0


def test_vector2_normalized_has_unit_length():
    assert math.isclose(Vector2(3.0, 7.0).normalized().length(), 1.0)


def test_vector2_normalizing_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vector2.ZERO.normalized()


def test_vector2_dot_with_itself_is_length_squared():
    v = Vector2(1.5, -2.5)
    assert Vector2.dot(v, v) == v.length_squared()
    assert math.isclose(v.length() ** 2, v.length_squared())


def test_vector2_cross_is_antisymmetric():
    a = Vector2(1.0, 2.0)
    b = Vector2(-3.0, 5.0)
    assert Vector2.cross(a, b) == -Vector2.cross(b, a)
    assert Vector2.cross(a, a) == 0


def test_vector2_lerp_endpoints():
    a = Vector2(1.0, 2.0)
    b = Vector2(5.0, -6.0)
    assert Vector2.lerp(a, b, 0) == a
    assert Vector2.lerp(a, b, 1) == b


def test_vector2_angle_between_perpendicular_axes():
    assert math.isclose(Vector2.angle_between(Vector2.RIGHT, Vector2.UP), math.pi / 2)
    assert Vector2.angle_between(Vector2(2.0, 2.0), Vector2(5.0, 5.0)) == pytest.approx(0.0, abs=1e-6)


def test_vector2_str():
    assert str(Vector2(1.0, 2.5)) == "(1.0, 2.5)"


def test_vector2_unary_plus_is_identity():
    v = Vector2(3.0, -1.0)
    assert +v == v


def test_vector2_multiplying_by_vector_is_unsupported():
    with pytest.raises(TypeError):
        Vector2(1, 2) * Vector2(3, 4)


def test_vector3_from_vector2():
    v = Vector3.from_vector2(Vector2(1.0, 2.0), 3.0)
    assert (v.x, v.y, v.z) == (1.0, 2.0, 3.0)
    assert Vector3.from_vector2(Vector2(1.0, 2.0)).z == 0


def test_vector3_cross_of_axes():
    assert Vector3.cross(Vector3.RIGHT, Vector3.UP) == Vector3.FORWARD
    assert Vector3.cross(Vector3.UP, Vector3.RIGHT) == Vector3.BACK


def test_vector3_cross_is_perpendicular():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-2.0, 0.5, 4.0)
    c = Vector3.cross(a, b)
    assert math.isclose(Vector3.dot(a, c), 0.0, abs_tol=1e-9)
    assert math.isclose(Vector3.dot(b, c), 0.0, abs_tol=1e-9)


def test_vector3_arithmetic_round_trip():
    a = Vector3(1.0, -2.0, 3.0)
    b = Vector3(0.5, 0.5, -4.0)
    assert (a + b) - b == a
    assert (a * 2) / 2 == a
    assert 2 * a == a * 2
    assert -(-a) == a
    assert +a == a


def test_vector3_rtruediv():
    v = Vector3(1.0, 2.0, 4.0)
    r = 4.0 / v
    assert (r.x * v.x, r.y * v.y, r.z * v.z) == (4.0, 4.0, 4.0)


def test_vector3_normalized_and_lengths():
    v = Vector3(2.0, -3.0, 6.0)
    assert math.isclose(v.normalized().length(), 1.0)
    assert Vector3.dot(v, v) == v.length_squared()


def test_vector3_lerp_and_angle():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-1.0, 0.0, 9.0)
    assert Vector3.lerp(a, b, 0) == a
    assert Vector3.lerp(a, b, 1) == b
    assert math.isclose(Vector3.angle_between(Vector3.UP, Vector3.DOWN), math.pi)


def test_vector3_str_lists_components():
    text = str(Vector3(1.0, 2.0, 3.0))
    assert text.startswith("(") and text.endswith(")")
    assert [float(p) for p in text[1:-1].split(", ")] == [1.0, 2.0, 3.0]


def test_vectors_are_hashable_and_equal_by_value():
    assert len({Vector3(1, 2, 3), Vector3(1, 2, 3), Vector3(3, 2, 1)}) == 2