import math

import pytest

from rabbik import mathf


@pytest.mark.parametrize(
    "value, low, high, expected",
    [(5.0, 0.0, 1.0, 1.0), (-2.0, 0.0, 1.0, 0.0), (0.25, 0.0, 1.0, 0.25), (7.0, 3.0, 10.0, 7.0)],
)
def test_clamp(value, low, high, expected):
    assert mathf.clamp(value, low, high) == expected


def test_clamp_defaults_to_unit_range():
    assert mathf.clamp(3.5) == 1.0
    assert mathf.clamp(-3.5) == 0.0


@pytest.mark.parametrize("a, b", [(2.0, 4.0), (-1.5, 9.0), (0.0, 0.0)])
def test_lerp_endpoints(a, b):
    assert mathf.lerp(a, b, 0) == a
    assert mathf.lerp(a, b, 1) == b


def test_lerp_is_monotonic_between_endpoints():
    values = [mathf.lerp(1.0, 5.0, t / 10) for t in range(11)]
    assert values == sorted(values)


def test_sign():
    assert mathf.sign(-3.2) == -1.0
    assert mathf.sign(8.0) == 1.0
    assert mathf.sign(0.0) == 0.0


def test_nan_and_infinity_checks():
    assert mathf.is_nan(mathf.NAN)
    assert not mathf.is_nan(1.0)
    assert mathf.is_infinity(mathf.INFINITY)
    assert mathf.is_infinity(-mathf.INFINITY)
    assert not mathf.is_infinity(1.0)


def test_degree_radian_conversion_round_trip():
    radians = mathf.clamp(90 * mathf.DEG2RAD, 0.0, 2 * math.pi)
    assert math.isclose(radians * mathf.RAD2DEG, 90)