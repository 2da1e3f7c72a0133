import pytest

from rabbik.time import Time


def test_defaults():
    t = Time()
    assert t.scale == 1.0
    assert t.delta == 0.0
    assert t.total_frames == 0
    assert t.physics_delta == 60.0


def test_delta_is_scaled():
    t = Time(scale=2.0)
    t.advance(0.25)
    assert t.unscaled_delta == 0.25
    assert t.delta == pytest.approx(0.25 * 2.0)


def test_advance_accumulates_totals():
    t = Time(scale=0.5)
    deltas = [0.1, 0.2, 0.3]
    for d in deltas:
        t.advance(d)
    assert t.total_frames == len(deltas)
    assert t.unscaled_total == pytest.approx(sum(deltas))
    assert t.total == pytest.approx(sum(deltas) * 0.5)


def test_physics_delta_is_scaled():
    t = Time(physics_scale=3.0, unscaled_physics_delta=0.02)
    assert t.physics_delta == pytest.approx(0.02 * 3.0)


def test_scale_change_only_affects_later_frames():
    t = Time()
    t.advance(1.0)
    t.scale = 0.0
    t.advance(1.0)
    assert t.total == pytest.approx(1.0)
    assert t.unscaled_total == pytest.approx(2.0)