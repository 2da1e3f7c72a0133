import pytest

from rabbik.random_source import RandomSource


def test_same_seed_gives_same_sequence():
    a = RandomSource(1234)
    b = RandomSource(1234)
    assert [a.next_int(0, 1000) for _ in range(20)] == [b.next_int(0, 1000) for _ in range(20)]
    assert [a.next_double() for _ in range(5)] == [b.next_double() for _ in range(5)]


def test_next_int_is_in_half_open_range():
    rng = RandomSource(7)
    values = {rng.next_int(-3, 4) for _ in range(500)}
    assert values <= set(range(-3, 4))
    assert 4 not in values


def test_next_int_single_value_range():
    rng = RandomSource(7)
    assert all(rng.next_int(0, 1) == 0 for _ in range(50))


def test_next_int_equal_bounds_returns_min():
    assert RandomSource(3).next_int(5, 5) == 5


def test_next_int_rejects_inverted_bounds():
    with pytest.raises(ValueError):
        RandomSource(3).next_int(5, 2)


def test_next_float_defaults_to_unit_interval():
    rng = RandomSource(99)
    values = [rng.next_float() for _ in range(500)]
    assert all(0.0 <= v < 1.0 for v in values)


def test_next_double_respects_bounds():
    rng = RandomSource(99)
    values = [rng.next_double(-2.5, 2.5) for _ in range(500)]
    assert all(-2.5 <= v < 2.5 for v in values)
    assert min(values) < 0 < max(values)


@pytest.mark.parametrize("method", ["next_float", "next_double"])
def test_real_generators_reject_inverted_bounds(method):
    with pytest.raises(ValueError):
        getattr(RandomSource(1), method)(1.0, 0.0)


def test_unseeded_generator_produces_values_in_range():
    rng = RandomSource()
    assert 10 <= rng.next_int(10, 20) < 20