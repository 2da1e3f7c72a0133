import pytest

from rabbik.hash_helper import HASH_PRIME, PRIMES, get_prime, is_prime


def test_table_primes_are_prime():
    assert all(is_prime(p) for p in PRIMES)


def test_two_is_prime_and_other_evens_are_not():
    assert is_prime(2)
    assert not any(is_prime(n) for n in range(4, 200, 2))


@pytest.mark.parametrize("a, b", [(3, 3), (3, 7), (11, 13), (101, 103)])
def test_products_of_primes_are_not_prime(a, b):
    assert not is_prime(a * b)


def test_get_prime_uses_table():
    assert get_prime(0) == 3
    assert get_prime(3) == 3
    assert get_prime(4) == 7
    assert get_prime(7199369) == 7199369


def test_get_prime_returns_smallest_table_entry_at_least_min():
    for minimum in range(0, 2000, 37):
        result = get_prime(minimum)
        assert result >= minimum
        assert result in PRIMES
        assert all(p < minimum for p in PRIMES if p < result)


def test_get_prime_beyond_table_is_computed():
    minimum = PRIMES[-1] + 1
    result = get_prime(minimum)
    assert result >= minimum
    assert is_prime(result)
    assert (result - 1) % HASH_PRIME != 0


def test_get_prime_rejects_negative():
    with pytest.raises(ValueError):
        get_prime(-1)