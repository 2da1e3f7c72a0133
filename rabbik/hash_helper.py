"""Prime number helpers for sizing hash tables."""

from __future__ import annotations

import math

HASH_PRIME = 101

PRIMES = (
    3, 7, 11, 17, 23, 29, 37, 47, 59, 71, 89, 107, 131, 163, 197, 239, 293, 353, 431, 521, 631, 761, 919,
    1103, 1327, 1597, 1931, 2333, 2801, 3371, 4049, 4861, 5839, 7013, 8419, 10103, 12143, 14591, 17519,
    21023, 25229, 30293, 36353, 43627, 52361, 62851, 75431, 90523, 108631, 130363, 156437, 187751, 225307,
    270371, 324449, 389357, 467237, 560689, 672827, 807403, 968897, 1162687, 1395263, 1674319, 2009191,
    2411033, 2893249, 3471899, 4166287, 4999559, 5999471, 7199369,
)

_INT32_MAX = 2147483647


def is_prime(value: int) -> bool:
    """Return True if ``value`` has no odd divisor up to its square root."""
    if value % 2 == 0:
        return value == 2
    limit = math.isqrt(max(value, 0))
    return all(value % divisor for divisor in range(3, limit + 1, 2))


def get_prime(min_value: int) -> int:
    """Return the smallest suitable prime that is at least ``min_value``."""
    if min_value < 0:
        raise ValueError("min_value cannot be smaller than 0")
    for prime in PRIMES:
        if prime >= min_value:
            return prime
    for candidate in range(min_value | 1, _INT32_MAX, 2):
        if is_prime(candidate) and (candidate - 1) % HASH_PRIME != 0:
            return candidate
    return min_value