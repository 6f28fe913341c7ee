"""Primality testing by trial division.

Python integers are exact at any magnitude, so ``is_prime`` is correct for
every integer it is given; cost grows as O(sqrt(n)). Chunks store primes as
int64, which is where ``MAX_CANDIDATE`` comes from.
"""

from __future__ import annotations

from numbers import Integral

import numpy as np

MAX_CANDIDATE = np.iinfo(np.int64).max


def is_prime(n: int) -> bool:
    """Check if a single number is prime.

    Uses 6k +/- 1 optimization for efficiency.

    Args:
        n: Number to check. Values below 2 (including negatives) are not prime.

    Returns:
        True if n is prime, False otherwise.
    """
    n = int(n)
    if n < 2:
        return False
    if n == 2 or n == 3:
        return True
    if n % 2 == 0:
        return False
    if n % 3 == 0:
        return False

    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6

    return True


def is_prime_array(numbers) -> np.ndarray:
    """Check primality for an array of numbers.

    Args:
        numbers: Sequence or array of integers. Values beyond int64 arrive
            as an object array of Python ints and are accepted.

    Returns:
        Boolean array where True indicates prime.
    """
    numbers = np.asarray(numbers)
    if numbers.size == 0:
        return np.array([], dtype=bool)

    if numbers.dtype == object:
        if not all(is_integer(n) for n in numbers.ravel()):
            raise TypeError("expected an array of integers")
    elif not np.issubdtype(numbers.dtype, np.integer):
        raise TypeError(f"expected an integer array, got dtype {numbers.dtype}")

    return np.fromiter(
        (is_prime(int(n)) for n in numbers.ravel()),
        dtype=bool,
        count=numbers.size,
    ).reshape(numbers.shape)


def is_integer(value) -> bool:
    """True for Python and NumPy integers, False for bools and everything else."""
    return isinstance(value, (Integral, np.integer)) and not isinstance(value, (bool, np.bool_))
