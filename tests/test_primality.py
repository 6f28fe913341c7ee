"""Tests for the trial-division primality test."""

import math

import numpy as np
import pytest

from prime_scroll.core.primality import MAX_CANDIDATE, is_integer, is_prime, is_prime_array

PRIMES_TO_50 = {2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47}


def _has_divisor(n):
    return any(n % i == 0 for i in range(2, math.isqrt(n) + 1))


class TestIsPrime:
    """Tests for is_prime function."""

    def test_small_primes(self):
        """Test known small primes."""
        for p in [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31]:
            assert is_prime(p), f"{p} should be prime"

    def test_small_composites(self):
        """Test known small composites."""
        for c in [4, 6, 8, 9, 10, 12, 14, 15, 16, 18, 20, 25, 49]:
            assert not is_prime(c), f"{c} should not be prime"

    def test_below_two(self):
        """Test that 1, 0 and negatives are not prime."""
        for n in [1, 0, -1, -2, -7, -97]:
            assert not is_prime(n)

    def test_two(self):
        """Test the only even prime."""
        assert is_prime(2)

    def test_reference_set_up_to_50(self):
        """Test against the known primes up to 50."""
        found = {n for n in range(-10, 51) if is_prime(n)}
        assert found == PRIMES_TO_50

    def test_matches_trial_division(self):
        """Test agreement with a direct divisor search."""
        for n in range(2, 3000):
            assert is_prime(n) == (not _has_divisor(n)), n

    def test_squares_of_primes(self):
        """Test squares of primes, the edge of the sqrt bound."""
        for p in [5, 7, 11, 13, 101, 65521]:
            assert not is_prime(p * p)

    def test_larger_primes(self):
        """Test some larger known primes."""
        for p in [1000000007, 2147483647, 4294967291]:
            assert is_prime(p), f"{p} should be prime"
        assert not is_prime(2147483649)

    def test_numpy_scalar(self):
        """Test NumPy integer input."""
        assert is_prime(np.int64(97))
        assert not is_prime(np.int32(91))


class TestIsPrimeArray:
    """Tests for is_prime_array function."""

    def test_mixed_array(self):
        """Test array with mix of primes and composites."""
        numbers = np.array([2, 3, 4, 5, 6, 7, 8, 9, 10])
        expected = np.array([True, True, False, True, False, True, False, False, False])

        result = is_prime_array(numbers)
        np.testing.assert_array_equal(result, expected)

    def test_negative_values(self):
        """Test that negative entries are not prime."""
        result = is_prime_array([-3, -2, 0, 1, 2])
        np.testing.assert_array_equal(result, [False, False, False, False, True])

    def test_empty_array(self):
        """Test empty array."""
        result = is_prime_array(np.array([]))
        assert len(result) == 0

    def test_shape_preserved(self):
        """Test that 2D input keeps its shape."""
        result = is_prime_array(np.arange(12).reshape(3, 4))
        assert result.shape == (3, 4)
        assert result[0, 2] and result[2, 3]

    def test_beyond_int64(self):
        """Test values too large for int64 are still checked."""
        result = is_prime_array([10**30 + 1, 3**50, 7])
        np.testing.assert_array_equal(result, [False, False, True])

    def test_object_array_of_non_integers_rejected(self):
        """Test object arrays holding non-integers raise."""
        with pytest.raises(TypeError):
            is_prime_array(np.array([10**30, "7"], dtype=object))

    def test_float_array_rejected(self):
        """Test that non-integer arrays raise."""
        with pytest.raises(TypeError):
            is_prime_array(np.array([2.0, 3.5]))


class TestIsInteger:
    """Tests for the integer check used in input validation."""

    def test_accepts_ints(self):
        assert is_integer(5)
        assert is_integer(np.int64(5))

    def test_rejects_others(self):
        assert not is_integer(True)
        assert not is_integer(5.0)
        assert not is_integer("5")
        assert not is_integer(None)

    def test_max_candidate_is_int64_max(self):
        assert MAX_CANDIDATE == 2**63 - 1
