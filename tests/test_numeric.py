"""Unit tests for the numeric kernel."""

import pytest

from bfhl.core.exceptions import DomainError, ErrorKind
from bfhl.numeric import (
    FIBONACCI_MAX,
    fibonacci,
    gcd,
    hcf_array,
    is_prime,
    lcm,
    lcm_array,
    primes_from_array,
)


class TestFibonacci:
    """Tests for fibonacci()."""

    def test_zero_is_single_leading_zero(self):
        assert fibonacci(0) == [0]

    def test_one(self):
        assert fibonacci(1) == [0, 1]

    def test_five(self):
        assert fibonacci(5) == [0, 1, 1, 2, 3, 5]

    @pytest.mark.parametrize("n", [-1, FIBONACCI_MAX + 1])
    def test_out_of_range(self, n):
        with pytest.raises(DomainError) as exc_info:
            fibonacci(n)

        assert exc_info.value.error_code == ErrorKind.DOMAIN
        assert "between 0 and 1000" in str(exc_info.value)

    def test_upper_bound_uses_big_integers(self):
        """F(1000) is far beyond 64 bits and must still be exact."""
        seq = fibonacci(FIBONACCI_MAX)

        assert len(seq) == FIBONACCI_MAX + 1
        assert seq[-1] > 2 ** 64
        for i in range(2, len(seq)):
            assert seq[i] == seq[i - 1] + seq[i - 2]


class TestPrimes:
    """Tests for is_prime() and primes_from_array()."""

    def test_filters_and_keeps_order(self):
        assert primes_from_array([1, 2, 3, 4, 5, 6, 7]) == [2, 3, 5, 7]

    def test_empty_input(self):
        assert primes_from_array([]) == []

    def test_zero_and_one_are_not_prime(self):
        assert primes_from_array([0, 1]) == []

    def test_negatives_are_not_prime(self):
        assert primes_from_array([-7, -2, 11]) == [11]

    def test_order_follows_input_not_value(self):
        assert primes_from_array([13, 4, 2, 9, 7, 2]) == [13, 2, 7, 2]

    def test_squares_of_primes_rejected(self):
        assert not is_prime(49)
        assert not is_prime(121)
        assert is_prime(97)


class TestGcdLcm:
    """Tests for gcd/lcm and their folds."""

    def test_gcd_with_zero(self):
        assert gcd(7, 0) == 7
        assert gcd(0, 7) == 7

    def test_hcf_array(self):
        assert hcf_array([12, 18, 24]) == 6
        assert hcf_array([8, 12, 16]) == 4

    def test_lcm_array(self):
        assert lcm_array([4, 6]) == 12
        assert lcm_array([2, 3, 4, 5]) == 60

    def test_single_element_folds(self):
        assert hcf_array([9]) == 9
        assert lcm_array([9]) == 9

    def test_lcm_of_zeros_does_not_divide_by_zero(self):
        assert lcm(0, 0) == 0
        assert lcm_array([0, 0]) == 0

    @pytest.mark.parametrize("fold, name", [(hcf_array, "hcf"), (lcm_array, "lcm")])
    def test_empty_input_fails(self, fold, name):
        with pytest.raises(DomainError) as exc_info:
            fold([])

        assert str(exc_info.value) == f"{name} requires a non-empty array"

    def test_gcd_times_lcm_is_product(self):
        for a in range(1, 40):
            for b in (1, 2, 9, 15, 28, 97):
                assert gcd(a, b) * lcm(a, b) == a * b
