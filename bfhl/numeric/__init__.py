"""
Numeric module - Pure number-theory helpers.

This module provides:
- Fibonacci sequence generation
- Prime filtering
- GCD/LCM and their folds over arrays (hcf/lcm)
"""
from bfhl.numeric.kernel import (
    FIBONACCI_MAX,
    fibonacci,
    is_prime,
    primes_from_array,
    gcd,
    lcm,
    hcf_array,
    lcm_array,
)

__all__ = [
    "FIBONACCI_MAX",
    "fibonacci",
    "is_prime",
    "primes_from_array",
    "gcd",
    "lcm",
    "hcf_array",
    "lcm_array",
]
