"""
Numeric kernel - pure functions behind the /bfhl numeric keys.

All functions operate on Python ints, which are arbitrary precision, so
large Fibonacci terms and products in lcm never overflow.
"""
from functools import reduce
from typing import Iterable, List, Sequence

from bfhl.core.exceptions import DomainError

FIBONACCI_MAX = 1000


def fibonacci(n: int) -> List[int]:
    """
    Return the sequence [F(0), F(1), ..., F(n)] with F(0)=0, F(1)=1.

    Raises:
        DomainError: If n is outside [0, FIBONACCI_MAX]
    """
    if n < 0 or n > FIBONACCI_MAX:
        raise DomainError(f"fibonacci must be between 0 and {FIBONACCI_MAX}")

    sequence = [0]
    a, b = 0, 1
    for _ in range(n):
        sequence.append(b)
        a, b = b, a + b
    return sequence


def is_prime(x: int) -> bool:
    """Trial division up to sqrt(x)."""
    if x < 2:
        return False
    i = 2
    while i * i <= x:
        if x % i == 0:
            return False
        i += 1
    return True


def primes_from_array(values: Iterable[int]) -> List[int]:
    """Keep the primes in values, preserving their order."""
    return [x for x in values if is_prime(x)]


def gcd(a: int, b: int) -> int:
    """Euclid's algorithm; gcd(a, 0) == a."""
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    divisor = gcd(a, b)
    if divisor == 0:
        # Only reachable when a == b == 0
        return 0
    return (a * b) // divisor


def _fold(name: str, op, values: Sequence[int]) -> int:
    if not values:
        raise DomainError(f"{name} requires a non-empty array")
    return reduce(op, values)


def hcf_array(values: Sequence[int]) -> int:
    """
    Left fold of gcd over values.

    Raises:
        DomainError: If values is empty
    """
    return _fold("hcf", gcd, values)


def lcm_array(values: Sequence[int]) -> int:
    """
    Left fold of lcm over values.

    Raises:
        DomainError: If values is empty
    """
    return _fold("lcm", lcm, values)
