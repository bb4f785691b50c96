"""Small number-theory helpers: divisors, primes, digits and sequences."""

from __future__ import annotations

from collections.abc import Iterator
from math import prod


def _c_mod(a: int, b: int) -> int:
    """Remainder that takes the sign of the dividend (truncating division)."""
    r = abs(a) % abs(b)
    return -r if a < 0 else r


def _digits(n: int) -> Iterator[int]:
    """Yield the digits of ``n`` from the least significant, carrying its sign."""
    sign = -1 if n < 0 else 1
    n = abs(n)
    while n:
        n, d = divmod(n, 10)
        yield sign * d


def gcd_brute(a: int, b: int) -> int:
    """Greatest common divisor found by counting down from the smaller number.

    Returns 0 when the smaller number is not positive.
    """
    for i in range(min(a, b), 0, -1):
        if a % i == 0 and b % i == 0:
            return i
    return 0


def gcd_euclid(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's remainder algorithm."""
    n1, n2 = max(a, b), min(a, b)
    while n2 != 0:
        n1, n2 = n2, _c_mod(n1, n2)
    return n1


def lcm_brute(a: int, b: int) -> int:
    """Least common multiple found by counting up from the larger number."""
    for i in range(max(a, b), a * b + 1):
        if i % a == 0 and i % b == 0:
            return i
    return a * b


def lcm(a: int, b: int) -> int:
    """Least common multiple from the product divided by the GCD."""
    return (a * b) // gcd_euclid(a, b)


def is_even(n: int) -> bool:
    """Return True when ``n`` is divisible by two."""
    return n % 2 == 0


def is_prime(n: int) -> bool:
    """Trial-division primality check, testing divisors below ``n // 2``."""
    if n in (0, 1):
        return False
    return all(n % i != 0 for i in range(2, int(n / 2)))


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def count_digits(n: int) -> int:
    """Number of decimal digits in ``n``; zero has none."""
    return sum(1 for _ in _digits(n))


def is_armstrong(n: int) -> bool:
    """True when the digits raised to the digit count sum to ``n``."""
    power = count_digits(n)
    return sum(d**power for d in _digits(n)) == n


def fibonacci(n: int) -> list[int]:
    """The first ``n`` Fibonacci terms, starting 0, 1."""
    terms: list[int] = []
    a, b = 0, 1
    for _ in range(n):
        terms.append(a)
        a, b = b, a + b
    return terms


def factorial(n: int) -> int:
    """``n!`` for non-negative ``n``."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    return prod(range(2, n + 1))


def digit_sum(n: int) -> int:
    """Sum of the decimal digits of ``abs(n)``."""
    return sum(_digits(abs(n)))