"""Small exercises on integers and their digits and bits."""

from __future__ import annotations

import math

_UINT32_MASK = 0xFFFFFFFF


def binary_to_decimal(number: int) -> int:
    """Read the decimal digits of ``number`` as bits; only digits equal to 1 count."""
    if number < 0:
        return 0
    return sum(2**place for place, digit in enumerate(reversed(str(number))) if digit == "1")


def decimal_to_binary(number: int) -> int:
    """Return an integer whose decimal digits spell ``number`` in binary."""
    if number < 0:
        raise ValueError("decimal_to_binary() needs a non-negative number")
    return int(format(number, "b"))


def is_even(number: int) -> bool:
    """Tell whether ``number`` is even."""
    return not number & 1


def fibonacci(n: int) -> int:
    """Return the n-th term of the series 0, 1, 1, 2, ... counted from 1."""
    if n < 1:
        raise ValueError("fibonacci() terms are counted from 1")
    a, b = 0, 1
    for _ in range(n - 1):
        a, b = b, a + b
    return a


def is_prime(number: int) -> bool:
    """Tell whether no integer from 2 up to ``number - 1`` divides ``number``."""
    return all(number % divisor for divisor in range(2, number))


def power(base: int, exponent: int) -> int:
    """Multiply ``base`` by itself ``exponent`` times; non-positive exponents give 1."""
    return math.prod([base] * exponent)


def factorial(number: int) -> int:
    """Return ``number!``; values below 1 give 1."""
    return math.prod(range(1, number + 1))


def n_choose_r(n: int, r: int) -> int:
    """Return the number of ways to choose ``r`` items from ``n``."""
    if not 0 <= r <= n:
        raise ValueError(f"cannot choose {r} items from {n}")
    return factorial(n) // (factorial(r) * factorial(n - r))


def digit_product_minus_sum(number: int) -> int:
    """Return the product of the decimal digits minus their sum."""
    digits = [int(ch) for ch in str(number)] if number > 0 else []
    return math.prod(digits) - sum(digits)


def hamming_weight(number: int) -> int:
    """Count the set bits of ``number`` taken as an unsigned 32-bit value."""
    return bin(number & _UINT32_MASK).count("1")


def is_power_of_two(number: int) -> bool:
    """Tell whether ``number`` equals 2**i for some i from 0 to 30."""
    return any(number == 2**exponent for exponent in range(31))