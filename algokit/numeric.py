"""Small numeric routines: Fibonacci numbers, gcd, leap years."""

from __future__ import annotations

from collections.abc import Iterator


def fibonacci() -> Iterator[int]:
    """Yield the Fibonacci numbers 0, 1, 1, 2, 3, ... without end."""
    previous, current = 1, 0
    while True:
        yield current
        previous, current = current, previous + current


def gcd(x: int, y: int) -> int:
    """Reduce two non-negative integers by their shared factors of two.

    Returns ``x`` when the arguments are equal or ``y`` is zero, ``y`` when
    ``x`` is zero, and otherwise ``y`` divided by the largest power of two
    that divides both arguments.
    """
    if x < 0 or y < 0:
        raise ValueError("gcd - arguments must be non-negative")
    if x == y or y == 0:
        return x
    if x == 0:
        return y
    while not (x | y) & 1:
        x >>= 1
        y >>= 1
    return y


def is_leap_year(year: int) -> bool:
    """Tell whether ``year`` is a leap year in the Gregorian calendar."""
    return year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)