from itertools import islice

import pytest

from algokit.numeric import fibonacci, gcd, is_leap_year


def test_fibonacci_first_ten():
    assert list(islice(fibonacci(), 10)) == [0, 1, 1, 2, 3, 5, 8, 13, 21, 34]


def test_fibonacci_generators_are_independent():
    first = fibonacci()
    next(first)
    next(first)
    assert next(fibonacci()) == 0
    assert next(first) == 1


@pytest.mark.parametrize(
    "x,y,expected",
    [(100, 200, 50), (4, 2, 1), (6, 3, 3)],
)
def test_gcd(x, y, expected):
    assert gcd(x, y) == expected


def test_gcd_equal_arguments():
    assert gcd(7, 7) == 7


def test_gcd_zero_arguments():
    assert gcd(5, 0) == 5
    assert gcd(0, 9) == 9


def test_gcd_rejects_negative():
    with pytest.raises(ValueError):
        gcd(-2, 4)


@pytest.mark.parametrize(
    "year,expected",
    [(2000, True), (1900, False), (2100, False), (1700, False), (1891, False)],
)
def test_is_leap_year(year, expected):
    assert is_leap_year(year) is expected


def test_ordinary_leap_year():
    assert is_leap_year(2024) is True