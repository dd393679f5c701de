import pytest

from algokit.searches import binary_search, linear_search


@pytest.mark.parametrize(
    "arr, key, expected",
    [
        ([1, 2, 4, 6, 7, 8], 7, 4),
        ([1, 2, 4, 6, 7, 8], 3, -1),
    ],
)
def test_binary_search(arr, key, expected):
    assert binary_search(arr, 0, len(arr), key) == expected


def test_binary_search_first_element():
    arr = [1, 2, 4, 6, 7, 8]
    assert binary_search(arr, 0, len(arr) - 1, 1) == 0


def test_binary_search_empty_range():
    assert binary_search([1, 2, 3], 2, 1, 2) == -1


@pytest.mark.parametrize(
    "arr, key, expected",
    [
        ([1, 2, 4, 6, 7, 8], 7, 4),
        ([9, 5, 4, 6, 7, 8], 3, -1),
        ([10, 9, 4, 6, 7, 8, 1, 3], 20, -1),
    ],
)
def test_linear_search(arr, key, expected):
    assert linear_search(arr, key) == expected


def test_linear_search_returns_first_match():
    assert linear_search([5, 3, 5], 5) == 0