"""Searching in sequences of integers."""

from __future__ import annotations

from collections.abc import Sequence


def binary_search(arr: Sequence[int], left: int, right: int, key: int) -> int:
    """Find ``key`` between ``left`` and ``right`` in ascending ``arr``.

    Returns the index of the match, or -1 when ``key`` is absent.
    """
    while right >= left:
        mid = left + (right - left) // 2
        if arr[mid] == key:
            return mid
        if arr[mid] > key:
            right = mid - 1
        else:
            left = mid + 1
    return -1


def linear_search(arr: Sequence[int], key: int) -> int:
    """Return the index of the first ``key`` in ``arr``, or -1 if absent."""
    for index, value in enumerate(arr):
        if value == key:
            return index
    return -1