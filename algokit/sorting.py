"""Sorting routines for lists of integers.

Every function except :func:`dutch_flag` leaves its input untouched and
returns a new list.
"""

from __future__ import annotations

import bisect
from collections.abc import Iterable, MutableSequence


def dutch_flag(nums: MutableSequence[int]) -> None:
    """Partition ``nums`` in place into its 0s, then 1s, then everything else.

    Any value other than 0 or 1 is treated like a 2 and moved to the back.
    """
    low, mid, high = 0, 0, len(nums) - 1
    while mid <= high:
        if nums[mid] == 0:
            nums[low], nums[mid] = nums[mid], nums[low]
            low += 1
            mid += 1
        elif nums[mid] == 1:
            mid += 1
        else:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1


def gnome_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted by gnome sort."""
    result = list(values)
    index = 0
    while index < len(result):
        if index == 0 or result[index] >= result[index - 1]:
            index += 1
        else:
            result[index], result[index - 1] = result[index - 1], result[index]
            index -= 1
    return result


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted by insertion."""
    result: list[int] = []
    for value in values:
        bisect.insort_right(result, value)
    return result


def merge(left: list[int], right: list[int]) -> list[int]:
    """Merge two ascending lists into one ascending list.

    When two values compare equal the one from ``right`` comes first.
    """
    result: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result


def merge_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted by merge sort."""
    items = list(values)
    if len(items) < 2:
        return items
    mid = len(items) // 2
    return merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def shell_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted with halving gaps."""
    result = list(values)
    gap = len(result) // 2
    while gap > 0:
        for i in range(gap, len(result)):
            j = i
            while j >= gap and result[j - gap] > result[j]:
                result[j], result[j - gap] = result[j - gap], result[j]
                j -= gap
        gap //= 2
    return result


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted by ``n - 1`` bubble passes."""
    result = list(values)
    for _ in range(len(result) - 1):
        for i in range(len(result) - 1):
            if result[i] > result[i + 1]:
                result[i], result[i + 1] = result[i + 1], result[i]
    return result


def bucket_sort(values: Iterable[int]) -> list[int]:
    """Return the distinct values in ascending order, one bucket per value.

    Duplicates collapse into one entry, and the result is padded with zeros
    up to the length of the input. Negative values are rejected.
    """
    items = list(values)
    if any(value < 0 for value in items):
        raise ValueError("bucket sort - values must be non-negative")
    present = sorted(set(items))
    return present + [0] * (len(items) - len(present))


def _cycle_position(items: list[int], start: int, element: int) -> int:
    return start + sum(1 for value in items[start + 1:] if value < element)


def cycle_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted by cycle sort."""
    result = list(values)
    for start in range(len(result) - 1):
        element = result[start]
        position = _cycle_position(result, start, element)
        if position == start:
            continue
        while element == result[position]:
            position += 1
        result[position], element = element, result[position]

        while position != start:
            position = _cycle_position(result, start, element)
            while element == result[position]:
                position += 1
            if element != result[position]:
                result[position], element = element, result[position]
    return result


def linear_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, swapping neighbours until stable."""
    result = list(values)
    swapped = True
    while swapped:
        swapped = False
        for i in range(len(result) - 1):
            if result[i] > result[i + 1]:
                result[i], result[i + 1] = result[i + 1], result[i]
                swapped = True
    return result


def quick_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, using the last value as pivot."""
    items = list(values)
    if len(items) <= 1:
        return items
    *rest, pivot = items
    smaller = [value for value in rest if value <= pivot]
    larger = [value for value in rest if value > pivot]
    return quick_sort(smaller) + [pivot] + quick_sort(larger)