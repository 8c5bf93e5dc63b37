"""Elementary sorting algorithms and array rearrangements."""

from __future__ import annotations

from collections import Counter
from itertools import zip_longest
from typing import Iterable, List

_MISSING = object()


def exchange_sort(values: Iterable, reverse: bool = False) -> List:
    """Sort by comparing each position with every later one and swapping."""
    result = list(values)
    size = len(result)
    for i in range(size):
        for j in range(i + 1, size):
            out_of_order = result[j] > result[i] if reverse else result[i] > result[j]
            if out_of_order:
                result[i], result[j] = result[j], result[i]
    return result


def bubble_sort(values: Iterable) -> List:
    """Bubble sort that stops early once a pass makes no swap."""
    result = list(values)
    for end in range(len(result) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def insertion_sort(values: Iterable) -> List:
    """Insertion sort."""
    result = list(values)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


def _merge(left: List, right: List) -> List:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable) -> List:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def alternative_sort(values: Iterable) -> List:
    """Arrange as largest, smallest, second largest, second smallest and so on."""
    ordered = exchange_sort(values)
    result = []
    left, right = 0, len(ordered) - 1
    while left <= right:
        result.append(ordered[right])
        right -= 1
        if left <= right:
            result.append(ordered[left])
            left += 1
    return result


def frequency_sort(values: Iterable) -> List:
    """Order by descending frequency, then by ascending value."""
    items = list(values)
    counts = Counter(items)
    return sorted(items, key=lambda value: (-counts[value], value))


def odd_even_place_sort(values: Iterable) -> List:
    """Interleave odd-position values sorted descending with even-position values sorted ascending.

    The result starts with an odd-position value.
    """
    items = list(values)
    evens = exchange_sort(items[0::2])
    odds = exchange_sort(items[1::2], reverse=True)
    result = []
    for odd, even in zip_longest(odds, evens, fillvalue=_MISSING):
        if odd is not _MISSING:
            result.append(odd)
        if even is not _MISSING:
            result.append(even)
    return result


def split_odd_even(values: Iterable[int]) -> List[int]:
    """Odd numbers ascending followed by even numbers descending."""
    items = list(values)
    odds = [value for value in items if value % 2 != 0]
    evens = [value for value in items if value % 2 == 0]
    return exchange_sort(odds) + exchange_sort(evens, reverse=True)


def reverse_in_groups(values: Iterable, k: int) -> List:
    """Reverse each consecutive block of ``k`` values; the last block may be shorter."""
    if k <= 0:
        raise ValueError("group size must be positive")
    items = list(values)
    result = []
    for start in range(0, len(items), k):
        result.extend(reversed(items[start:start + k]))
    return result