"""Array scans: missing values, stacks, prefix sums and sliding windows."""

from __future__ import annotations

from collections import Counter, deque
from typing import Iterable, List, Optional


def missing_numbers(values: Iterable[int]) -> List[int]:
    """Numbers from 0 to len(values) inclusive that do not occur in ``values``."""
    items = list(values)
    present = set(items)
    return [number for number in range(len(items) + 1) if number not in present]


def daily_temperatures(temperatures: Iterable[int]) -> List[int]:
    """For each day, how many days until a strictly warmer one; 0 if never."""
    items = list(temperatures)
    answer = [0] * len(items)
    stack: List[int] = []
    for i in range(len(items) - 1, -1, -1):
        while stack and items[stack[-1]] <= items[i]:
            stack.pop()
        answer[i] = stack[-1] - i if stack else 0
        stack.append(i)
    return answer


def equilibrium_index(values: Iterable[int]) -> Optional[int]:
    """First index whose left and right sums are equal, or None.

    Lists shorter than three values have no equilibrium index.
    """
    items = list(values)
    if len(items) < 3:
        return None
    total = sum(items)
    left = 0
    for i, value in enumerate(items):
        if left == total - left - value:
            return i
        left += value
    return None


def next_greatest(values: Iterable[int]) -> List[int]:
    """Replace each value with the greatest value to its right; the last gets -1."""
    items = list(values)
    result = [0] * len(items)
    greatest = -1
    for i in range(len(items) - 1, -1, -1):
        result[i] = greatest
        greatest = max(greatest, items[i])
    return result


def longest_harmonious_subsequence(values: Iterable[int]) -> int:
    """Length of the longest subsequence whose max and min differ by exactly 1."""
    counts = Counter(values)
    return max(
        (counts[value] + counts[value + 1] for value in counts if value + 1 in counts),
        default=0,
    )


def sliding_window_max(values: Iterable[int], k: int) -> List[int]:
    """Maximum of every window of ``k`` consecutive values."""
    if k <= 0:
        raise ValueError("window size must be positive")
    items = list(values)
    window: deque = deque()
    result = []
    for i, value in enumerate(items):
        if window and window[0] <= i - k:
            window.popleft()
        while window and items[window[-1]] < value:
            window.pop()
        window.append(i)
        if i >= k - 1:
            result.append(items[window[0]])
    return result


def move_zeros(values: Iterable[int]) -> List[int]:
    """Move every zero to the end, keeping the order of the other values."""
    items = list(values)
    nonzero = [value for value in items if value != 0]
    return nonzero + [0] * (len(items) - len(nonzero))


def merge_adjacent(values: Iterable[int]) -> List[int]:
    """Merge equal neighbours left to right, then push the zeros to the end.

    When two neighbours are equal the left one doubles and the right one
    becomes 0; each merge is visible to the next comparison.
    """
    items = list(values)
    for i in range(len(items) - 1):
        if items[i] == items[i + 1]:
            items[i] *= 2
            items[i + 1] = 0
    return move_zeros(items)


def unique_elements(values: Iterable) -> list:
    """Values that occur exactly once, in their original order."""
    items = list(values)
    counts = Counter(items)
    return [value for value in items if counts[value] == 1]