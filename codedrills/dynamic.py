"""Dynamic programming: house robber variants and book buying with pairs."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable, List, Sequence


def _rob_line(items: Sequence[int]) -> int:
    if len(items) == 1:
        return items[0]
    before, best = items[0], max(items[0], items[1])
    for value in items[2:]:
        before, best = best, max(best, before + value)
    return best


def rob(values: Iterable[int]) -> int:
    """Largest total from values of which no two taken are adjacent."""
    items = list(values)
    if not items:
        raise ValueError("no houses to rob")
    return _rob_line(items)


def rob_circular(values: Iterable[int]) -> int:
    """As ``rob``, but the first and last values are neighbours too."""
    items = list(values)
    if not items:
        raise ValueError("no houses to rob")
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return max(items)
    return max(_rob_line(items[:-1]), _rob_line(items[1:]))


def min_book_cost(prices: Iterable[int], pair_cost: int, k: int) -> int:
    """Cheapest way to buy every book taken from either end of the row.

    A single book from either end costs its price; up to ``k`` times the two
    end books can be bought together for ``pair_cost``.
    """
    items: List[int] = list(prices)

    @lru_cache(maxsize=None)
    def solve(left: int, right: int, pairs: int) -> int:
        if left > right:
            return 0
        best = min(
            items[left] + solve(left + 1, right, pairs),
            items[right] + solve(left, right - 1, pairs),
        )
        if pairs > 0 and left < right:
            best = min(best, pair_cost + solve(left + 1, right - 1, pairs - 1))
        return best

    return solve(0, len(items) - 1, k)