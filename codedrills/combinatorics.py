"""Permutations, letter decodings and subset sums by backtracking."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence


def _permute(pool: list, start: int) -> Iterator[list]:
    if start == len(pool) - 1:
        yield list(pool)
        return
    for i in range(start, len(pool)):
        pool[start], pool[i] = pool[i], pool[start]
        yield from _permute(pool, start + 1)
        pool[start], pool[i] = pool[i], pool[start]


def permutations(items: Iterable) -> Iterator[list]:
    """Yield every ordering of ``items`` in swap-recursion order."""
    pool = list(items)
    if pool:
        yield from _permute(pool, 0)


def string_permutations(text: str) -> Iterator[str]:
    """Yield every rearrangement of the characters of ``text``."""
    for ordering in permutations(text):
        yield "".join(ordering)


def decode_number_words(digits: Sequence[int]) -> Iterator[str]:
    """Yield each reading of the digit list as letters, 1 being A and 26 being Z.

    A digit is read alone first, then together with the next one when the
    two-digit value is at most 26.
    """
    digits = list(digits)

    def walk(index: int, letters: List[str]) -> Iterator[str]:
        if index >= len(digits):
            yield "".join(letters)
            return
        yield from walk(index + 1, letters + [chr(digits[index] + 64)])
        if index + 1 < len(digits):
            pair = digits[index] * 10 + digits[index + 1]
            if pair <= 26:
                yield from walk(index + 2, letters + [chr(pair + 64)])

    yield from walk(0, [])


def subset_sums(values: Sequence[int], target: int) -> Iterator[List[int]]:
    """Yield the subsets, in input order, whose values add up to ``target``.

    A subset is reported as soon as its sum reaches the target, and a branch
    is abandoned once its sum exceeds it.
    """
    values = list(values)

    def walk(index: int, chosen: List[int], total: int) -> Iterator[List[int]]:
        if total == target:
            yield list(chosen)
            return
        if index == len(values) or total > target:
            return
        value = values[index]
        yield from walk(index + 1, chosen + [value], total + value)
        yield from walk(index + 1, chosen, total)

    yield from walk(0, [], 0)