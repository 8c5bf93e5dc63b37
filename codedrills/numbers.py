"""Number exercises: digits, primes, Kaprekar numbers, words and concatenations."""

from __future__ import annotations

from itertools import groupby
from typing import Iterable, List

_BELOW_20 = [
    "", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine",
    "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen", "Fifteen",
    "Sixteen", "Seventeen", "Eighteen", "Nineteen",
]
_TENS = [
    "", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety",
]
_SCALES = ["", "Thousand", "Million", "Billion"]


def _require_non_negative(number: int) -> None:
    if number < 0:
        raise ValueError("number must not be negative")


def count_eleven_ten_one(number: int) -> int:
    """How many 11s, 10s and 1s add up to ``number``, taking 11s first, then 10s."""
    _require_non_negative(number)
    elevens, rest = divmod(number, 11)
    tens, ones = divmod(rest, 10)
    return elevens + tens + ones


def digital_root(num: int) -> int:
    """Repeatedly sum the digits of ``num`` until one digit is left."""
    _require_non_negative(num)
    while num >= 10:
        num = sum(digits(num))
    return num


def is_kaprekar(n: int) -> bool:
    """Whether the square of ``n`` splits into two parts, the right one positive, that add up to ``n``."""
    if n == 1:
        return True
    if n < 1:
        return False
    square = n * n
    power = 10
    while power < square:
        left, right = divmod(square, power)
        if right > 0 and left + right == n:
            return True
        power *= 10
    return False


def kaprekar_numbers(limit: int) -> List[int]:
    """Kaprekar numbers from 1 up to, but not including, ``limit``."""
    return [n for n in range(1, limit) if is_kaprekar(n)]


def count_digits(num: int) -> int:
    """Number of decimal digits of ``num``; zero has one digit."""
    _require_non_negative(num)
    return len(str(num))


def digits(number: int) -> List[int]:
    """Decimal digits of ``number``, most significant first."""
    _require_non_negative(number)
    return [int(ch) for ch in str(number)]


def first_last_digit_sum(number: int) -> int:
    """Sum of the first and the last digit of ``number``."""
    values = digits(number)
    return values[0] + values[-1]


def swap_first_last_digits(number: int) -> int:
    """``number`` with its first and last digits exchanged."""
    values = digits(number)
    values[0], values[-1] = values[-1], values[0]
    return int("".join(map(str, values)))


def first_n_primes(count: int) -> List[int]:
    """The first ``count`` prime numbers."""
    primes: List[int] = []
    candidate = 2
    while len(primes) < count:
        if all(candidate % d for d in range(2, candidate // 2 + 1)):
            primes.append(candidate)
        candidate += 1
    return primes


def _chunk_words(num: int) -> List[str]:
    words: List[str] = []
    if num >= 100:
        words += [_BELOW_20[num // 100], "Hundred"]
        num %= 100
    if num >= 20:
        words.append(_TENS[num // 10])
        num %= 10
    if num:
        words.append(_BELOW_20[num])
    return words


def number_to_words(num: int) -> str:
    """English words for ``num``, below one trillion."""
    _require_non_negative(num)
    if num >= 1000 ** len(_SCALES):
        raise ValueError("number too large")
    if num == 0:
        return "Zero"
    words: List[str] = []
    parts = []
    while num:
        num, part = divmod(num, 1000)
        parts.append(part)
    for scale, part in reversed(list(enumerate(parts))):
        if part:
            words += _chunk_words(part)
            if _SCALES[scale]:
                words.append(_SCALES[scale])
    return " ".join(words)


def look_and_say(terms: int) -> List[str]:
    """The first ``terms`` terms of the look-and-say sequence starting at 1."""
    if terms < 0:
        raise ValueError("number of terms must not be negative")
    sequence: List[str] = []
    current = "1"
    for _ in range(terms):
        sequence.append(current)
        current = "".join(f"{len(list(run))}{digit}" for digit, run in groupby(current))
    return sequence


def max_concatenation(values: Iterable[int], max_digits: int) -> int:
    """Largest number formed by joining distinct values, with at most ``max_digits`` digits.

    Every subset in every order is tried; 0 is returned when nothing fits.
    """
    items = list(values)
    widths = [count_digits(value) for value in items]
    used = [False] * len(items)
    best = 0

    def walk(current: int, width: int) -> None:
        nonlocal best
        best = max(best, current)
        for i, value in enumerate(items):
            if used[i] or width + widths[i] > max_digits:
                continue
            used[i] = True
            walk(current * 10 ** widths[i] + value, width + widths[i])
            used[i] = False

    walk(0, 0)
    return best


def greedy_concatenation(values: Iterable[int], max_digits: int) -> int:
    """Largest number found by greedy joining, with at most ``max_digits`` digits.

    The values are sorted in descending order; from each one the later values
    are appended one by one whenever the result still fits.
    """
    items = sorted(values, reverse=True)
    for value in items:
        _require_non_negative(value)
    best = 0
    for i, first in enumerate(items):
        current = first
        if count_digits(current) <= max_digits:
            best = max(best, current)
        for value in items[i + 1:]:
            joined = current * 10 ** count_digits(value) + value
            if count_digits(joined) <= max_digits:
                best = max(best, joined)
                current = joined
    return best