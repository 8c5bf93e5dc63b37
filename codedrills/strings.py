"""String exercises: splitting, palindromes, duplicates and rearrangements."""

from __future__ import annotations

import re
import string
from typing import Dict, List

_WORD = re.compile(r"[^ ]+")


def split_words(text: str, delimiter: str = " ") -> List[str]:
    """Split ``text`` at every ``delimiter``; empty text gives no parts."""
    if not delimiter:
        raise ValueError("delimiter must not be empty")
    if not text:
        return []
    return text.split(delimiter)


def first_occurrence_span(text: str, target: str) -> str:
    """Shortest slice of ``text`` covering the first occurrence of each target character.

    Target characters that do not occur in ``text`` are ignored.
    """
    positions = [text.index(ch) for ch in target if ch in text]
    if not positions:
        raise ValueError("no character of the target occurs in the text")
    return text[min(positions):max(positions) + 1]


def expand_runs(text: str) -> str:
    """Expand run-length notation such as ``a10b2`` into repeated letters.

    A lowercase letter starts a run and the digits after it give its length.
    Other characters are skipped.
    """
    parts: List[str] = []
    letter = None
    number = 0
    for i, ch in enumerate(text):
        if "a" <= ch <= "z":
            letter = ch
            number = 0
        elif "0" <= ch <= "9":
            if letter is None:
                raise ValueError("count without a letter before it")
            number = number * 10 + int(ch)
            following = text[i + 1] if i + 1 < len(text) else ""
            if not ("0" <= following <= "9"):
                parts.append(letter * number)
    return "".join(parts)


def letter_frequencies(text: str) -> Dict[str, int]:
    """Count of each lowercase letter a to z in ``text``."""
    counts = dict.fromkeys(string.ascii_lowercase, 0)
    for ch in text:
        if ch not in counts:
            raise ValueError(f"not a lowercase letter: {ch!r}")
        counts[ch] += 1
    return counts


def _is_alphanumeric(ch: str) -> bool:
    return ch in string.ascii_letters or ch in string.digits


def reverse_alphanumeric(text: str) -> str:
    """Reverse the letters and digits, leaving every other character in place."""
    chars = list(text)
    left, right = 0, len(chars) - 1
    while left < right:
        if not _is_alphanumeric(chars[left]):
            left += 1
        elif not _is_alphanumeric(chars[right]):
            right -= 1
        else:
            chars[left], chars[right] = chars[right], chars[left]
            left += 1
            right -= 1
    return "".join(chars)


def is_palindrome(text: str) -> bool:
    """Whether ``text`` reads the same backwards."""
    return text == text[::-1]


def longest_palindrome(text: str) -> str:
    """Longest palindromic slice of ``text``; the leftmost wins a tie."""
    for length in range(len(text), 0, -1):
        for start in range(len(text) - length + 1):
            candidate = text[start:start + length]
            if is_palindrome(candidate):
                return candidate
    return ""


def remove_duplicate_letters(text: str) -> str:
    """Keep only the first occurrence of each character."""
    return "".join(dict.fromkeys(text))


def remove_palindrome_words(text: str) -> str:
    """The words of ``text`` that are not palindromes, joined by single spaces."""
    return " ".join(word for word in _WORD.findall(text) if not is_palindrome(word))


def reverse_words(text: str) -> str:
    """Reverse the order of the words, keeping the spacing between them."""
    return _WORD.sub(lambda match: match.group()[::-1], text[::-1])


def _next_free(alphabet: str, seen: set, index: int) -> str:
    for step in range(1, len(alphabet) + 1):
        candidate = alphabet[(index + step) % len(alphabet)]
        if candidate not in seen:
            return candidate
    raise ValueError("no unused character left to replace a duplicate")


def replace_duplicates(text: str) -> str:
    """Replace each repeated lowercase letter or digit with the next unused one.

    The search for an unused character wraps around from z to a and from 9 to 0.
    """
    seen: set = set()
    result = []
    for ch in text:
        for alphabet in (string.ascii_lowercase, string.digits):
            if ch in alphabet:
                if ch in seen:
                    ch = _next_free(alphabet, seen, alphabet.index(ch))
                seen.add(ch)
                break
        result.append(ch)
    return "".join(result)


def column_number(title: str) -> int:
    """Spreadsheet column number of a title such as ``A``, ``Z`` or ``AA``."""
    if not title:
        raise ValueError("column title must not be empty")
    number = 0
    for ch in title:
        if ch not in string.ascii_uppercase:
            raise ValueError(f"invalid column letter: {ch!r}")
        number = number * 26 + ord(ch) - ord("A") + 1
    return number