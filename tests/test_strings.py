import pytest

from codedrills.strings import (
    column_number,
    expand_runs,
    first_occurrence_span,
    is_palindrome,
    letter_frequencies,
    longest_palindrome,
    remove_duplicate_letters,
    remove_palindrome_words,
    replace_duplicates,
    reverse_alphanumeric,
    reverse_words,
    split_words,
)


def test_split_words_round_trip():
    text = "Hello world this is C programming"
    parts = split_words(text)
    assert " ".join(parts) == text
    assert all(" " not in part for part in parts)
    assert len(parts) == text.count(" ") + 1


def test_split_words_custom_delimiter_and_empty():
    assert split_words("a,b,,c", ",") == ["a", "b", "", "c"]
    assert split_words("") == []


def test_split_words_rejects_empty_delimiter():
    with pytest.raises(ValueError):
        split_words("abc", "")


def test_first_occurrence_span_source_example():
    assert first_occurrence_span("ZOHOCORPORATION", "PORT") == "OHOCORPORAT"


def test_first_occurrence_span_invariants():
    text, target = "ZOHOCORPORATION", "PORT"
    span = first_occurrence_span(text, target)
    assert span in text
    assert set(target) <= set(span)
    assert span[0] in target and span[-1] in target


def test_first_occurrence_span_missing_target():
    with pytest.raises(ValueError):
        first_occurrence_span("abc", "xyz")


def test_expand_runs():
    result = expand_runs("a10b2")
    assert result == "a" * 10 + "b" * 2


def test_expand_runs_needs_letter_first():
    with pytest.raises(ValueError):
        expand_runs("10a")


def test_letter_frequencies():
    text = "dineshkumara"
    counts = letter_frequencies(text)
    assert len(counts) == 26
    assert sum(counts.values()) == len(text)
    assert all(counts[ch] == text.count(ch) for ch in counts)


def test_letter_frequencies_rejects_other_characters():
    with pytest.raises(ValueError):
        letter_frequencies("Hello")


def test_reverse_alphanumeric_keeps_symbols_in_place():
    text = "hello : dinesh@ 256"
    result = reverse_alphanumeric(text)
    assert len(result) == len(text)
    for original, new in zip(text, result):
        if not original.isalnum():
            assert new == original
    alnum = [ch for ch in text if ch.isalnum()]
    assert [ch for ch in result if ch.isalnum()] == alnum[::-1]
    assert reverse_alphanumeric(result) == text


def test_is_palindrome():
    assert is_palindrome("momo") is False
    assert is_palindrome("racecar") is True
    assert is_palindrome("") is True


def test_longest_palindrome_source_example():
    assert longest_palindrome("bababac") == "babab"


def test_longest_palindrome_leftmost_and_empty():
    assert longest_palindrome("xyz") == "x"
    assert longest_palindrome("") == ""
    result = longest_palindrome("forgeeksskeegfor")
    assert is_palindrome(result)
    assert result in "forgeeksskeegfor"


def test_remove_duplicate_letters():
    text = "programming"
    result = remove_duplicate_letters(text)
    assert len(set(result)) == len(result)
    assert set(result) == set(text)
    assert [text.index(ch) for ch in result] == sorted(text.index(ch) for ch in result)


def test_remove_palindrome_words():
    text = "madam likes level racecars"
    result = remove_palindrome_words(text)
    words = result.split(" ")
    assert all(not is_palindrome(word) for word in words)
    assert all(word in text.split() for word in words)
    assert remove_palindrome_words("wow  noon") == ""


def test_reverse_words_is_involution():
    text = "hello big  world"
    result = reverse_words(text)
    assert result.split() == text.split()[::-1]
    assert reverse_words(result) == text


def test_replace_duplicates_makes_characters_unique():
    text = "aabbzz9900"
    result = replace_duplicates(text)
    assert len(result) == len(text)
    assert len(set(result)) == len(result)
    assert result[0] == text[0]


def test_replace_duplicates_leaves_other_characters():
    text = "AA--"
    assert replace_duplicates(text) == text


def test_replace_duplicates_exhausted_alphabet():
    with pytest.raises(ValueError):
        replace_duplicates("abcdefghijklmnopqrstuvwxyza")


def test_column_number_values():
    assert column_number("A") == 1
    assert column_number("Z") == 26
    assert column_number("AA") == 27


def test_column_number_is_consecutive():
    assert column_number("AZ") + 1 == column_number("BA")
    assert column_number("ZZ") + 1 == column_number("AAA")


@pytest.mark.parametrize("title", ["", "a1", "abc"])
def test_column_number_rejects_invalid(title):
    with pytest.raises(ValueError):
        column_number(title)