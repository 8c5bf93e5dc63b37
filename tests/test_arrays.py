import random

import pytest

from codedrills.arrays import (
    daily_temperatures,
    equilibrium_index,
    longest_harmonious_subsequence,
    merge_adjacent,
    missing_numbers,
    move_zeros,
    next_greatest,
    sliding_window_max,
    unique_elements,
)


def test_missing_numbers_invariants():
    values = [1, 2, 2, 3, 4, 5, 5, 6, 7, 9]
    missing = missing_numbers(values)
    assert missing == sorted(missing)
    assert all(0 <= number <= len(values) for number in missing)
    assert all(number not in values for number in missing)
    present_in_range = {v for v in values if 0 <= v <= len(values)}
    assert len(missing) + len(present_in_range) == len(values) + 1


def test_missing_numbers_complete_range_is_empty_below_length():
    values = list(range(6))
    assert all(number >= len(values) for number in missing_numbers(values))


def test_daily_temperatures_example():
    assert daily_temperatures([73, 74, 75, 71, 69, 72, 76, 73]) == [1, 1, 4, 2, 1, 1, 0, 0]


def test_daily_temperatures_properties():
    rng = random.Random(3)
    temps = [rng.randint(30, 100) for _ in range(40)]
    answer = daily_temperatures(temps)
    assert len(answer) == len(temps)
    for i, wait in enumerate(answer):
        if wait:
            assert temps[i + wait] > temps[i]
            assert all(t <= temps[i] for t in temps[i + 1:i + wait])
        else:
            assert all(t <= temps[i] for t in temps[i + 1:])


def test_equilibrium_index_property():
    values = [-7, 1, 5, 2, -4, 3, 0]
    index = equilibrium_index(values)
    assert index is not None
    assert sum(values[:index]) == sum(values[index + 1:])
    for earlier in range(index):
        assert sum(values[:earlier]) != sum(values[earlier + 1:])


def test_equilibrium_index_short_list_has_none():
    assert equilibrium_index([0, 0]) is None


def test_equilibrium_index_absent():
    assert equilibrium_index([1, 2, 3]) is None


def test_next_greatest_properties():
    values = [16, 17, 4, 3, 5, 2]
    result = next_greatest(values)
    assert len(result) == len(values)
    assert result[-1] == -1
    assert all(a >= b for a, b in zip(result, result[1:]))
    for i in range(len(values) - 1):
        assert result[i] in values[i + 1:]
        assert result[i] >= values[i + 1]


def test_longest_harmonious_subsequence_example():
    assert longest_harmonious_subsequence([1, 3, 2, 2, 5, 2, 3, 7]) == 5


def test_longest_harmonious_subsequence_without_neighbours():
    assert longest_harmonious_subsequence([4, 4, 4]) == 0


def test_longest_harmonious_subsequence_ignores_order():
    values = [1, 3, 2, 2, 5, 2, 3, 7]
    shuffled = values[::-1]
    assert longest_harmonious_subsequence(shuffled) == longest_harmonious_subsequence(values)


def test_sliding_window_max_properties():
    values = [1, 10, 7, 5, 6, 8, 3]
    k = 3
    result = sliding_window_max(values, k)
    assert len(result) == len(values) - k + 1
    for i, best in enumerate(result):
        window = values[i:i + k]
        assert best in window
        assert all(best >= v for v in window)


def test_sliding_window_max_edges():
    values = [1, 10, 7, 5, 6, 8, 3]
    assert sliding_window_max(values, 1) == values
    assert sliding_window_max(values, len(values)) == [max(values)]
    assert sliding_window_max(values, len(values) + 1) == []


def test_sliding_window_max_rejects_bad_window():
    with pytest.raises(ValueError):
        sliding_window_max([1, 2], 0)


def test_move_zeros_keeps_order():
    values = [0, 3, 0, 1, 2, 0]
    result = move_zeros(values)
    nonzero = [v for v in values if v]
    assert result[:len(nonzero)] == nonzero
    assert result[len(nonzero):] == [0] * values.count(0)


def test_merge_adjacent_example():
    assert merge_adjacent([2, 2, 0, 4, 0, 8]) == [4, 4, 8, 0, 0, 0]


def test_merge_adjacent_preserves_sum_and_length():
    values = [4, 4, 4, 2, 2, 0, 8]
    result = merge_adjacent(values)
    assert len(result) == len(values)
    assert sum(result) == sum(values)
    first_zero = result.index(0)
    assert all(v == 0 for v in result[first_zero:])


def test_unique_elements():
    values = [1, 1, 2, 2, 4, 5, 5]
    result = unique_elements(values)
    assert all(values.count(v) == 1 for v in result)
    assert all(v in result for v in values if values.count(v) == 1)
    assert unique_elements([3, 3]) == []