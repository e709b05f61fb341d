from collections import Counter

import pytest

from contestkit.sorting import evens_then_odds, sort_values, sort_words, sorted_ranges


def test_sorted_ranges_example():
    assert sorted_ranges([5, 3, 1, 4], [(0, 2), (1, 3)]) == [[1, 3, 5], [1, 3, 4]]


def test_sorted_ranges_invariants():
    values = [9, -2, 7, 7, 0, 3, 11, -5]
    queries = [(0, 7), (2, 4), (5, 5), (1, 6)]
    for (left, right), result in zip(queries, sorted_ranges(values, queries)):
        assert len(result) == right - left + 1
        assert all(a <= b for a, b in zip(result, result[1:]))
        assert Counter(result) == Counter(values[left:right + 1])


def test_sorted_ranges_empty_when_reversed():
    assert sorted_ranges([1, 2, 3], [(2, 1)]) == [[]]


@pytest.mark.parametrize("query", [(0, 3), (-1, 1)])
def test_sorted_ranges_out_of_bounds(query):
    with pytest.raises(IndexError):
        sorted_ranges([1, 2, 3], [query])


def test_sort_values_ascending_and_descending():
    values = [4, -1, 8, 4, 0, 3]
    ascending = sort_values(values, 0)
    descending = sort_values(values, 1)
    assert all(a <= b for a, b in zip(ascending, ascending[1:]))
    assert Counter(ascending) == Counter(values)
    assert descending == ascending[::-1]


def test_evens_then_odds_example():
    assert evens_then_odds([3, 2, 5, 4, 1]) == [2, 4, 5, 3, 1]


def test_evens_then_odds_negatives():
    assert evens_then_odds([-3, -2]) == [-2, -3]


def test_evens_then_odds_invariants():
    values = [10, 7, -4, 3, 0, 15, 2, -9]
    result = evens_then_odds(values)
    assert Counter(result) == Counter(values)
    split = sum(1 for v in values if v % 2 == 0)
    evens, odds = result[:split], result[split:]
    assert all(v % 2 == 0 for v in evens)
    assert all(v % 2 for v in odds)
    assert evens == sorted(evens)
    assert odds == sorted(odds, reverse=True)


def test_sort_words_example():
    assert sort_words(["pear", "apple", "Banana"]) == ["Banana", "apple", "pear"]


def test_sort_words_is_idempotent():
    words = ["delta", "alpha", "charlie", "bravo", "alpha"]
    once = sort_words(words)
    assert sort_words(once) == once
    assert Counter(once) == Counter(words)