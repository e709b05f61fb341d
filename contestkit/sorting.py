"""Sorting exercises."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def sorted_ranges(
    values: Sequence[int], queries: Iterable[tuple[int, int]]
) -> list[list[int]]:
    """For each inclusive 0-based range (l, r), the values in it in ascending order."""
    results = []
    for left, right in queries:
        if left <= right and (left < 0 or right >= len(values)):
            raise IndexError(f"range ({left}, {right}) out of bounds")
        results.append(sorted(values[left:right + 1]) if left <= right else [])
    return results


def sort_values(values: Iterable[int], descending: bool) -> list[int]:
    """The values sorted ascending, or descending when asked."""
    return sorted(values, reverse=bool(descending))


def evens_then_odds(values: Iterable[int]) -> list[int]:
    """Even values ascending, followed by odd values descending."""
    items = list(values)
    evens = sorted(v for v in items if v % 2 == 0)
    odds = sorted((v for v in items if v % 2), reverse=True)
    return evens + odds


def sort_words(words: Iterable[str]) -> list[str]:
    """The words in lexicographic order."""
    return sorted(words)