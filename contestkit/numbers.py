"""Number and prefix-sum exercises."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Sequence
from itertools import accumulate
from math import isqrt


def chocolate_breaks(rows: int, cols: int) -> int:
    """Breaks needed to split a rows by cols bar into single pieces."""
    return rows * cols - 1


def is_prime_magnitude(n: int) -> bool:
    """Trial-division primality of |n|; 1 is rejected and 0 has no divisor to
    find, so it is accepted."""
    n = abs(n)
    if any(n % divisor == 0 for divisor in range(2, isqrt(n) + 1)):
        return False
    return n != 1


def alternating_range_sums(
    values: Sequence[int], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """For each 1-based inclusive range (l, r), the sum of its values with
    alternating signs, starting positive at l."""
    signed = (v if index % 2 else -v for index, v in enumerate(values, start=1))
    prefix = [0, *accumulate(signed)]
    results = []
    for left, right in queries:
        if left < 1 or right > len(values):
            raise IndexError(f"range ({left}, {right}) out of bounds")
        difference = prefix[right] - prefix[left - 1]
        results.append(difference if left % 2 else -difference)
    return results


def snack_counts(prices: Iterable[int], budgets: Iterable[int]) -> list[int]:
    """For each budget, how many of the cheapest snacks it buys; a negative
    budget yields -1."""
    prefix = [0, *accumulate(sorted(prices))]
    return [bisect_right(prefix, budget) - 1 for budget in budgets]


def danger_counts(
    powers: Sequence[int], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """Each position's danger is its power plus its neighbours'; for each
    inclusive range (low, high), count positions whose danger lies in it."""
    padded = [0, *powers, 0]
    danger = sorted(sum(padded[i:i + 3]) for i in range(len(powers)))
    return [bisect_right(danger, high) - bisect_left(danger, low) for low, high in queries]