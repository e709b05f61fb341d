"""Exercises on sequences: interleaving, sliding windows and a stack."""

from __future__ import annotations

import string
from collections import Counter
from collections.abc import Iterable, Mapping, Sequence


def bread_order(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Merge two orderings of 0..n-1 taking first[i] then second[i] in turn,
    placing new values alternately at the front and the back of the result.
    Slots never filled stay 0."""
    n = len(first)
    if len(second) != n:
        raise ValueError("both sequences must have the same length")
    result = [0] * n
    seen: set[int] = set()
    front, back = 0, n - 1
    to_back = False
    for pair in zip(first, second):
        for value in pair:
            if not 0 <= value < n:
                raise IndexError(f"value {value} outside 0..{n - 1}")
            if value not in seen:
                seen.add(value)
                if to_back:
                    result[back] = value
                    back -= 1
                else:
                    result[front] = value
                    front += 1
            to_back = not to_back
    return result


def _penalty(counts: Counter[str], values: Mapping[str, int]) -> int:
    ranked = counts.most_common(2)
    letter, top = ranked[0]
    if top < 2 or (len(ranked) > 1 and ranked[1][1] == top):
        return 0
    return values.get(letter, 0) * top


def max_danger(word: str, values: Mapping[str, int], window: int) -> int:
    """Best window score over the upper-case word: the window's letter values
    summed, less the full value of its single most frequent letter when that
    letter occurs at least twice and no other ties it."""
    if any(char not in string.ascii_uppercase for char in word):
        raise ValueError(f"not an upper-case word: {word!r}")
    if not 1 <= window <= len(word):
        raise ValueError(f"window {window} must lie in 1..{len(word)}")

    counts = Counter(word[:window])
    total = sum(values.get(char, 0) for char in word[:window])
    best = total - _penalty(counts, values)
    for outgoing, incoming in zip(word, word[window:]):
        counts[outgoing] -= 1
        counts[incoming] += 1
        total += values.get(incoming, 0) - values.get(outgoing, 0)
        best = max(best, total - _penalty(counts, values))
    return best


def run_stack(commands: Iterable[Sequence]) -> list[int | None]:
    """Run ("push", value) and pop commands on a stack; every command other
    than push pops. Returns each popped value, None when the stack was empty."""
    stack: list[int] = []
    popped: list[int | None] = []
    for name, *args in commands:
        if name == "push":
            if len(args) != 1:
                raise ValueError("push takes exactly one value")
            stack.append(args[0])
        else:
            popped.append(stack.pop() if stack else None)
    return popped