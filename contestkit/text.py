"""Small string puzzles."""

from __future__ import annotations

import string
from collections import Counter
from itertools import combinations


def is_anagram(first: str, second: str) -> bool:
    """True when both words hold the same characters the same number of times."""
    return sorted(first) == sorted(second)


def dreamer_score(line: str) -> int:
    """Score a line: upper-case letters add their alphabet index, lower-case
    letters subtract theirs, digits add their value, everything else is ignored."""
    total = 0
    for char in line:
        if char in string.ascii_lowercase:
            total -= ord(char) - ord("a")
        elif char in string.ascii_uppercase:
            total += ord(char) - ord("A")
        elif char in string.digits:
            total += int(char)
    return total


def is_palindrome(word: str) -> bool:
    """True when the word reads the same both ways."""
    return word == word[::-1]


def max_char_frequency(word: str) -> int:
    """The count of the most frequent character, 0 for an empty word."""
    return max(Counter(word).values(), default=0)


def subsequence_numbers(digits: str) -> list[int]:
    """Every distinct number formed by a subsequence of the digits, with 0
    always included, largest first."""
    if not all(char in string.digits for char in digits):
        raise ValueError(f"not a string of digits: {digits!r}")
    numbers = {0}
    for length in range(1, len(digits) + 1):
        numbers.update(int("".join(chosen)) for chosen in combinations(digits, length))
    return sorted(numbers, reverse=True)