import pytest

from contestkit.text import (
    dreamer_score,
    is_anagram,
    is_palindrome,
    max_char_frequency,
    subsequence_numbers,
)


@pytest.mark.parametrize(
    "first, second, expected",
    [
        ("listen", "silent", True),
        ("abc", "abd", False),
        ("aab", "abb", False),
        ("", "", True),
    ],
)
def test_is_anagram(first, second, expected):
    assert is_anagram(first, second) is expected


def test_is_anagram_is_symmetric():
    assert is_anagram("evil", "vile") == is_anagram("vile", "evil")


@pytest.mark.parametrize("word", ["Hello", "abcXYZ", "QqWw"])
def test_dreamer_score_swapcase_negates(word):
    assert dreamer_score(word.swapcase()) == -dreamer_score(word)


def test_dreamer_score_same_letter_cancels():
    assert dreamer_score("Zz") == 0


def test_dreamer_score_digit_value():
    assert dreamer_score("9") == 9


def test_dreamer_score_ignores_other_characters():
    assert dreamer_score("x? y!") == dreamer_score("xy")


def test_dreamer_score_is_additive():
    assert dreamer_score("Ab3" + "zQ9") == dreamer_score("Ab3") + dreamer_score("zQ9")


@pytest.mark.parametrize(
    "word, expected",
    [("racecar", True), ("abba", True), ("ab", False), ("", True), ("x", True)],
)
def test_is_palindrome(word, expected):
    assert is_palindrome(word) is expected


def test_max_char_frequency():
    assert max_char_frequency("aabbbc") == 3


def test_max_char_frequency_empty():
    assert max_char_frequency("") == 0


def test_max_char_frequency_bounded_by_length():
    word = "mississippi"
    assert 1 <= max_char_frequency(word) <= len(word)
    assert max_char_frequency(word * 2) == 2 * max_char_frequency(word)


def test_subsequence_numbers_small():
    assert subsequence_numbers("12") == [12, 2, 1, 0]


@pytest.mark.parametrize("digits", ["305", "1111", "9081"])
def test_subsequence_numbers_invariants(digits):
    numbers = subsequence_numbers(digits)
    assert numbers == sorted(set(numbers), reverse=True)
    assert numbers[0] == int(digits)
    assert numbers[-1] == 0
    assert len(numbers) <= 2 ** len(digits)
    for char in digits:
        assert int(char) in numbers


def test_subsequence_numbers_empty():
    assert subsequence_numbers("") == [0]


@pytest.mark.parametrize("bad", ["12a", "1_2", "-5"])
def test_subsequence_numbers_rejects_non_digits(bad):
    with pytest.raises(ValueError):
        subsequence_numbers(bad)