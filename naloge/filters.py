"""Exercises that filter, count and pick from lists of integers and strings."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from naloge.functions import is_palindrome

_PUNCTUATION = "!.,=?:<>*-+'"
_STRIP_WORD = str.maketrans("", "", _PUNCTUATION)
_STRIP_PHRASE = str.maketrans("", "", " " + _PUNCTUATION)
_DIGITS = frozenset("0123456789")


def _is_prime_or_negative(n: int) -> bool:
    """Report whether n has no divisor in 2..n//2; 0 and 1 fail, negatives pass."""
    if n < 2:
        return n < 0
    return all(n % divisor != 0 for divisor in range(2, n // 2 + 1))


def shortest_unique_digit(strings: Sequence[str]) -> str:
    """Return the shortest all-digit string without repeated digits, the last on ties.

    Returns an empty string when no entry qualifies.
    """
    if not strings:
        raise ValueError("no valid string found")
    shortest = ""
    for s in strings:
        chars = set(s)
        if not chars <= _DIGITS or len(chars) != len(s):
            continue
        if not shortest or len(s) <= len(shortest):
            shortest = s
    return shortest


def how_many_sum_to_even(numbers: Sequence[int]) -> int:
    """Count runs of consecutive odd values whose non-zero sum is even."""
    groups = 0
    current = 0
    for n in numbers:
        if n % 2 != 0:
            current += n
            continue
        if current != 0 and current % 2 == 0:
            groups += 1
        current = 0
    if current != 0 and current % 2 == 0:
        groups += 1
    return groups


def common_lowercase(words: Sequence[str]) -> str:
    """Return the most common word after lowercasing and stripping punctuation."""
    if not words:
        raise ValueError("no input provided")
    counts = Counter(word.lower().translate(_STRIP_WORD) for word in words)
    return counts.most_common(1)[0][0]


def sum_unique_primes(numbers: Sequence[int]) -> int:
    """Sum the primes that occur exactly once."""
    if not numbers:
        raise ValueError("no qualifying values")
    counts = Counter(n for n in numbers if _is_prime_or_negative(n))
    return sum(n for n, count in counts.items() if count == 1)


def only_letters_palindromes(words: Sequence[str]) -> list[str]:
    """Return the words that are palindromes once lowercased and stripped of punctuation."""
    return [
        word
        for word in words
        if is_palindrome(word.lower().translate(_STRIP_PHRASE))
    ]


def non_negative_average(numbers: Sequence[int]) -> int:
    """Return the floored average of the positive even values."""
    evens = [n for n in numbers if n > 0 and n % 2 == 0]
    if not evens:
        raise ValueError("no even values")
    return sum(evens) // len(evens)


def longest_same_start_end(words: Sequence[str]) -> str:
    """Return the longest word whose first and last letters match case-insensitively.

    The last word wins ties; an empty string is returned when none matches.
    """
    if not words:
        raise ValueError("no valid word found")
    longest = ""
    for word in words:
        if not word:
            continue
        if word[0].casefold() == word[-1].casefold() and len(word) >= len(longest):
            longest = word
    return longest


def how_many_between_small_and_high(numbers: Sequence[int]) -> int:
    """Among values above 10, count the positions strictly between the smallest and largest."""
    if not numbers:
        raise ValueError("not enough values")
    above = [n for n in numbers if n > 10]
    if not above:
        return 0
    low = above.index(min(above))
    high = above.index(max(above))
    return max(abs(high - low) - 1, 0)


def unique_strings_sorted(words: Sequence[str]) -> list[str]:
    """Return the strings that occur exactly once, sorted alphabetically."""
    counts = Counter(words)
    return sorted(word for word, count in counts.items() if count == 1)