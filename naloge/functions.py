"""Small numeric, string, list and matrix helpers."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence

_VOWELS = frozenset("aeiou")


def _require_items(nums: Sequence[int] | None) -> Sequence[int]:
    """Reject a missing or empty sequence."""
    if nums is None:
        raise TypeError("input is None")
    if len(nums) == 0:
        raise ValueError("input is empty")
    return nums


def _truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def function_exercises() -> None:
    """Print the factorial of 5."""
    try:
        print(factorial(5))
    except ValueError as exc:
        print(f"error calculating factorial: {exc}")


def factorial(n: int) -> int:
    """Return n! for n > 0, and 0 for n == 0."""
    if n < 0:
        raise ValueError(f"negative number: {n}")
    if n == 0:
        return 0
    return math.prod(range(1, n + 1))


def is_prime(n: int) -> bool:
    """Report whether n has no divisor between 2 and n // 2 (1 counts as prime)."""
    if n < 0:
        raise ValueError(f"negative number: {n}")
    if n == 0:
        return False
    return all(n % divisor != 0 for divisor in range(2, n // 2 + 1))


def max_in_list(nums: Sequence[int] | None) -> int:
    """Return the largest value."""
    return max(_require_items(nums))


def min_in_list(nums: Sequence[int] | None) -> int:
    """Return the smallest value."""
    return min(_require_items(nums))


def sum_list(nums: Sequence[int] | None) -> int:
    """Return the sum of all values."""
    return sum(_require_items(nums))


def average_list(nums: Sequence[int] | None) -> int:
    """Return the integer average, rounded toward zero."""
    items = _require_items(nums)
    return _truncating_div(sum(items), len(items))


def count_even(nums: Sequence[int] | None) -> int:
    """Count the non-zero even values."""
    return sum(1 for item in _require_items(nums) if item % 2 == 0 and item != 0)


def count_odds(nums: Sequence[int] | None) -> int:
    """Count the odd values."""
    return sum(1 for item in _require_items(nums) if item % 2 != 0)


def reverse_string(s: str) -> str:
    """Return s reversed."""
    return s[::-1]


def is_palindrome(s: str) -> bool:
    """Report whether a non-empty string reads the same both ways."""
    return bool(s) and s == s[::-1]


def index_of(nums: Sequence[int] | None, target: int) -> int:
    """Return the first index of target, or -1 if absent."""
    for index, item in enumerate(_require_items(nums)):
        if item == target:
            return index
    return -1


def filter_even(nums: Sequence[int] | None) -> list[int]:
    """Return the non-zero even values in order."""
    return [item for item in _require_items(nums) if item % 2 == 0 and item != 0]


def count_vowels(s: str) -> int:
    """Count lower-case vowels."""
    return sum(1 for char in s if char in _VOWELS)


def count_consonants(s: str) -> int:
    """Count every character that is not a lower-case vowel."""
    return sum(1 for char in s if char not in _VOWELS)


def is_leap_year(year: int) -> bool:
    """Report whether year is a Gregorian leap year."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def fibonacci(n: int) -> list[int]:
    """Return the first n Fibonacci numbers, starting at 0."""
    if n <= 0:
        raise ValueError("invalid n")
    sequence = [0, 1][:n]
    while len(sequence) < n:
        sequence.append(sequence[-2] + sequence[-1])
    return sequence


def sum_digits(n: int) -> int:
    """Return the sum of the decimal digits of a non-negative integer."""
    if n < 0:
        raise ValueError("invalid n")
    return sum(int(digit) for digit in str(n))


def is_armstrong(n: int) -> bool:
    """Report whether n equals the sum of its digits raised to the digit count."""
    if n <= 0:
        raise ValueError("invalid input")
    digits = [int(digit) for digit in str(n)]
    return sum(digit ** len(digits) for digit in digits) == n


def multiplication_table(n: int, count: int) -> list[int]:
    """Return n * 1 through n * count."""
    if count < 1:
        raise ValueError("invalid input")
    return [n * factor for factor in range(1, count + 1)]


def count_substring(text: str, sub: str) -> int:
    """Count occurrences of sub starting anywhere but the last position of text."""
    return sum(1 for start in range(len(text) - 1) if text.startswith(sub, start))


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of two non-zero integers."""
    if a == 0 or b == 0:
        raise ValueError("število2 cannot be zero")
    return math.gcd(a, b)


def lcm(a: int, b: int) -> int:
    """Return the least common multiple of two non-zero integers."""
    return abs(a * b) // gcd(a, b)


def unique_ints(nums: Iterable[int]) -> list[int]:
    """Return the values with duplicates removed, keeping first occurrences."""
    return list(dict.fromkeys(nums))


def bubble_sort(nums: list[int]) -> list[int]:
    """Sort nums in place with bubble sort and return it."""
    for end in range(len(nums) - 1, 0, -1):
        swapped = False
        for i in range(end):
            if nums[i] > nums[i + 1]:
                nums[i], nums[i + 1] = nums[i + 1], nums[i]
                swapped = True
        if not swapped:
            break
    return nums


def merge_sorted(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Merge two sorted sequences into one strictly increasing list."""
    merged: list[int] = []
    for value in heapq.merge(first, second):
        if not merged or value > merged[-1]:
            merged.append(value)
    return merged


def sum_matrix(matrix: Iterable[Iterable[int]]) -> int:
    """Return the sum of every element of a (possibly ragged) matrix."""
    return sum(sum(row) for row in matrix)


def main_diagonal(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return matrix[i][i] for every row i."""
    return [row[i] for i, row in enumerate(matrix)]