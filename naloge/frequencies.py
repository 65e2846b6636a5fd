"""Exercises on value frequencies, primes, squares and runs in integer lists."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Sequence


def _truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _has_no_divisor(n: int) -> bool:
    """Report whether n has no divisor in 2..n-1; 1 is excluded, values below 1 pass."""
    if n == 1:
        return False
    if n < 2:
        return True
    return all(n % divisor != 0 for divisor in range(2, math.isqrt(n) + 1))


def _is_perfect_square(n: int) -> bool:
    """Report whether n is the square of a whole number."""
    return n >= 0 and math.isqrt(n) ** 2 == n


def _prime_factors(n: int) -> set[int]:
    """Return the distinct prime factors of n (empty below 2)."""
    factors: set[int] = set()
    divisor = 2
    while divisor * divisor <= n:
        while n % divisor == 0:
            factors.add(divisor)
            n //= divisor
        divisor += 1
    if n > 1:
        factors.add(n)
    return factors


def smallest_repeating_even(numbers: Sequence[int]) -> int:
    """Return the smallest even value that occurs more than once."""
    counts = Counter(n for n in numbers if n % 2 == 0)
    repeated = [n for n, count in counts.items() if count > 1]
    if not repeated:
        raise ValueError("no repeating even values")
    return min(repeated)


def repeating_prime_numbers(numbers: Sequence[int]) -> list[int]:
    """Return the primes that occur at least twice, in order of first appearance."""
    counts = Counter(n for n in numbers if _has_no_divisor(n))
    return [n for n, count in counts.items() if count > 1]


def average_odd_threes(numbers: Sequence[int]) -> float:
    """Average (rounded toward zero) of multiples of 3 found at odd indices."""
    matches = [n for index, n in enumerate(numbers) if index % 2 == 1 and n % 3 == 0]
    if not matches:
        raise ValueError("no matching values at odd indices")
    return float(_truncating_div(sum(matches), len(matches)))


def odd_palindromes(numbers: Sequence[int]) -> int:
    """Count the distinct odd values whose decimal form is a palindrome."""
    found = {
        n
        for n in numbers
        if n % 2 != 0 and (n <= 9 or str(n) == str(n)[::-1])
    }
    return len(found)


def repeating_second_largest(numbers: Sequence[int]) -> int:
    """Return the second largest of the values that occur more than once."""
    counts = Counter(numbers)
    repeated = sorted(n for n, count in counts.items() if count > 1)
    if len(repeated) < 2:
        raise ValueError("not enough repeating values")
    return repeated[-2]


def longest_increasing_run(numbers: Sequence[int]) -> list[int]:
    """Return the first longest strictly increasing contiguous run."""
    if not numbers:
        raise ValueError("empty input")
    best: list[int] = []
    current = [numbers[0]]
    for n in list(numbers)[1:]:
        if n > current[-1]:
            current.append(n)
            continue
        if len(current) > len(best):
            best = current
        current = [n]
    return current if len(current) > len(best) else best


def product_odd_perfect_squares(numbers: Sequence[int]) -> int:
    """Return the product of all odd perfect squares."""
    squares = [n for n in numbers if n % 2 != 0 and _is_perfect_square(n)]
    if not squares:
        raise ValueError("no matching values")
    return math.prod(squares)


def first_double_multiple_of_three(numbers: Sequence[int]) -> int:
    """Return the first multiple of 3 that occurs exactly twice."""
    counts = Counter(numbers)
    for n in numbers:
        if n % 3 == 0 and counts[n] == 2:
            return n
    raise ValueError("no valid match found")


def odd_in_one_only(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Return odd values that occur exactly once across both sequences."""
    counts = Counter(n for n in (*first, *second) if n % 2 != 0)
    return [n for n, count in counts.items() if count == 1]


def index_smallest_multiple_of_five(numbers: Sequence[int]) -> int:
    """Return the first index of the smallest value, all values being multiples of 5."""
    if any(n % 5 != 0 for n in numbers):
        raise ValueError("no valid repeating multiple of 5")
    if not numbers:
        return 0
    return list(numbers).index(min(numbers))


def most_frequent_square(numbers: Sequence[int]) -> int:
    """Return the most frequent perfect square, the earliest on ties."""
    counts = Counter(n for n in numbers if _is_perfect_square(n))
    if not counts:
        raise ValueError("no perfect square values")
    return max(counts, key=counts.__getitem__)


def distinct_prime_divisors(numbers: Sequence[int]) -> int:
    """Count the primes that divide at least two entries of numbers."""
    counts = Counter(p for n in numbers for p in _prime_factors(n))
    return sum(1 for count in counts.values() if count >= 2)


def sum_frequent_div_by_four(numbers: Sequence[int]) -> int:
    """Sum the two most frequent multiples of 4, earliest first on ties."""
    counts = Counter(n for n in numbers if n % 4 == 0)
    if len(counts) <= 1:
        raise ValueError("not enough matching values")

    top_key = top_count = 0
    second_key = second_count = 0
    for n in numbers:
        if n not in counts or n in (top_key, second_key):
            continue
        count = counts[n]
        if count > top_count:
            second_key, second_count = top_key, top_count
            top_key, top_count = n, count
        elif count > second_count:
            second_key, second_count = n, count
    return top_key + second_key