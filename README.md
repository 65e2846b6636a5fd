# naloge

Small programming exercises: routines over lists of integers, strings and
small matrices, plus scripted exercises that print their results to
standard output. The package has no dependencies beyond the standard
library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
naloge [functions|loops|printing]
```

- `functions` (the default) prints the factorial of 5.
- `loops` prints the output of the loop and conditional exercises
  (counting, FizzBuzz, sums, a star grid, a countdown, primes, Fibonacci
  numbers and so on).
- `printing` prints the string formatting exercises.

## Library use

### `naloge.functions`

Basic routines: `factorial`, `is_prime`, `max_in_list`, `min_in_list`,
`sum_list`, `average_list`, `count_even`, `count_odds`, `reverse_string`,
`is_palindrome`, `index_of`, `filter_even`, `count_vowels`,
`count_consonants`, `is_leap_year`, `fibonacci`, `sum_digits`,
`is_armstrong`, `multiplication_table`, `count_substring`, `gcd`, `lcm`,
`unique_ints`, `bubble_sort`, `merge_sorted`, `sum_matrix`,
`main_diagonal`, and `function_exercises()`, which the command runs.

Some of these follow their own conventions, for example:

- `factorial(0)` returns `0`, and `is_prime(1)` returns `True`.
- `count_even` and `filter_even` skip zero.
- `average_list` rounds toward zero.
- `bubble_sort` sorts the given list in place and returns it.
- `merge_sorted` drops duplicates, so its result is strictly increasing.
- `count_substring` does not count a match that starts at the last
  character of the text.

### `naloge.frequencies`

Counting puzzles over integer lists: `smallest_repeating_even`,
`repeating_prime_numbers`, `average_odd_threes`, `odd_palindromes`,
`repeating_second_largest`, `longest_increasing_run`,
`product_odd_perfect_squares`, `first_double_multiple_of_three`,
`odd_in_one_only`, `index_smallest_multiple_of_five`,
`most_frequent_square`, `distinct_prime_divisors` and
`sum_frequent_div_by_four`.

### `naloge.filters`

Filtering puzzles over integers and strings: `shortest_unique_digit`,
`how_many_sum_to_even`, `common_lowercase`, `sum_unique_primes`,
`only_letters_palindromes`, `non_negative_average`,
`longest_same_start_end`, `how_many_between_small_and_high` and
`unique_strings_sorted`.

### `naloge.loops` and `naloge.printing`

`loop_exercises()` and `printing_exercises()` print fixed examples; they
take no arguments and return nothing.

### Example

```python
from naloge.functions import gcd, fibonacci
from naloge.frequencies import smallest_repeating_even

gcd(48, 18)                              # 6
fibonacci(5)                             # [0, 1, 1, 2, 3]
smallest_repeating_even([2, 4, 2, 6, 6]) # 2
```

### Errors

Where a function has no valid answer it mostly raises `ValueError` with a
short message, such as `"no repeating even values"` or `"input is empty"`.
The list routines in `naloge.functions` raise `TypeError` when given
`None`. A few functions return a value instead: `index_of` returns `-1`
when the target is absent, and `shortest_unique_digit` and
`longest_same_start_end` return an empty string when no entry qualifies.

## Scope

The scripted exercises print fixed values; none of them reads input from
the user or from files.