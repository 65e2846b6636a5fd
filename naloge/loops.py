"""Loop and conditional exercises that print their results."""

from __future__ import annotations

from collections.abc import Iterator


def _grade(score: int) -> str | None:
    """Map a score to a letter; exact boundary scores get no grade."""
    if score > 80:
        return "A"
    if 60 < score < 80:
        return "B"
    if 40 < score < 60:
        return "C"
    if 20 < score < 40:
        return "D"
    if score < 20:
        return "F"
    return None


def _fizzbuzz(i: int) -> str:
    if i % 3 == 0 and i % 5 == 0:
        return f"{i} FizzBuzz"
    if i % 5 == 0:
        return f"{i} Buzz"
    if i % 3 == 0:
        return f"{i} Fizz"
    return str(i)


def _sign(num: int) -> str:
    if num < 0:
        return "Negative"
    if num > 0:
        return "Positive"
    return "0"


def _passes_prime_check(n: int) -> bool:
    """Trial division over 2..n//2+1 inclusive, so 1 passes and 2 does not."""
    return all(n % divisor != 0 for divisor in range(2, n // 2 + 2))


def _fibonacci_run(extra: int) -> list[int]:
    sequence = [0, 1]
    for _ in range(extra):
        sequence.append(sequence[-2] + sequence[-1])
    return sequence


def _loop_lines() -> Iterator[str]:
    """Yield every line the loop exercises print, in order."""
    yield from map(str, [1, 2, 3, 4, 5])
    greetings = {"Hello": "World", "name": "nejc"}
    yield from (f"{key} {value}" for key, value in greetings.items())

    yield from map(str, range(1, 11))

    num = 7
    yield "Even" if num % 2 == 0 else "Odd"

    yield from map(str, range(2, 21, 2))

    yield str(sum(range(101)))

    yield str(sum(1 for i in range(1, 51) if i % 3 == 0))

    for _ in range(5):
        yield "Hello"

    yield from (str(i * 5) for i in range(1, 11))

    age = 19
    yield "Eligible" if age >= 18 else "NOT!! ELIGIBLEE"

    yield from (str(i) for i in range(1, 21) if i % 2 == 0)

    yield str(sum(i for i in range(1, 101) if i % 2 != 0))

    yield from map(str, range(10, -1, -1))
    yield "Boom!"

    height, width = 3, 3
    for _ in range(height):
        yield "*" * width

    yield _sign(-3)

    # The "factorial" exercise accumulates a sum.
    n = 5
    yield str(sum(range(1, n + 1)))

    yield from (_fizzbuzz(i) for i in range(1, 31))

    numbers = [4, 10, 2, 99, 23]
    yield str(max([0, *numbers]))

    scores = [80, 90, 85, 75, 95]
    yield str(sum(scores) // len(scores))

    grade = _grade(83)
    if grade is not None:
        yield grade

    value = 2
    while True:
        value *= 2
        yield str(value)
        if value > 1000:
            break

    yield from (str(item) for item in [23, 67, 45, 89, 10, 102] if item > 50)

    yield "hello"[::-1]

    username, credential = "admin", "pass123"
    if username == "admin" and credential == "pass123":
        yield "Welcome"
    else:
        yield "Spizdi intruder!"

    yield from "string"

    yield str(sum(int(digit) for digit in str(1234)))

    menu = {"a": "Add Item", "b": "Remove Item", "c": "Čekavt"}
    choice = menu.get("b")
    if choice is not None:
        yield choice

    yield from (str(st) for st in range(1, 51) if _passes_prime_check(st))

    yield str(min([4, 10, 2, 99, 23]))

    for i in range(1, 101):
        if i == 77:
            break
        yield str(i)

    fib = _fibonacci_run(10)
    yield "[" + " ".join(map(str, fib)) + "]"


def loop_exercises() -> None:
    """Print the output of every loop exercise."""
    for line in _loop_lines():
        print(line)