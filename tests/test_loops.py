import pytest

from naloge.loops import loop_exercises


@pytest.fixture
def lines(capsys):
    loop_exercises()
    return capsys.readouterr().out.splitlines()


def test_countdown_ends_with_boom(lines):
    idx = lines.index("Boom!")
    assert lines[idx - 1] == "0"
    assert lines[idx - 2] == "1"
    assert lines[idx - 11] == "10"


def test_hello_printed_five_times(lines):
    assert lines.count("Hello") == 5


def test_star_grid_has_three_rows(lines):
    assert lines.count("***") == 3


def test_fixed_messages_present(lines):
    for message in ("Odd", "Eligible", "Negative", "Welcome", "Remove Item", "A"):
        assert message in lines


def test_rejected_branches_absent(lines):
    for message in ("Even", "NOT!! ELIGIBLEE", "Spizdi intruder!", "Add Item"):
        assert message not in lines


def test_fizzbuzz_labels_match_divisibility(lines):
    labelled = [line.split() for line in lines if line.endswith(("Fizz", "Buzz"))]
    assert labelled
    for number, label in labelled:
        n = int(number)
        if label == "FizzBuzz":
            assert n % 15 == 0
        elif label == "Buzz":
            assert n % 5 == 0 and n % 3 != 0
        else:
            assert n % 3 == 0 and n % 5 != 0


def test_reversed_string(lines):
    assert "olleh" in lines


def test_fibonacci_line_follows_recurrence(lines):
    last = lines[-1]
    assert last.startswith("[") and last.endswith("]")
    values = [int(v) for v in last[1:-1].split()]
    assert values[:2] == [0, 1]
    assert all(values[i] == values[i - 1] + values[i - 2] for i in range(2, len(values)))


def test_stops_before_77(lines):
    assert "76" in lines
    assert lines[-2] == "76"
    assert "77" not in lines[lines.index("Remove Item"):]


def test_word_letters_in_order(lines):
    idx = lines.index("Welcome")
    assert "".join(lines[idx + 1: idx + 7]) == "string"