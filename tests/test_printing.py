import pytest

from naloge.printing import printing_exercises


@pytest.fixture
def lines(capsys):
    printing_exercises()
    return capsys.readouterr().out.splitlines()


def test_greeting(lines):
    assert "Hello, Nejc! Welcome to Go." in lines


def test_full_name(lines):
    assert "Ime in Priimek: Nejc Cencljotka" in lines


def test_sentence(lines):
    assert lines[-1] == "The sky is blue"


def test_formatted_first_line(lines):
    first = lines[0]
    assert first.startswith("integers: 10, ")
    assert '"quoted text"' in first
    assert first.endswith("verbose: oopsie-daisy")
    assert "Hello World!" in first


def test_length_line_counts_characters(lines):
    line = next(line for line in lines if line.startswith("inputString has:"))
    count = int(line.split()[2])
    assert count == len("some string foobar")


def test_case_changes(lines):
    assert "im a lowercase" not in lines
    assert "IM AN UPPERCASE" not in lines
    assert any(line.isupper() for line in lines)


def test_replacement_printed_twice(lines):
    assert lines.count("Go is awesome") == 2
    assert "Go is boring" not in lines


def test_profile_line(lines):
    line = next(line for line in lines if "Aljoša" in line)
    assert "Serbia" in line
    assert "23" in line


def test_quoted_special_characters(lines):
    line = lines[-2]
    assert line.startswith('"quote", ')
    assert line.endswith("\\")
    assert "se uporablja k quotaš" in line