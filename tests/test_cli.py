import pytest

from naloge.cli import main
from naloge.functions import function_exercises
from naloge.loops import loop_exercises
from naloge.printing import printing_exercises


def _output_of(func, capsys):
    func()
    return capsys.readouterr().out


def test_default_runs_functions(capsys):
    expected = _output_of(function_exercises, capsys)
    assert main([]) == 0
    assert capsys.readouterr().out == expected


def test_loops_section(capsys):
    expected = _output_of(loop_exercises, capsys)
    assert main(["loops"]) == 0
    out = capsys.readouterr().out
    assert out == expected
    assert "Boom!" in out.splitlines()


def test_printing_section(capsys):
    expected = _output_of(printing_exercises, capsys)
    assert main(["printing"]) == 0
    assert capsys.readouterr().out == expected


def test_unknown_section_rejected(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["conditionals"])
    assert excinfo.value.code == 2
    assert "invalid choice" in capsys.readouterr().err