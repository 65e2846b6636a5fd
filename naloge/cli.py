"""Command-line entry point that runs a set of exercises."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence

from naloge.functions import function_exercises
from naloge.loops import loop_exercises
from naloge.printing import printing_exercises

_SECTIONS: dict[str, Callable[[], None]] = {
    "functions": function_exercises,
    "loops": loop_exercises,
    "printing": printing_exercises,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the chosen exercise section (functions by default)."""
    parser = argparse.ArgumentParser(prog="naloge", description="Run exercise sections.")
    parser.add_argument(
        "section",
        nargs="?",
        default="functions",
        choices=sorted(_SECTIONS),
        help="which exercises to run (default: functions)",
    )
    args = parser.parse_args(argv)
    _SECTIONS[args.section]()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())