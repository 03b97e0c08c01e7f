"""Command line entry point: solve one part of one day's puzzle."""

import argparse
import sys
from collections.abc import Callable, Sequence

from advent2023 import day01, day02, day03, day04, day05, day06, day07, day08

_SOLVERS: dict[tuple[int, int], Callable[[str], str]] = {
    (1, 1): day01.process_part1,
    (1, 2): day01.process_part2,
    (2, 1): day02.process_part1,
    (2, 2): day02.process_part2,
    (3, 1): day03.process_part1,
    (3, 2): day03.process_part2,
    (4, 1): day04.process_part1,
    (4, 2): day04.process_part2,
    (5, 1): day05.process_part1,
    (5, 2): day05.process_part2,
    (6, 1): day06.process_part1,
    (6, 2): day06.process_part2,
    (7, 1): day07.process_part1,
    (8, 1): day08.process_part1,
}


def solve(day: int, part: int, text: str) -> str:
    """Run the solver for the given day and part on the puzzle input."""
    try:
        solver = _SOLVERS[(day, part)]
    except KeyError:
        raise ValueError(f"no solver for day {day} part {part}") from None
    return solver(text)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a puzzle input and print the answer."""
    parser = argparse.ArgumentParser(
        prog="advent2023", description="Solve a puzzle part for a given day."
    )
    parser.add_argument("day", type=int)
    parser.add_argument("part", type=int)
    parser.add_argument(
        "input", nargs="?", default="-", help="input file, or - for stdin"
    )
    args = parser.parse_args(argv)
    if (args.day, args.part) not in _SOLVERS:
        parser.error(f"no solver for day {args.day} part {args.part}")
    if args.input == "-":
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    print(solve(args.day, args.part, text))
    return 0


if __name__ == "__main__":
    sys.exit(main())