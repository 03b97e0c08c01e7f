"""Trebuchet calibration: recover two-digit values from lines of text."""

import re

_SPELLED = {
    "one": "1",
    "two": "2",
    "three": "3",
    "four": "4",
    "five": "5",
    "six": "6",
    "seven": "7",
    "eight": "8",
    "nine": "9",
}

_SPELLED_PATTERN = re.compile("|".join(_SPELLED))

_ASCII_DIGITS = frozenset("0123456789")


def _calibration_value(line: str) -> int:
    digits = [int(c) for c in line if c in _ASCII_DIGITS]
    if not digits:
        raise ValueError(f"line has no digit: {line!r}")
    return digits[0] * 10 + digits[-1]


def _spell_digits(line: str) -> str:
    """Replace spelled-out digits with numerals, scanning left to right."""
    return _SPELLED_PATTERN.sub(lambda match: _SPELLED[match.group()], line)


def process_part1(text: str) -> str:
    """Sum the calibration values built from the first and last digit of each line."""
    return str(sum(_calibration_value(line) for line in text.splitlines()))


def process_part2(text: str) -> str:
    """Like part 1, but spelled-out digits count as digits too."""
    return str(
        sum(_calibration_value(_spell_digits(line)) for line in text.splitlines())
    )