"""Gear ratios: numbers on an engine schematic next to symbols."""

from dataclasses import dataclass
from math import prod

_ASCII_DIGITS = frozenset("0123456789")


@dataclass
class _Number:
    row: int
    start: int
    end: int
    value: int

    def touches(self, row: int, col: int) -> bool:
        """Whether the cell is one of the eight neighbours of any digit."""
        return abs(row - self.row) <= 1 and self.start - 1 <= col <= self.end + 1


def _scan(text: str) -> tuple[list[_Number], list[tuple[int, int]]]:
    numbers: list[_Number] = []
    symbols: list[tuple[int, int]] = []
    for row, line in enumerate(text.splitlines()):
        current: _Number | None = None
        for col, char in enumerate(line):
            if char in _ASCII_DIGITS:
                if current is not None and current.end + 1 == col:
                    current.end = col
                    current.value = current.value * 10 + int(char)
                else:
                    current = _Number(row, col, col, int(char))
                    numbers.append(current)
                continue
            if char != ".":
                symbols.append((row, col))
    return numbers, symbols


def process_part1(text: str) -> str:
    """Sum every number adjacent to at least one symbol."""
    numbers, symbols = _scan(text)
    return str(
        sum(
            number.value
            for number in numbers
            if any(number.touches(row, col) for row, col in symbols)
        )
    )


def process_part2(text: str) -> str:
    """Sum the products of numbers around each symbol touching more than one number."""
    numbers, symbols = _scan(text)
    total = 0
    for row, col in symbols:
        adjacent = [number.value for number in numbers if number.touches(row, col)]
        if len(adjacent) > 1:
            total += prod(adjacent)
    return str(total)