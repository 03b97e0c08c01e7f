"""Boat races: count the button hold times that beat the record."""

from math import prod


def _ways_to_win(time: int, record: int) -> int:
    """Count holds h in [0, time] with h * (time - h) > record."""
    half = time // 2
    if half * (time - half) <= record:
        return 0
    low, high = 0, half
    while low < high:
        mid = (low + high) // 2
        if mid * (time - mid) > record:
            high = mid
        else:
            low = mid + 1
    return time - 2 * low + 1


def _fields(line: str) -> list[str]:
    return line.split()[1:]


def _two_lines(text: str) -> tuple[str, str]:
    lines = text.splitlines()
    if len(lines) < 2:
        raise ValueError("expected a time line and a distance line")
    return lines[0], lines[1]


def process_part1(text: str) -> str:
    """Product of the number of winning holds over every race."""
    times_line, records_line = _two_lines(text)
    times = [int(field) for field in _fields(times_line)]
    records = [int(field) for field in _fields(records_line)]
    return str(prod(_ways_to_win(t, r) for t, r in zip(records and times, records)))


def process_part2(text: str) -> str:
    """Winning holds for the single race formed by joining each line's digits."""
    times_line, records_line = _two_lines(text)
    time = int("".join(_fields(times_line)))
    record = int("".join(_fields(records_line)))
    return str(_ways_to_win(time, record))