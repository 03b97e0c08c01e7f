"""Seed almanac: follow seeds through a chain of range maps to locations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class _Range:
    dest_start: int
    source_start: int
    length: int

    @property
    def source_end(self) -> int:
        return self.source_start + self.length

    def source_contains(self, value: int) -> bool:
        return self.source_start <= value < self.source_end

    def translate(self, value: int) -> int:
        return self.dest_start + (value - self.source_start)


_Map = list[_Range]


def _parse_range(line: str) -> _Range:
    fields = line.split()
    if len(fields) != 3:
        raise ValueError(f"malformed map line: {line!r}")
    dest_start, source_start, length = (int(field) for field in fields)
    return _Range(dest_start, source_start, length)


def _parse_almanac(text: str) -> tuple[list[int], list[_Map]]:
    sections = text.strip().split("\n\n")
    seeds = [int(s) for s in sections[0].split("seeds: ")[-1].split()]
    maps = [
        [_parse_range(line) for line in section.split("map:\n")[-1].splitlines()]
        for section in sections[1:]
    ]
    return seeds, maps


def _map_value(value: int, ranges: _Map) -> int:
    for candidate in ranges:
        if candidate.source_contains(value):
            return candidate.translate(value)
    return value


def _map_intervals(
    intervals: list[tuple[int, int]], ranges: _Map
) -> list[tuple[int, int]]:
    """Map half-open intervals through one map; the first matching range wins."""
    mapped: list[tuple[int, int]] = []
    pending = intervals
    for candidate in ranges:
        offset = candidate.dest_start - candidate.source_start
        unmatched: list[tuple[int, int]] = []
        for low, high in pending:
            start = max(low, candidate.source_start)
            end = min(high, candidate.source_end)
            if start < end:
                mapped.append((start + offset, end + offset))
                if low < start:
                    unmatched.append((low, start))
                if end < high:
                    unmatched.append((end, high))
            else:
                unmatched.append((low, high))
        pending = unmatched
    return mapped + pending


def process_part1(text: str) -> str:
    """Lowest location reached by any of the listed seeds."""
    seeds, maps = _parse_almanac(text)
    if not seeds:
        raise ValueError("almanac lists no seeds")
    locations = []
    for seed in seeds:
        for ranges in maps:
            seed = _map_value(seed, ranges)
        locations.append(seed)
    return str(min(locations))


def process_part2(text: str) -> str:
    """Lowest location reached when the seed line lists (start, length) pairs."""
    numbers, maps = _parse_almanac(text)
    if len(numbers) % 2:
        raise ValueError("seed ranges must come in start/length pairs")
    intervals = [
        (start, start + length)
        for start, length in zip(numbers[::2], numbers[1::2])
        if length > 0
    ]
    if not intervals:
        raise ValueError("almanac lists no seeds")
    for ranges in maps:
        intervals = _map_intervals(intervals, ranges)
    return str(min(low for low, _ in intervals))