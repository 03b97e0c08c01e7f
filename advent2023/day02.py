"""Cube conundrum: check and size the cube draws of each game."""

from math import prod

_LIMITS = {"blue": 14, "green": 13, "red": 12}


def _parse_draw(draw: str) -> tuple[int, str]:
    fields = draw.split()
    if len(fields) < 2:
        raise ValueError(f"malformed draw: {draw!r}")
    return int(fields[0]), fields[1]


def _parse_game(line: str) -> tuple[str, list[list[tuple[int, str]]]]:
    parts = line.split(": ")
    sets = [[_parse_draw(draw) for draw in s.split(", ")] for s in parts[-1].split("; ")]
    return parts[0], sets


def _is_possible(sets: list[list[tuple[int, str]]]) -> bool:
    for draws in sets:
        for count, colour in draws:
            if colour not in _LIMITS:
                raise ValueError(f"unknown colour: {colour!r}")
            if count > _LIMITS[colour]:
                return False
    return True


def process_part1(text: str) -> str:
    """Sum the ids of the games possible with 12 red, 13 green and 14 blue cubes."""
    total = 0
    for line in text.splitlines():
        header, sets = _parse_game(line)
        game_id = int(header.replace("Game ", ""))
        if _is_possible(sets):
            total += game_id
    return str(total)


def process_part2(text: str) -> str:
    """Sum the power of the smallest cube set that makes each game possible."""
    total = 0
    for line in text.splitlines():
        _, sets = _parse_game(line)
        needed = {"red": 0, "green": 0, "blue": 0}
        for draws in sets:
            for count, colour in draws:
                if colour not in needed:
                    raise ValueError(f"unknown colour: {colour!r}")
                needed[colour] = max(needed[colour], count)
        total += prod(needed.values())
    return str(total)