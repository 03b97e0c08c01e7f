"""Haunted wasteland: follow left/right instructions through a node network."""

from itertools import cycle

_START = "AAA"
_GOAL = "ZZZ"


def _parse_network(lines: list[str]) -> dict[str, tuple[str, str]]:
    network: dict[str, tuple[str, str]] = {}
    for line in lines:
        if not line.strip():
            continue
        key, sep, value = line.partition(" = ")
        if not sep:
            raise ValueError(f"malformed node line: {line!r}")
        parts = value.strip().split(", ")
        if len(parts) < 2:
            raise ValueError(f"node needs a left and a right: {line!r}")
        network[key.strip()] = (parts[0].replace("(", ""), parts[1].replace(")", ""))
    return network


def process_part1(text: str) -> str:
    """Number of steps from AAA to ZZZ, repeating the instructions as needed."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("no instructions")
    instructions = lines[0]
    network = _parse_network(lines[1:])
    current = _START
    steps = 0
    if current != _GOAL and not instructions:
        raise ValueError("no instructions")
    for instruction in cycle(instructions):
        if current == _GOAL:
            break
        if current not in network:
            raise ValueError(f"unknown node: {current!r}")
        left, right = network[current]
        if instruction == "L":
            current = left
        elif instruction == "R":
            current = right
        else:
            raise ValueError(f"invalid instruction: {instruction!r}")
        steps += 1
    return str(steps)