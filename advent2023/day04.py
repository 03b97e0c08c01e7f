"""Scratchcards: score matches and cascade won copies."""


def _matches(line: str) -> int:
    content = line.split(": ")[-1]
    parts = content.split(" | ")
    if len(parts) < 2:
        raise ValueError(f"card has no ' | ' separator: {line!r}")
    winning = {int(n) for n in parts[0].split()}
    numbers = {int(n) for n in parts[1].split()}
    return len(winning & numbers)


def process_part1(text: str) -> str:
    """Sum card points: one for the first match, doubled for each further match."""
    total = 0
    for line in text.splitlines():
        count = _matches(line)
        if count:
            total += 2 ** (count - 1)
    return str(total)


def process_part2(text: str) -> str:
    """Count all cards once each winning card copies the cards that follow it."""
    wins = [_matches(line) for line in text.splitlines()]
    copies = [1] * len(wins)
    for index, count in enumerate(wins):
        if index + count >= len(wins):
            raise ValueError(f"card {index + 1} wins cards past the end of the table")
        for following in range(index + 1, index + count + 1):
            copies[following] += copies[index]
    return str(sum(copies))