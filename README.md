# advent2023

Solutions to the first eight days of Advent of Code 2023. You can use them
as a library or from the command line.

| Day | Module               | Part 1 | Part 2 |
|-----|----------------------|--------|--------|
| 1   | `advent2023.day01`   | yes    | yes    |
| 2   | `advent2023.day02`   | yes    | yes    |
| 3   | `advent2023.day03`   | yes    | yes    |
| 4   | `advent2023.day04`   | yes    | yes    |
| 5   | `advent2023.day05`   | yes    | yes    |
| 6   | `advent2023.day06`   | yes    | yes    |
| 7   | `advent2023.day07`   | yes    | no     |
| 8   | `advent2023.day08`   | yes    | no     |

## Installation

```
pip install .
```

The package has no runtime dependencies. It needs Python 3.10 or later.

## Command line

The `advent2023` command takes three arguments: the day, the part, and the
puzzle input file. It prints the answer.

```
advent2023 4 2 input.txt
```

Leave out the input file, or give `-`, and the command reads the input from
standard input:

```
advent2023 1 1 < input.txt
```

If there is no solver for the requested day and part, the command reports an
error. Run `advent2023 --help` for usage.

## Library

Every day module has `process_part1(text)`. Days 1 to 6 also have
`process_part2(text)`. Each function takes the whole puzzle input as a string
and returns the answer as a string. Malformed input raises `ValueError`.

```python
from advent2023 import day02

example = (
    "Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green\n"
    "Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue"
)
print(day02.process_part1(example))  # 3
```

`advent2023.cli.solve(day, part, text)` calls the right function by number. It
raises `ValueError` for a day and part it has no solver for.

### Day 7 hands

`advent2023.day07` also exposes two names:

- `HandType`: an enum of the combinations, strongest first.
- `Hand`: a hand of cards.

`Hand.from_cards("KK677")` builds a hand and classifies it. It raises
`ValueError` for a hand that fits no combination or holds an unknown card.

Hands compare by combination first, then card by card in the order
`AKQJT98765432`. A weaker hand compares as less than a stronger one, so
`sorted()` lists hands from weakest to strongest.

## Not included

Part 2 of days 7 and 8 is not solved. `advent2023 7 2` and `advent2023 8 2`
report that there is no solver.

## Tests

```
pip install .[test]
pytest
```