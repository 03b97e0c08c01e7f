import io

import pytest

from advent2023 import day02, day04, day06
from advent2023.cli import main, solve

DAY02 = """Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green
Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue
Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red
Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red
Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green"""

DAY06 = """Time:      7  15   30
Distance:  9  40  200"""


def test_solve_dispatches_to_day_modules():
    assert solve(2, 1, DAY02) == day02.process_part1(DAY02)
    assert solve(2, 2, DAY02) == day02.process_part2(DAY02)
    assert solve(6, 2, DAY06) == day06.process_part2(DAY06)


def test_solve_returns_known_answer():
    assert solve(2, 1, DAY02) == "8"


def test_solve_unknown_part_raises():
    with pytest.raises(ValueError):
        solve(7, 2, DAY02)
    with pytest.raises(ValueError):
        solve(9, 1, DAY02)


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(DAY02, encoding="utf-8")
    assert main(["2", "2", str(path)]) == 0
    assert capsys.readouterr().out.strip() == "2286"


def test_main_reads_stdin(monkeypatch, capsys):
    card = "Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53"
    monkeypatch.setattr("sys.stdin", io.StringIO(card))
    assert main(["4", "1"]) == 0
    assert capsys.readouterr().out.strip() == day04.process_part1(card)


def test_main_rejects_unknown_day():
    with pytest.raises(SystemExit) as excinfo:
        main(["8", "2", "-"])
    assert excinfo.value.code == 2