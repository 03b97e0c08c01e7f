import pytest

from advent2023.day01 import process_part1, process_part2

INPUT = """two1nine
eightwothree
abcone2threexyz
xtwone3four
4nineeightseven2
zoneight234
7pqrstsixteen"""


def test_part2_works():
    assert process_part2(INPUT) == "281"


def test_part1_single_digit_is_used_twice():
    assert process_part1("treb7uchet") == "77"


def test_part1_sums_lines():
    assert process_part1("a1b2c3\n9x8") == str(13 + 98)


def test_part1_line_without_digit_raises():
    with pytest.raises(ValueError):
        process_part1(INPUT)


def test_part1_empty_input_is_zero():
    assert process_part1("") == "0"


@pytest.mark.parametrize(
    "line, expected",
    [
        ("two1nine", "29"),
        ("eightwothree", "83"),
        ("abcone2threexyz", "13"),
        ("xtwone3four", "24"),
        ("4nineeightseven2", "42"),
        ("zoneight234", "14"),
        ("7pqrstsixteen", "76"),
    ],
)
def test_part2_single_lines(line, expected):
    assert process_part2(line) == expected


def test_part2_overlapping_words_take_the_leftmost():
    # "twone" becomes "2ne": the trailing "one" is consumed.
    assert process_part2("twone") == "22"


def test_part2_without_any_digit_raises():
    with pytest.raises(ValueError):
        process_part2("abcdef")