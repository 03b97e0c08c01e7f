import pytest

from advent2023.day07 import Hand, HandType, process_part1

INPUT = """32T3K 765
T55J5 684
KK677 28
KTJJT 220
QQQJA 483"""


def test_part1_works():
    assert process_part1(INPUT) == "6440"


@pytest.mark.parametrize(
    "cards, expected",
    [
        ("32T3K", HandType.ONE_PAIR),
        ("T55J5", HandType.THREE_OF_A_KIND),
        ("KK677", HandType.TWO_PAIR),
        ("KTJJT", HandType.TWO_PAIR),
        ("QQQJA", HandType.THREE_OF_A_KIND),
        ("AAAAA", HandType.FIVE_OF_A_KIND),
        ("AA8AA", HandType.FOUR_OF_A_KIND),
        ("23332", HandType.FULL_HOUSE),
        ("23456", HandType.HIGH_CARD),
    ],
)
def test_hand_types(cards, expected):
    assert Hand.from_cards(cards).combination is expected


def test_same_type_compares_cards_left_to_right():
    assert Hand.from_cards("KTJJT") < Hand.from_cards("KK677")
    assert Hand.from_cards("T55J5") < Hand.from_cards("QQQJA")


def test_better_type_wins():
    assert Hand.from_cards("23456") < Hand.from_cards("22345")
    assert Hand.from_cards("AAAAK") < Hand.from_cards("22222")


def test_sorting_orders_weakest_first():
    hands = [Hand.from_cards(line.split()[0]) for line in INPUT.splitlines()]
    ordered = [hand.cards for hand in sorted(hands)]
    assert ordered == ["32T3K", "KTJJT", "KK677", "T55J5", "QQQJA"]


def test_short_hand_is_rejected():
    with pytest.raises(ValueError):
        Hand.from_cards("AAAA")


def test_unknown_card_is_rejected():
    with pytest.raises(ValueError):
        Hand.from_cards("2345X")