"""Camel cards: rank poker-like hands and total their winnings."""

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from functools import total_ordering

_CARD_ORDER = "AKQJT98765432"


class HandType(Enum):
    """Hand combinations, strongest first."""

    FIVE_OF_A_KIND = 0
    FOUR_OF_A_KIND = 1
    FULL_HOUSE = 2
    THREE_OF_A_KIND = 3
    TWO_PAIR = 4
    ONE_PAIR = 5
    HIGH_CARD = 6


_PATTERNS = {
    (1, 1, 1, 1, 1): HandType.HIGH_CARD,
    (1, 1, 1, 2): HandType.ONE_PAIR,
    (1, 2, 2): HandType.TWO_PAIR,
    (1, 1, 3): HandType.THREE_OF_A_KIND,
    (2, 3): HandType.FULL_HOUSE,
    (1, 4): HandType.FOUR_OF_A_KIND,
    (5,): HandType.FIVE_OF_A_KIND,
}


def _card_rank(card: str) -> int:
    index = _CARD_ORDER.find(card)
    if index < 0 or len(card) != 1:
        raise ValueError(f"invalid card: {card!r}")
    return index


@total_ordering
@dataclass(frozen=True, eq=False)
class Hand:
    """A hand of five cards; a hand is less than another when it is weaker."""

    cards: str
    combination: HandType
    _strength: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        ranks = tuple(_card_rank(card) for card in self.cards)
        object.__setattr__(self, "_strength", (self.combination.value, *ranks))

    @classmethod
    def from_cards(cls, cards: str) -> "Hand":
        """Build a hand, classifying its combination."""
        pattern = tuple(sorted(Counter(cards).values()))
        if pattern not in _PATTERNS:
            raise ValueError(f"invalid hand: {cards!r}")
        return cls(cards, _PATTERNS[pattern])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self._strength == other._strength

    def __lt__(self, other: "Hand") -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        # Lower strength tuples are stronger hands.
        return self._strength > other._strength

    def __hash__(self) -> int:
        return hash(self._strength)


def process_part1(text: str) -> str:
    """Sum of bids, each multiplied by its hand's rank from weakest (1) up."""
    game = []
    for line in text.splitlines():
        fields = line.split()
        if len(fields) < 2:
            raise ValueError(f"expected a hand and a bid: {line!r}")
        game.append((Hand.from_cards(fields[0]), int(fields[1])))
    game.sort(key=lambda entry: entry[0])
    return str(sum(rank * bid for rank, (_, bid) in enumerate(game, start=1)))