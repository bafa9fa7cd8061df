"""Camel Cards: ranking poker-like hands with jokers."""

from collections import Counter
from dataclasses import dataclass
from enum import IntEnum

from advent.inputs import read_input

_JOKER = "J"
_STRENGTHS = {"A": 14, "K": 13, "Q": 12, _JOKER: 1, "T": 10, **{str(d): d for d in range(2, 10)}}


class HandType(IntEnum):
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    FULL_HOUSE = 4
    FOUR_OF_A_KIND = 5
    FIVE_OF_A_KIND = 6


@dataclass(frozen=True)
class Hand:
    cards: str
    bid: int


def card_strength(card):
    """Strength of a single card; the joker is the weakest."""
    try:
        return _STRENGTHS[card]
    except KeyError:
        raise ValueError(f"unknown card: {card!r}") from None


def classify(cards):
    """The best hand type the cards make, with jokers standing in for any card."""
    for card in cards:
        card_strength(card)
    counts = sorted(Counter(card for card in cards if card != _JOKER).values(), reverse=True)
    counts = counts or [0]
    counts[0] += cards.count(_JOKER)
    top = counts[0]
    second = counts[1] if len(counts) > 1 else 0
    if top >= 5:
        return HandType.FIVE_OF_A_KIND
    if top == 4:
        return HandType.FOUR_OF_A_KIND
    if top == 3:
        return HandType.FULL_HOUSE if second == 2 else HandType.THREE_OF_A_KIND
    if top == 2:
        return HandType.TWO_PAIR if second == 2 else HandType.ONE_PAIR
    return HandType.HIGH_CARD


def _rank_key(hand):
    return classify(hand.cards), tuple(card_strength(card) for card in hand.cards)


def parse_hands(text):
    hands = []
    for line in text.splitlines():
        if not line.strip():
            continue
        parts = line.split()
        if len(parts) != 2:
            raise ValueError(f"bad hand line: {line!r}")
        hands.append(Hand(parts[0], int(parts[1])))
    return hands


def total_winnings(hands):
    """Sum of each bid times the rank of its hand, weakest ranked 1."""
    ordered = sorted(hands, key=_rank_key)
    return sum(rank * hand.bid for rank, hand in enumerate(ordered, start=1))


def main(argv=None):
    print(total_winnings(parse_hands(read_input(argv))))