"""Scratchcards: winning numbers and cascading card copies."""

import re
from dataclasses import dataclass

from advent.inputs import input_lines

_CARD = re.compile(r"Card\s+(\d+):([^|]*)\|(.*)")


@dataclass(frozen=True)
class Card:
    id: int
    winning: tuple
    yours: tuple


def parse_card(line):
    """Parse a line such as 'Card 1: 41 48 | 83 86 6'."""
    match = _CARD.fullmatch(line.strip())
    if match is None:
        raise ValueError(f"not a card: {line!r}")
    return Card(
        int(match[1]),
        tuple(int(token) for token in match[2].split()),
        tuple(int(token) for token in match[3].split()),
    )


def matches(card):
    """How many of your numbers are winning numbers."""
    winning = set(card.winning)
    return sum(1 for number in card.yours if number in winning)


def card_points(cards):
    """Each card scores 1 for its first match, doubling for every further one."""
    return sum(1 << (count - 1) for count in map(matches, cards) if count)


def total_cards(cards):
    """Number of cards held once every match has won copies of the following cards."""
    copies = [1] * len(cards)
    for index, card in enumerate(cards):
        for following in range(index + 1, min(index + 1 + matches(card), len(cards))):
            copies[following] += copies[index]
    return sum(copies)


def main(argv=None):
    cards = [parse_card(line) for line in input_lines(argv) if line.strip()]
    print(card_points(cards))
    print(total_cards(cards))