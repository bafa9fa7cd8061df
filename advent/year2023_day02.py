"""Cube Conundrum: cubes drawn from a bag in several rounds."""

import re
from dataclasses import dataclass
from math import prod

from advent.inputs import input_lines

_GAME = re.compile(r"Game (\d+):(.*)")
_COLOURS = ("red", "green", "blue")


@dataclass(frozen=True)
class Round:
    red: int = 0
    green: int = 0
    blue: int = 0


@dataclass(frozen=True)
class Game:
    id: int
    rounds: tuple


def _parse_round(text):
    counts = {}
    for item in text.split(","):
        item = item.strip()
        if not item:
            continue
        parts = item.split()
        if len(parts) != 2 or parts[1] not in _COLOURS:
            raise ValueError(f"bad cube count: {item!r}")
        counts[parts[1]] = int(parts[0])
    return Round(**counts)


def parse_game(line):
    """Parse a line such as 'Game 1: 3 blue, 4 red; 1 red, 2 green'."""
    match = _GAME.fullmatch(line.strip())
    if match is None:
        raise ValueError(f"not a game: {line!r}")
    rounds = tuple(_parse_round(part) for part in match[2].split(";"))
    return Game(int(match[1]), rounds)


def minimal_power(game):
    """Product of the fewest cubes of each colour that make the game possible."""
    return prod(
        max((getattr(round_, colour) for round_ in game.rounds), default=0)
        for colour in _COLOURS
    )


def main(argv=None):
    games = [parse_game(line) for line in input_lines(argv) if line.strip()]
    print(sum(minimal_power(game) for game in games))