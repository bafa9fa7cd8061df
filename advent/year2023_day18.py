"""Lavaduct Lagoon: the volume dug out by following a dig plan."""

import re
from dataclasses import dataclass

from advent.inputs import input_lines

_DELTAS = {"U": (0, -1), "R": (1, 0), "D": (0, 1), "L": (-1, 0)}
_HEX_DIRECTIONS = "RDLU"
_HEX = re.compile(r"\(#([0-9a-fA-F]{5})([0-3])\)")


@dataclass(frozen=True)
class Step:
    direction: str
    length: int


def parse_plain_step(line):
    """Read the direction and length written at the start of 'R 6 (#70c710)'."""
    parts = line.split()
    if len(parts) < 2 or parts[0] not in _DELTAS:
        raise ValueError(f"bad dig step: {line!r}")
    return Step(parts[0], int(parts[1]))


def parse_hex_step(line):
    """Read the step hidden in the colour: five hex digits of length, then a direction."""
    parts = line.split()
    if len(parts) != 3:
        raise ValueError(f"bad dig step: {line!r}")
    match = _HEX.fullmatch(parts[2])
    if match is None:
        raise ValueError(f"bad colour code: {parts[2]!r}")
    return Step(_HEX_DIRECTIONS[int(match[2])], int(match[1], 16))


def lagoon_volume(steps):
    """Cubic metres held by the trench and its interior."""
    x = y = 0
    twice_area = 0
    perimeter = 0
    for step in steps:
        try:
            dx, dy = _DELTAS[step.direction]
        except KeyError:
            raise ValueError(f"unknown direction: {step.direction!r}") from None
        nx, ny = x + dx * step.length, y + dy * step.length
        twice_area += y * nx - x * ny
        perimeter += step.length
        x, y = nx, ny
    if (x, y) != (0, 0):
        raise ValueError("the dig plan does not return to its start")
    return abs(twice_area) // 2 + perimeter // 2 + 1


def main(argv=None):
    steps = [parse_hex_step(line) for line in input_lines(argv) if line.strip()]
    print(lagoon_volume(steps))