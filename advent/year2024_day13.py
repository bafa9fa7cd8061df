"""Claw Contraption: the cheapest button presses to reach each prize."""

import re
from dataclasses import dataclass

from advent.inputs import read_input

OFFSET = 10_000_000_000_000
_LIMIT = 100
_A_COST = 3

_BUTTON = re.compile(r"Button (A|B): X\+(\d+), Y\+(\d+)")
_PRIZE = re.compile(r"Prize: X=(\d+), Y=(\d+)")


@dataclass(frozen=True)
class Machine:
    a: tuple
    b: tuple
    prize: tuple


def parse_machines(text):
    """Machines described by an A line, a B line and a prize line each."""
    buttons = [(int(x), int(y)) for _, x, y in _BUTTON.findall(text)]
    prizes = [(int(x), int(y)) for x, y in _PRIZE.findall(text)]
    if len(buttons) != 2 * len(prizes):
        raise ValueError("every machine needs two buttons and a prize")
    return [
        Machine(buttons[2 * index], buttons[2 * index + 1], prize)
        for index, prize in enumerate(prizes)
    ]


def _cost(a_presses, b_presses):
    return _A_COST * a_presses + b_presses


def tokens_limited(machines):
    """Tokens needed for prizes reachable with at most 100 presses of B."""
    tokens = 0
    for machine in machines:
        (a1, a2), (b1, b2), (c1, c2) = machine.a, machine.b, machine.prize
        determinant = a1 * b2 - a2 * b1
        for b_presses in range(_LIMIT + 1):
            if determinant * b_presses != a1 * c2 - a2 * c1:
                continue
            remainder = c1 - b1 * b_presses
            if remainder % a1 == 0:
                tokens += _cost(remainder // a1, b_presses)
    return tokens


def tokens_far(machines, offset):
    """Tokens needed when every prize is moved by offset along both axes."""
    tokens = 0
    for machine in machines:
        (a1, a2), (b1, b2) = machine.a, machine.b
        c1, c2 = machine.prize[0] + offset, machine.prize[1] + offset
        determinant = a1 * b2 - a2 * b1
        numerator = a1 * c2 - a2 * c1
        if determinant == 0 or numerator % determinant:
            continue
        b_presses = numerator // determinant
        remainder = c1 - b1 * b_presses
        if remainder % a1 == 0:
            tokens += _cost(remainder // a1, b_presses)
    return tokens


def main(argv=None):
    machines = parse_machines(read_input(argv))
    print(tokens_limited(machines))
    print(tokens_far(machines, OFFSET))