"""Keypad Conundrum: typing codes through a chain of robot-operated keypads."""

import re
from itertools import pairwise

from advent.inputs import read_input

NUMERIC_KEYPAD = ("789", "456", "123", " 0A")
DIRECTIONAL_KEYPAD = (" ^A", "<v>")
_DIRECTIONAL_KEYS = "><^vA"
_GAP = " "
_MOVES = ((">", 1, 0), ("<", -1, 0), ("v", 0, 1), ("^", 0, -1))
_LEADING_NUMBER = re.compile(r"\d+")


def _position(keypad, key):
    if key != _GAP:
        for y, row in enumerate(keypad):
            x = row.find(key)
            if x != -1:
                return x, y
    raise ValueError(f"no key {key!r} on keypad")


def key_paths(keypad, start, end):
    """Shortest move sequences, each followed by 'A', taking the arm from start to end.

    Paths never pass over the keypad's gap.
    """
    tx, ty = _position(keypad, end)

    def walk(x, y, path):
        if keypad[y][x] == _GAP:
            return
        if (x, y) == (tx, ty):
            yield path + "A"
            return
        for symbol, dx, dy in _MOVES:
            if (dx > 0 and x < tx) or (dx < 0 and x > tx) or (dy > 0 and y < ty) or (
                dy < 0 and y > ty
            ):
                yield from walk(x + dx, y + dy, path + symbol)

    return list(walk(*_position(keypad, start), ""))


def numeric_sequences(code):
    """Every directional sequence that types the code on the numeric keypad."""
    sequences = [""]
    current = "A"
    for key in code:
        pieces = key_paths(NUMERIC_KEYPAD, current, key)
        sequences = [start + piece for piece in pieces for start in sequences]
        current = key
    return sequences


def _press_cost(table, sequence):
    return sum(table[pair] for pair in pairwise("A" + sequence))


def directional_costs(depth):
    """Per level 0..depth, the presses needed to press each key after another.

    Level 0 is pressing a key directly; each further level adds one robot.
    """
    levels = [{(a, b): 1 for a in _DIRECTIONAL_KEYS for b in _DIRECTIONAL_KEYS}]
    for _ in range(depth):
        previous = levels[-1]
        levels.append(
            {
                (a, b): min(
                    _press_cost(previous, path)
                    for path in key_paths(DIRECTIONAL_KEYPAD, a, b)
                )
                for a in _DIRECTIONAL_KEYS
                for b in _DIRECTIONAL_KEYS
            }
        )
    return levels


def sequence_cost(sequence, depth, costs):
    """Human presses needed to type a directional sequence through depth robots."""
    if not 0 <= depth < len(costs):
        raise ValueError(f"no costs computed for depth {depth}")
    return _press_cost(costs[depth], sequence)


def _numeric_part(code):
    match = _LEADING_NUMBER.match(code)
    if match is None:
        raise ValueError(f"code has no numeric part: {code!r}")
    return int(match[0])


def complexity_sum(codes, depth):
    """Sum of shortest press count times numeric part over all codes."""
    costs = directional_costs(depth)
    return sum(
        min(sequence_cost(sequence, depth, costs) for sequence in numeric_sequences(code))
        * _numeric_part(code)
        for code in codes
    )


def main(argv=None):
    codes = [line.strip() for line in read_input(argv).splitlines() if line.strip()]
    print(complexity_sum(codes, 2))
    print(complexity_sum(codes, 25))