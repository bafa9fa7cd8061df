"""Gear Ratios: part numbers next to symbols in an engine schematic."""

import re
from collections import defaultdict

from advent.inputs import input_lines

_NUMBER = re.compile(r"\d+")


def _is_symbol(character):
    return character != "." and not "0" <= character <= "9"


def _adjacent_symbols(lines, row, start, end):
    """Positions of symbols touching the span [start, end) on the given row."""
    width, height = len(lines[0]), len(lines)
    for r in range(max(row - 1, 0), min(row + 2, height)):
        for c in range(max(start - 1, 0), min(end + 1, width)):
            if c < len(lines[r]) and _is_symbol(lines[r][c]):
                yield r, c


def _numbers(lines):
    """Each number with the list of symbol positions around it."""
    if not lines:
        return
    for row, line in enumerate(lines):
        for match in _NUMBER.finditer(line):
            yield int(match[0]), list(_adjacent_symbols(lines, row, match.start(), match.end()))


def part_number_sum(lines):
    """Sum of numbers adjacent to at least one symbol."""
    return sum(value for value, symbols in _numbers(lines) if symbols)


def gear_ratio_sum(lines):
    """Sum over '*' symbols touching exactly two numbers of their product."""
    gears = defaultdict(list)
    for value, symbols in _numbers(lines):
        for r, c in symbols:
            if lines[r][c] == "*":
                gears[(r, c)].append(value)
    return sum(values[0] * values[1] for values in gears.values() if len(values) == 2)


def main(argv=None):
    lines = input_lines(argv)
    print(gear_ratio_sum(lines))
    print(part_number_sum(lines))