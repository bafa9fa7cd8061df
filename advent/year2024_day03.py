"""Mull It Over: summing multiplication instructions in corrupted memory."""

import re

from advent.inputs import read_input

_INSTRUCTION = re.compile(r"mul\((\d+),(\d+)\)|do\(\)|don't\(\)")


def sum_products(text):
    """Sum of every mul(a,b) in the text."""
    return sum(
        int(match[1]) * int(match[2])
        for match in _INSTRUCTION.finditer(text)
        if match[0].startswith("mul")
    )


def sum_enabled_products(text):
    """Sum of mul(a,b) instructions not switched off by a preceding don't()."""
    enabled = True
    total = 0
    for match in _INSTRUCTION.finditer(text):
        if match[0] == "do()":
            enabled = True
        elif match[0] == "don't()":
            enabled = False
        elif enabled:
            total += int(match[1]) * int(match[2])
    return total


def main(argv=None):
    text = read_input(argv)
    print(sum_products(text))
    print(sum_enabled_products(text))