"""Linen Layout: arranging towels into designs."""

from advent.inputs import read_input


def parse_towels(text):
    """Return (towel patterns, designs) from the pattern line and the design lines."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty input")
    towels = [towel.strip() for towel in lines[0].split(",") if towel.strip()]
    designs = [line.strip() for line in lines[1:] if line.strip()]
    return towels, designs


def arrangements(design, towels):
    """Number of ways to build the design from the towels."""
    possible = [1] + [0] * len(design)
    for index in range(len(design)):
        ways = possible[index]
        if not ways:
            continue
        for towel in towels:
            if towel and design.startswith(towel, index):
                possible[index + len(towel)] += ways
    return possible[-1]


def main(argv=None):
    towels, designs = parse_towels(read_input(argv))
    counts = [arrangements(design, towels) for design in designs]
    print(sum(1 for count in counts if count))
    print(sum(counts))