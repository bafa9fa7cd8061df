"""If You Give A Seed A Fertilizer: mapping seed ranges through an almanac."""

import re
from dataclasses import dataclass

from advent.inputs import read_input

_HEADER = re.compile(r"(\w+)-to-(\w+) map:")
_BLANK = re.compile(r"\n\s*\n")


@dataclass(frozen=True)
class Conversion:
    """One almanac map; ranges hold (destination, source, length) triples."""

    source: str
    target: str
    ranges: tuple


def parse_almanac(text):
    """Return (seed numbers, conversions in order)."""
    blocks = _BLANK.split(text.strip())
    head, *rest = blocks
    name, _, values = head.partition(":")
    if name.strip() != "seeds":
        raise ValueError("almanac must start with the seeds")
    seeds = [int(token) for token in values.split()]

    conversions = []
    for block in rest:
        header, *lines = block.strip().splitlines()
        match = _HEADER.fullmatch(header.strip())
        if match is None:
            raise ValueError(f"bad map header: {header!r}")
        ranges = []
        for line in lines:
            numbers = tuple(int(token) for token in line.split())
            if len(numbers) != 3:
                raise ValueError(f"bad range line: {line!r}")
            ranges.append(numbers)
        conversions.append(Conversion(match[1], match[2], tuple(ranges)))
    return seeds, conversions


def _convert(conversion, value):
    """Map one value; also return how many following values map the same way."""
    for destination, start, length in conversion.ranges:
        if start <= value < start + length:
            return value + destination - start, start + length - value
    gaps = [start - value for _, start, _ in conversion.ranges if start > value]
    return value, min(gaps, default=None)


def map_seed(conversions, seed):
    """Return (location, span) where span counts seeds from this one mapped alike.

    A span of None means every larger seed maps alike.
    """
    span = None
    for conversion in conversions:
        seed, limit = _convert(conversion, seed)
        if limit is not None:
            span = limit if span is None else min(span, limit)
    return seed, span


def lowest_location(seeds, conversions):
    """Lowest location for seeds given as (start, length) pairs."""
    if len(seeds) % 2:
        raise ValueError("seed ranges come in pairs")
    best = None
    for start, length in zip(seeds[::2], seeds[1::2]):
        while length > 0:
            location, span = map_seed(conversions, start)
            best = location if best is None else min(best, location)
            if span is None:
                break
            start += span
            length -= span
    if best is None:
        raise ValueError("no seeds")
    return best


def main(argv=None):
    seeds, conversions = parse_almanac(read_input(argv))
    print(lowest_location(seeds, conversions))