"""Plutonian Pebbles: counting stones that change every blink."""

from collections import Counter

from advent.inputs import read_input

_MULTIPLIER = 2024


def blink(stone):
    """The stones a single stone turns into after one blink."""
    if stone == 0:
        return [1]
    text = str(stone)
    if len(text) % 2 == 0:
        middle = len(text) // 2
        return [int(text[:middle]), int(text[middle:])]
    return [stone * _MULTIPLIER]


def count_stones(stones, blinks):
    """Number of stones after the given number of blinks."""
    counts = Counter(stones)
    for _ in range(blinks):
        following = Counter()
        for stone, count in counts.items():
            for result in blink(stone):
                following[result] += count
        counts = following
    return sum(counts.values())


def main(argv=None):
    stones = [int(token) for token in read_input(argv).split()]
    print(count_stones(stones, 25))
    print(count_stones(stones, 75))