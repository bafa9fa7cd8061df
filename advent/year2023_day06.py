"""Wait For It: ways to beat the record in toy boat races."""

from bisect import bisect_left
from math import prod

from advent.inputs import read_input


def parse_races(text):
    """Return (times, distances) from the 'Time:' and 'Distance:' lines."""
    lines = [line for line in text.splitlines() if line.strip()]
    if len(lines) < 2:
        raise ValueError("expected a time line and a distance line")
    times = [int(token) for token in lines[0].partition(":")[2].split()]
    distances = [int(token) for token in lines[1].partition(":")[2].split()]
    if len(times) != len(distances):
        raise ValueError("every race needs a time and a distance")
    return times, distances


def losing_presses(time, distance):
    """Number of hold times from zero upward that do not beat the distance."""
    holds = range(time // 2 + 1)
    return bisect_left(holds, True, key=lambda hold: hold * (time - hold) > distance)


def _ways(time, distance):
    return max(0, time - 2 * losing_presses(time, distance) + 1)


def ways_product(times, distances):
    """Product over races of the number of winning hold times."""
    if len(times) != len(distances):
        raise ValueError("every race needs a time and a distance")
    return prod(_ways(time, distance) for time, distance in zip(times, distances))


def joined_race_ways(times, distances):
    """Winning hold times for the single race written with the spaces removed."""
    if len(times) != len(distances):
        raise ValueError("every race needs a time and a distance")
    time = int("".join(str(value) for value in times))
    distance = int("".join(str(value) for value in distances))
    return _ways(time, distance)


def main(argv=None):
    times, distances = parse_races(read_input(argv))
    print(ways_product(times, distances))
    print(joined_race_ways(times, distances))