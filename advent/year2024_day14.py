"""Restroom Redoubt: robots wrapping around a grid."""

import re
from collections import Counter
from dataclasses import dataclass

from advent.inputs import read_input

_NUMBER = re.compile(r"-?\d+")
_SMALL = (11, 7)
_LARGE = (101, 103)
_SECONDS = 100
_SAMPLE = 500


@dataclass(frozen=True)
class Robot:
    position: tuple
    velocity: tuple


def parse_robot(line):
    """Parse a line such as 'p=0,4 v=3,-3'."""
    numbers = [int(token) for token in _NUMBER.findall(line)]
    if len(numbers) != 4:
        raise ValueError(f"expected four numbers in robot line: {line!r}")
    return Robot((numbers[0], numbers[1]), (numbers[2], numbers[3]))


def parse_robots(text):
    return [parse_robot(line) for line in text.splitlines() if line.strip()]


def grid_size(robots):
    """The example grid unless some robot lies beyond it, else the full grid."""
    width = _SMALL[0]
    return _LARGE if any(robot.position[0] > width for robot in robots) else _SMALL


def _advance(robot, steps, width, height):
    (x, y), (dx, dy) = robot.position, robot.velocity
    return (x + dx * steps) % width, (y + dy * steps) % height


def safety_factor(robots):
    """Product of robot counts in the four quadrants after 100 seconds."""
    width, height = grid_size(robots)
    mid_x, mid_y = width // 2, height // 2
    quadrants = Counter()
    for robot in robots:
        x, y = _advance(robot, _SECONDS, width, height)
        if x == mid_x or y == mid_y:
            continue
        quadrants[(x < mid_x, y < mid_y)] += 1
    product = 1
    for key in ((True, True), (True, False), (False, True), (False, False)):
        product *= quadrants[key]
    return product


def find_tree(robots):
    """Return (step, picture) for the step where most robots share a diagonal.

    Only the first 500 robots are considered when searching; the picture shows
    every robot at that step as rows of '.' and '#'.
    """
    width, height = grid_size(robots)
    sample = robots[:_SAMPLE]
    points = [robot.position for robot in sample]
    velocities = [robot.velocity for robot in sample]

    best_count, best_step = 0, 0
    for step in range(1, width * height + 1):
        points = [
            ((x + dx) % width, (y + dy) % height)
            for (x, y), (dx, dy) in zip(points, velocities)
        ]
        count = max(Counter(x - y for x, y in points).values(), default=0)
        if count > best_count:
            best_count, best_step = count, step

    picture = [["."] * width for _ in range(height)]
    for robot in robots:
        x, y = _advance(robot, best_step, width, height)
        picture[y][x] = "#"
    return best_step, ["".join(row) for row in picture]


def main(argv=None):
    robots = parse_robots(read_input(argv))
    print(safety_factor(robots))
    step, picture = find_tree(robots)
    print("\n".join(picture))
    print()
    print(step)