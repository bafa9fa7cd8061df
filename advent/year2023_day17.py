"""Clumsy Crucible: the least heat lost guiding a crucible across the city."""

import heapq

from advent.inputs import input_lines

NORTH = 0
EAST = 1
SOUTH = 2
WEST = 3

_DELTAS = ((0, -1), (1, 0), (0, 1), (-1, 0))
_NO_HEADING = -1
_ULTRA_LOW = 4
_ULTRA_HIGH = 10


def _heat_costs(grid):
    rows = [row for row in grid if row]
    if not rows:
        raise ValueError("empty grid")
    try:
        return [[int(character) for character in row] for row in rows]
    except ValueError:
        raise ValueError("heat loss values must be single digits") from None


def minimal_heat_loss(grid, low, high):
    """Least heat lost moving from the top-left block to the bottom-right one.

    The crucible moves at least low and at most high blocks in a straight
    line before it may turn or stop, and it never reverses.
    """
    if low < 1 or high < low:
        raise ValueError(f"bad straight-line limits: {low}, {high}")
    costs = _heat_costs(grid)
    height, width = len(costs), len(costs[0])
    goal = (width - 1, height - 1)
    if goal == (0, 0):
        return 0

    queue = [(0, 0, 0, _NO_HEADING, 0)]
    seen = set()
    while queue:
        loss, x, y, heading, run = heapq.heappop(queue)
        if (x, y) == goal and run >= low:
            return loss
        state = (x, y, heading, run)
        if state in seen:
            continue
        seen.add(state)
        for direction, (dx, dy) in enumerate(_DELTAS):
            straight = direction == heading
            if heading != _NO_HEADING:
                if direction == (heading + 2) % 4:
                    continue
                if straight and run >= high:
                    continue
                if not straight and run < low:
                    continue
            nx, ny = x + dx, y + dy
            if not (0 <= ny < height and 0 <= nx < len(costs[ny])):
                continue
            heapq.heappush(
                queue,
                (loss + costs[ny][nx], nx, ny, direction, run + 1 if straight else 1),
            )
    raise ValueError("the end cannot be reached")


def main(argv=None):
    grid = [line for line in input_lines(argv) if line]
    print(minimal_heat_loss(grid, _ULTRA_LOW, _ULTRA_HIGH))