"""The Floor Will Be Lava: light beams bouncing through mirrors and splitters."""

from advent.inputs import input_lines

NORTH = 0
EAST = 1
SOUTH = 2
WEST = 3

_DELTAS = {NORTH: (0, -1), EAST: (1, 0), SOUTH: (0, 1), WEST: (-1, 0)}
_TURNS = {
    ".": {NORTH: (NORTH,), EAST: (EAST,), SOUTH: (SOUTH,), WEST: (WEST,)},
    "|": {NORTH: (NORTH,), SOUTH: (SOUTH,), EAST: (NORTH, SOUTH), WEST: (NORTH, SOUTH)},
    "-": {NORTH: (EAST, WEST), SOUTH: (EAST, WEST), EAST: (EAST,), WEST: (WEST,)},
    "/": {NORTH: (EAST,), SOUTH: (WEST,), EAST: (NORTH,), WEST: (SOUTH,)},
    "\\": {NORTH: (WEST,), SOUTH: (EAST,), EAST: (SOUTH,), WEST: (NORTH,)},
}


def energized(grid, x, y, direction):
    """Number of tiles a beam entering (x, y) heading in direction passes through."""
    if direction not in _DELTAS:
        raise ValueError(f"unknown direction: {direction!r}")
    height = len(grid)
    seen = set()
    stack = [(x, y, direction)]
    while stack:
        beam = stack.pop()
        bx, by, heading = beam
        if not (0 <= by < height and 0 <= bx < len(grid[by])) or beam in seen:
            continue
        seen.add(beam)
        for turned in _TURNS.get(grid[by][bx], {}).get(heading, ()):
            dx, dy = _DELTAS[turned]
            stack.append((bx + dx, by + dy, turned))
    return len({(bx, by) for bx, by, _ in seen})


def max_energized(grid):
    """Most tiles energised by a beam entering from any edge tile."""
    width, height = len(grid[0]), len(grid)
    starts = [(x, 0, SOUTH) for x in range(width)]
    starts += [(x, height - 1, NORTH) for x in range(width)]
    starts += [(0, y, EAST) for y in range(height)]
    starts += [(width - 1, y, WEST) for y in range(height)]
    return max(energized(grid, *start) for start in starts)


def main(argv=None):
    grid = [line for line in input_lines(argv) if line]
    print(max_energized(grid))