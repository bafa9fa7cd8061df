"""Guard Gallivant: following a patrolling guard."""

from advent.inputs import read_input

_DIRECTIONS = [(1, 0), (0, 1), (-1, 0), (0, -1)]
_UP = 3


def parse_map(text):
    """Return (grid, start) where start is the guard's (x, y)."""
    grid = text.split()
    for y, row in enumerate(grid):
        x = row.find("^")
        if x != -1:
            return grid, (x, y)
    raise ValueError("map has no guard")


def _patrol(grid, start, extra=None):
    """Walk the guard; return (visited positions, whether it loops)."""
    width, height = len(grid[0]), len(grid)
    x, y = start
    heading = _UP
    seen = set()
    while (x, y, heading) not in seen:
        seen.add((x, y, heading))
        dx, dy = _DIRECTIONS[heading]
        nx, ny = x + dx, y + dy
        if not (0 <= nx < width and 0 <= ny < height):
            return {(px, py) for px, py, _ in seen}, False
        if grid[ny][nx] == "#" or (nx, ny) == extra:
            heading = (heading + 1) % 4
        else:
            x, y = nx, ny
    return {(px, py) for px, py, _ in seen}, True


def visited_count(grid, start):
    """Number of distinct positions the guard visits before leaving."""
    positions, looped = _patrol(grid, start)
    if looped:
        raise ValueError("guard never leaves the map")
    return len(positions)


def is_loop(grid, start):
    return _patrol(grid, start)[1]


def count_loop_obstructions(grid, start):
    """Number of empty cells where one new obstruction traps the guard."""
    positions, looped = _patrol(grid, start)
    if looped:
        positions = {(x, y) for y, row in enumerate(grid) for x in range(len(row))}
    return sum(
        1
        for x, y in positions
        if grid[y][x] == "." and _patrol(grid, start, (x, y))[1]
    )


def main(argv=None):
    grid, start = parse_map(read_input(argv))
    print(visited_count(grid, start))
    print(count_loop_obstructions(grid, start))