"""Pipe Maze: the loop through the start tile and the tiles it encloses."""

from collections import deque

from advent.inputs import input_lines

# (dx, dy, tiles that open that way, tiles that accept entry from that way)
_LINKS = (
    (1, 0, "FL-", "7J-"),
    (-1, 0, "7J-", "FL-"),
    (0, -1, "LJ|", "F7|"),
    (0, 1, "F7|", "LJ|"),
)
_WALLS = "|SF7"


def find_start(grid):
    """The (x, y) of the start tile."""
    for y, row in enumerate(grid):
        x = row.find("S")
        if x != -1:
            return x, y
    raise ValueError("grid has no start tile")


def _neighbours(grid, x, y):
    here = grid[y][x]
    width = len(grid[0])
    for dx, dy, outgoing, incoming in _LINKS:
        nx, ny = x + dx, y + dy
        if not (0 <= ny < len(grid) and 0 <= nx < width and nx < len(grid[ny])):
            continue
        if here != "S" and here not in outgoing:
            continue
        if grid[ny][nx] in incoming:
            yield nx, ny


def loop_distances(grid):
    """Steps from the start to every pipe connected to it."""
    start = find_start(grid)
    distances = {start: 0}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for cell in _neighbours(grid, x, y):
            if cell not in distances:
                distances[cell] = distances[(x, y)] + 1
                queue.append(cell)
    return distances


def farthest_distance(grid):
    """Steps to the pipe farthest from the start along the loop."""
    return max(loop_distances(grid).values())


def enclosed_tiles(grid, distances):
    """Tiles off the loop that lie after an odd number of crossing loop pipes.

    Crossings are counted in reading order over the whole grid.
    """
    if not grid:
        return 0
    width = len(grid[0])
    crossings = 0
    count = 0
    for y, row in enumerate(grid):
        for x in range(width):
            if (x, y) in distances:
                if row[x] in _WALLS:
                    crossings += 1
            elif crossings % 2:
                count += 1
    return count


def main(argv=None):
    grid = [line for line in input_lines(argv) if line]
    distances = loop_distances(grid)
    print(max(distances.values()))
    print(enclosed_tiles(grid, distances))