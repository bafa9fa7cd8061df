"""Hoof It: scoring and rating hiking trails on a topographic map."""

from collections import defaultdict

from advent.inputs import read_input

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))
_TOP = 9


def parse_topography(text):
    """One row of heights per line; each character is a single digit."""
    return [[ord(character) - ord("0") for character in line] for line in text.splitlines()]


def _cells_by_height(grid):
    levels = defaultdict(list)
    for y, row in enumerate(grid):
        for x, height in enumerate(row):
            levels[height].append((x, y))
    return levels


def _lower_neighbours(grid, x, y):
    """Orthogonal neighbours exactly one step lower than (x, y)."""
    height = grid[y][x]
    for dx, dy in _STEPS:
        nx, ny = x + dx, y + dy
        if 0 <= ny < len(grid) and 0 <= nx < len(grid[ny]) and grid[ny][nx] == height - 1:
            yield nx, ny


def trailhead_score(grid):
    """Sum over trailheads of the number of summits each can reach."""
    levels = _cells_by_height(grid)
    reach = {cell: {cell} for cell in levels[0]}
    for height in range(1, _TOP + 1):
        for x, y in levels[height]:
            reach[(x, y)] = set().union(
                *(reach[neighbour] for neighbour in _lower_neighbours(grid, x, y))
            )
    return sum(len(reach[cell]) for cell in levels[_TOP])


def trailhead_rating(grid):
    """Total number of distinct hiking trails from any trailhead to any summit."""
    levels = _cells_by_height(grid)
    paths = {cell: 1 for cell in levels[0]}
    for height in range(1, _TOP + 1):
        for x, y in levels[height]:
            paths[(x, y)] = sum(
                paths[neighbour] for neighbour in _lower_neighbours(grid, x, y)
            )
    return sum(paths[cell] for cell in levels[_TOP])


def main(argv=None):
    grid = parse_topography(read_input(argv))
    print(trailhead_score(grid))
    print(trailhead_rating(grid))