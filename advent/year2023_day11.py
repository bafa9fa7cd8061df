"""Cosmic Expansion: distances between galaxies in an expanding universe."""

from itertools import accumulate, combinations

from advent.inputs import input_lines

_EXPANSION = 1_000_000


def _empty_before(flags):
    """Prefix counts: entry i is how many of the first i flags are set."""
    return [0, *accumulate(int(flag) for flag in flags)]


def galaxy_distance_sum(grid, factor):
    """Sum of shortest distances between all galaxy pairs.

    Every empty row and column counts as factor rows or columns.
    """
    galaxies = [
        (row, col) for row, line in enumerate(grid) for col, tile in enumerate(line) if tile == "#"
    ]
    if not galaxies:
        return 0
    columns = len(grid[0])
    empty_rows = _empty_before("#" not in line for line in grid)
    empty_cols = _empty_before(
        all(col >= len(line) or line[col] != "#" for line in grid) for col in range(columns)
    )
    extra = factor - 1
    total = 0
    for (r1, c1), (r2, c2) in combinations(galaxies, 2):
        total += abs(r1 - r2) + abs(c1 - c2)
        total += abs(empty_rows[r1] - empty_rows[r2]) * extra
        total += abs(empty_cols[c1] - empty_cols[c2]) * extra
    return total


def main(argv=None):
    grid = [line for line in input_lines(argv) if line]
    print(galaxy_distance_sum(grid, _EXPANSION))