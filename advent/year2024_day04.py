"""Ceres Search: word search for XMAS."""

from advent.inputs import input_lines

_WORD = "XMAS"
_DIRECTIONS = [(1, 0), (1, 1), (0, 1), (-1, 1), (-1, 0), (-1, -1), (0, -1), (1, -1)]
_DIAGONALS = [(1, 1), (1, -1)]


def count_xmas(grid):
    """Occurrences of XMAS in any of the eight directions."""
    if not grid:
        return 0
    width, height = len(grid[0]), len(grid)
    reach = len(_WORD) - 1
    total = 0
    for y in range(height):
        for x in range(width):
            for dx, dy in _DIRECTIONS:
                if not (0 <= x + reach * dx < width and 0 <= y + reach * dy < height):
                    continue
                if all(
                    grid[y + dy * step][x + dx * step] == letter
                    for step, letter in enumerate(_WORD)
                ):
                    total += 1
    return total


def count_x_mas(grid):
    """Occurrences of two MAS words crossing in an X on an A."""
    if not grid:
        return 0
    width, height = len(grid[0]), len(grid)
    total = 0
    for y in range(1, height - 1):
        for x in range(1, width - 1):
            if grid[y][x] != "A":
                continue
            if all(
                {grid[y + dy][x + dx], grid[y - dy][x - dx]} == {"M", "S"}
                for dx, dy in _DIAGONALS
            ):
                total += 1
    return total


def main(argv=None):
    grid = input_lines(argv)
    print(count_xmas(grid))
    print(count_x_mas(grid))