"""Resonant Collinearity: counting antinodes of antenna pairs."""

from itertools import combinations

from advent.inputs import read_input


def parse_antennas(text):
    """Return (antennas by frequency, width, height)."""
    grid = text.split()
    antennas = {}
    for y, row in enumerate(grid):
        for x, frequency in enumerate(row):
            if frequency != ".":
                antennas.setdefault(frequency, []).append((x, y))
    return antennas, len(grid[0]), len(grid)


def _inside(x, y, width, height):
    return 0 <= x < width and 0 <= y < height


def count_antinodes(antennas, width, height):
    """Cells lying twice as far from one antenna as from another of its frequency."""
    found = set()
    for points in antennas.values():
        for (ax, ay), (bx, by) in combinations(points, 2):
            dx, dy = ax - bx, ay - by
            for x, y in ((ax + dx, ay + dy), (bx - dx, by - dy)):
                if _inside(x, y, width, height):
                    found.add((x, y))
    return len(found)


def count_harmonic_antinodes(antennas, width, height):
    """Antennas plus every cell in line with a pair at whole multiples of their spacing."""
    found = set()
    for points in antennas.values():
        found.update(points)
        for (ax, ay), (bx, by) in combinations(points, 2):
            dx, dy = ax - bx, ay - by
            for (x, y), (sx, sy) in (((ax, ay), (dx, dy)), ((bx, by), (-dx, -dy))):
                x, y = x + sx, y + sy
                while _inside(x, y, width, height):
                    found.add((x, y))
                    x, y = x + sx, y + sy
    return len(found)


def main(argv=None):
    antennas, width, height = parse_antennas(read_input(argv))
    print(count_antinodes(antennas, width, height))
    print(count_harmonic_antinodes(antennas, width, height))