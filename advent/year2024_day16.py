"""Reindeer Maze: cheapest route through a maze and the tiles on best routes."""

import heapq
from collections import deque
from enum import IntEnum

from advent.inputs import read_input

_STEP_COST = 1
_TURN_COST = 1000
_DELTAS = ((0, -1), (1, 0), (0, 1), (-1, 0))


class Direction(IntEnum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @property
    def delta(self):
        """The (dx, dy) of one step in this direction."""
        return _DELTAS[self]


def parse_maze(text):
    """The maze rows, one string per line."""
    return [line for line in text.splitlines() if line]


def _locate(grid, tile):
    for y, row in enumerate(grid):
        x = row.find(tile)
        if x != -1:
            return x, y
    raise ValueError(f"maze has no {tile!r} tile")


def _inside(grid, x, y):
    return 0 <= y < len(grid) and 0 <= x < len(grid[y])


def _search(grid, start):
    """Dijkstra over (x, y, direction); returns scores and best-path parents."""
    origin = (start[0], start[1], Direction.EAST)
    scores = {origin: 0}
    parents = {}
    queue = [(0, origin)]
    while queue:
        score, location = heapq.heappop(queue)
        x, y, heading = location
        if grid[y][x] == "#" or score != scores[location]:
            continue
        for direction in Direction:
            if direction == heading:
                dx, dy = direction.delta
                following = (x + dx, y + dy, direction)
                cost = score + _STEP_COST
                if not _inside(grid, x + dx, y + dy):
                    continue
            else:
                following = (x, y, direction)
                cost = score + _TURN_COST
            known = scores.get(following)
            if known is None or cost < known:
                scores[following] = cost
                parents[following] = {location}
                heapq.heappush(queue, (cost, following))
            elif cost == known:
                parents[following].add(location)
    return scores, parents


def solve_maze(grid):
    """Return (lowest score, number of tiles on any lowest-score route)."""
    start = _locate(grid, "S")
    end = _locate(grid, "E")
    scores, parents = _search(grid, start)

    arrivals = [
        (end[0], end[1], direction)
        for direction in Direction
        if (end[0], end[1], direction) in scores
    ]
    if not arrivals:
        raise ValueError("the end cannot be reached")
    best = min(scores[location] for location in arrivals)
    ends = [location for location in arrivals if scores[location] == best]

    tiles = set()
    seen = set(ends)
    queue = deque(ends)
    while queue:
        location = queue.popleft()
        tiles.add(location[:2])
        for parent in parents.get(location, ()):
            if parent not in seen:
                seen.add(parent)
                queue.append(parent)
    return best, len(tiles)


def main(argv=None):
    best, tiles = solve_maze(parse_maze(read_input(argv)))
    print(best)
    print(tiles)