"""Race Condition: counting shortcuts through walls on a race track."""

from collections import deque

from advent.inputs import read_input

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))
_THRESHOLD = 100
_CHEAT_RADIUS = 20


def parse_track(text):
    """The track rows, one string per line."""
    return [line for line in text.splitlines() if line]


def _locate(grid, tile):
    for y, row in enumerate(grid):
        x = row.find(tile)
        if x != -1:
            return x, y
    raise ValueError(f"track has no {tile!r} tile")


def distances_from(grid, start):
    """Steps from start to every reachable open cell."""
    distances = {start: 0}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for dx, dy in _STEPS:
            nx, ny = x + dx, y + dy
            if (
                0 <= ny < len(grid)
                and 0 <= nx < len(grid[ny])
                and grid[ny][nx] != "#"
                and (nx, ny) not in distances
            ):
                distances[(nx, ny)] = distances[(x, y)] + 1
                queue.append((nx, ny))
    return distances


def _race(grid):
    start, end = _locate(grid, "S"), _locate(grid, "E")
    from_start = distances_from(grid, start)
    from_end = distances_from(grid, end)
    if end not in from_start:
        raise ValueError("the end cannot be reached")
    return from_start, from_end, from_start[end]


def count_short_cheats(grid, threshold):
    """Cheats through a single wall that save at least threshold steps."""
    from_start, from_end, normal = _race(grid)
    total = 0
    for y, row in enumerate(grid):
        for x, tile in enumerate(row):
            if tile != "#":
                continue
            for dx, dy in _STEPS:
                before, after = (x + dx, y + dy), (x - dx, y - dy)
                if before not in from_start or after not in from_end:
                    continue
                saving = normal - (from_start[before] + from_end[after] + 2)
                if saving > 0 and saving >= threshold:
                    total += 1
    return total


def count_long_cheats(grid, threshold, radius):
    """Cheats of at most radius steps that save at least threshold steps."""
    from_start, from_end, normal = _race(grid)
    total = 0
    for (x, y), travelled in from_start.items():
        for dx in range(-radius, radius + 1):
            span = radius - abs(dx)
            for dy in range(-span, span + 1):
                remaining = from_end.get((x + dx, y + dy))
                if remaining is None:
                    continue
                saving = normal - travelled - remaining - abs(dx) - abs(dy)
                if saving > 0 and saving >= threshold:
                    total += 1
    return total


def main(argv=None):
    grid = parse_track(read_input(argv))
    print(count_short_cheats(grid, _THRESHOLD))
    print(count_long_cheats(grid, _THRESHOLD, _CHEAT_RADIUS))