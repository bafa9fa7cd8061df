"""RAM Run: escaping a memory grid as bytes fall into it."""

from collections import deque

from advent.inputs import read_input

_SMALL = 6
_LARGE = 70
_SMALL_BYTES = 12
_LARGE_BYTES = 1024
_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def parse_bytes(text):
    """One (x, y) pair per line, written as 'x,y'."""
    positions = []
    for line in text.splitlines():
        if line.strip():
            x, y = line.split(",")
            positions.append((int(x), int(y)))
    return positions


def grid_size(positions):
    """Largest coordinate of the grid: 6 for the example, else 70."""
    return _LARGE if any(x > _SMALL for x, _ in positions) else _SMALL


def shortest_path(positions, count, n):
    """Steps from (0, 0) to (n, n) after the first count bytes fell, or None."""
    blocked = set(positions[:count])
    origin, goal = (0, 0), (n, n)
    if origin in blocked:
        return None
    distances = {origin: 0}
    queue = deque([origin])
    while queue:
        x, y = queue.popleft()
        if (x, y) == goal:
            return distances[goal]
        for dx, dy in _STEPS:
            cell = (x + dx, y + dy)
            if (
                0 <= cell[0] <= n
                and 0 <= cell[1] <= n
                and cell not in blocked
                and cell not in distances
            ):
                distances[cell] = distances[(x, y)] + 1
                queue.append(cell)
    return None


def first_blocking(positions):
    """The first byte after whose fall the exit can no longer be reached."""
    n = grid_size(positions)
    if shortest_path(positions, len(positions), n) is not None:
        raise ValueError("the exit stays reachable")
    low, high = 0, len(positions)
    while high - low > 1:
        middle = (low + high) // 2
        if shortest_path(positions, middle, n) is None:
            high = middle
        else:
            low = middle
    return positions[high - 1]


def main(argv=None):
    positions = parse_bytes(read_input(argv))
    n = grid_size(positions)
    count = _SMALL_BYTES if n == _SMALL else _LARGE_BYTES
    steps = shortest_path(positions, count, n)
    if steps is None:
        raise ValueError("the exit cannot be reached")
    print(steps)
    x, y = first_blocking(positions)
    print(f"{x},{y}")