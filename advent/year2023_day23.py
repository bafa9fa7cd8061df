"""A Long Walk: the longest hike through a forest of trails."""

from advent.inputs import input_lines

_STEPS = ((0, 1), (1, 0), (0, -1), (-1, 0))
_SLOPES = {">": (0, 1), "v": (1, 0), "<": (0, -1), "^": (-1, 0)}
_FOREST = "#"


def _is_open(grid, row, col):
    return 0 <= row < len(grid) and 0 <= col < len(grid[row]) and grid[row][col] != _FOREST


def _exits(grid, cell, slippery):
    row, col = cell
    tile = grid[row][col]
    moves = (_SLOPES[tile],) if slippery and tile in _SLOPES else _STEPS
    for dr, dc in moves:
        if _is_open(grid, row + dr, col + dc):
            yield row + dr, col + dc


def _open_neighbours(grid, row, col):
    return sum(1 for dr, dc in _STEPS if _is_open(grid, row + dr, col + dc))


def _endpoints(grid):
    rows = [line for line in grid if line]
    if not rows or "." not in rows[0] or "." not in rows[-1]:
        raise ValueError("the map needs an opening in its first and last rows")
    return (0, rows[0].index(".")), (len(rows) - 1, rows[-1].index("."))


def _walk(grid, nodes, origin, first, slippery):
    """Follow a corridor to the next node; None at a dead end."""
    previous, current, steps = origin, first, 1
    while current not in nodes:
        ahead = [cell for cell in _exits(grid, current, slippery) if cell != previous]
        if not ahead:
            return None
        previous, current = current, ahead[0]
        steps += 1
    return current, steps


def _graph(grid, start, end, slippery):
    nodes = {start, end}
    for row, line in enumerate(grid):
        for col, tile in enumerate(line):
            if tile != _FOREST and _open_neighbours(grid, row, col) >= 3:
                nodes.add((row, col))
    edges = {node: {} for node in nodes}
    for node in nodes:
        for first in _exits(grid, node, slippery):
            reached = _walk(grid, nodes, node, first, slippery)
            if reached is None:
                continue
            target, steps = reached
            if target != node:
                edges[node][target] = max(steps, edges[node].get(target, 0))
    return edges


def _longest(edges, node, goal, seen):
    if node == goal:
        return 0
    seen.add(node)
    best = None
    for following, steps in edges[node].items():
        if following in seen:
            continue
        rest = _longest(edges, following, goal, seen)
        if rest is not None and (best is None or rest + steps > best):
            best = rest + steps
    seen.discard(node)
    return best


def longest_hike(grid, slippery):
    """Steps in the longest hike from top to bottom that never revisits a tile.

    With slippery slopes a slope tile may only be left downhill.
    """
    grid = [line for line in grid if line]
    start, end = _endpoints(grid)
    edges = _graph(grid, start, end, slippery)
    result = _longest(edges, start, end, set())
    if result is None:
        raise ValueError("no hike reaches the end")
    return result


def main(argv=None):
    grid = [line for line in input_lines(argv) if line]
    print(longest_hike(grid, False))