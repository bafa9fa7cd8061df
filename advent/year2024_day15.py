"""Warehouse Woes: a robot pushing boxes around a warehouse."""

from advent.inputs import read_input

_DELTAS = {"^": (0, -1), ">": (1, 0), "v": (0, 1), "<": (-1, 0)}
_WIDE = {"#": "##", "O": "[]", ".": "..", "@": "@."}


def parse_warehouse(text):
    """Return (grid rows, moves) from the map, a blank line and the moves."""
    head, _, tail = text.partition("\n\n")
    return head.splitlines(), "".join(tail.split())


def _delta(direction):
    try:
        return _DELTAS[direction]
    except KeyError:
        raise ValueError(f"unknown move: {direction!r}") from None


def can_push(grid, robot, direction):
    """True if the robot at (x, y) can move, pushing any boxes in the way."""
    dx, dy = _delta(direction)
    vertical = dy != 0
    frontier = {robot}
    while frontier:
        following = set()
        for x, y in frontier:
            tile = grid[y][x]
            if tile == "#":
                return False
            if tile in ("@", "O", "[", "]"):
                following.add((x + dx, y + dy))
            if vertical and tile == "[":
                following.add((x + dx + 1, y + dy))
            elif vertical and tile == "]":
                following.add((x + dx - 1, y + dy))
        frontier = following
    return True


def _find_robot(grid):
    for y, row in enumerate(grid):
        for x, tile in enumerate(row):
            if tile == "@":
                return x, y
    raise ValueError("warehouse has no robot")


def _gps_sum(grid, box):
    return sum(
        100 * y + x for y, row in enumerate(grid) for x, tile in enumerate(row) if tile == box
    )


def box_gps_sum(grid, moves):
    """Sum of box GPS coordinates after the robot makes every move."""
    grid = [list(row) for row in grid]
    x, y = _find_robot(grid)
    for move in moves:
        if not can_push(grid, (x, y), move):
            continue
        dx, dy = _delta(move)
        steps = 1
        while grid[y + steps * dy][x + steps * dx] != ".":
            steps += 1
        grid[y + steps * dy][x + steps * dx] = grid[y + dy][x + dx]
        grid[y][x] = "."
        grid[y + dy][x + dx] = "@"
        x, y = x + dx, y + dy
    return _gps_sum(grid, "O")


def widen(grid):
    """Double the warehouse horizontally, turning boxes into [] pairs."""
    return ["".join(_WIDE.get(tile, "") for tile in row) for row in grid]


def wide_box_gps_sum(grid, moves):
    """Sum of wide-box GPS coordinates after the robot makes every move."""
    grid = [list(row) for row in grid]
    robot = _find_robot(grid)
    for move in moves:
        dx, dy = _delta(move)
        if not can_push(grid, robot, move):
            continue
        vertical = dy != 0
        grid[robot[1]][robot[0]] = "."
        last = {robot: "@"}
        robot = (robot[0] + dx, robot[1] + dy)
        while last:
            current = {}
            for x, y in last:
                tile = grid[y + dy][x + dx]
                if tile == ".":
                    continue
                current[(x + dx, y + dy)] = tile
                if vertical and tile == "[":
                    current[(x + dx + 1, y + dy)] = grid[y + dy][x + dx + 1]
                elif vertical and tile == "]":
                    current[(x + dx - 1, y + dy)] = grid[y + dy][x + dx - 1]
            for x, y in current:
                grid[y][x] = "."
            for (x, y), tile in last.items():
                grid[y + dy][x + dx] = tile
            last = current
    return _gps_sum(grid, "[")


def main(argv=None):
    grid, moves = parse_warehouse(read_input(argv))
    print(box_gps_sum(grid, moves))
    print(wide_box_gps_sum(widen(grid), moves))