"""Parabolic Reflector Dish: tilting a platform of rolling rocks."""

from advent.inputs import input_lines

NORTH = "north"
WEST = "west"
SOUTH = "south"
EAST = "east"

_CYCLE = (NORTH, WEST, SOUTH, EAST)
_SPINS = 1_000_000_000


def _roll_rows(rows, toward_start):
    """Roll round rocks along each row up to the nearest cube rock."""
    return tuple(
        "#".join("".join(sorted(segment, reverse=toward_start)) for segment in row.split("#"))
        for row in rows
    )


def _transpose(rows):
    return tuple("".join(column) for column in zip(*rows))


def tilt(grid, direction):
    """The grid after every round rock rolls as far as it can in direction."""
    if direction == WEST:
        return _roll_rows(grid, True)
    if direction == EAST:
        return _roll_rows(grid, False)
    if direction == NORTH:
        return _transpose(_roll_rows(_transpose(grid), True))
    if direction == SOUTH:
        return _transpose(_roll_rows(_transpose(grid), False))
    raise ValueError(f"unknown direction: {direction!r}")


def spin_cycle(grid):
    """Tilt north, west, south and east in turn."""
    grid = tuple(grid)
    for direction in _CYCLE:
        grid = tilt(grid, direction)
    return grid


def north_load(grid):
    """Each round rock weighs its distance from the south edge plus one."""
    height = len(grid)
    return sum(height - row for row, line in enumerate(grid) for tile in line if tile == "O")


def load_after_cycles(grid, cycles):
    """North load after the given number of spin cycles, skipping repeats."""
    if cycles < 0:
        raise ValueError("cycles must not be negative")
    state = tuple(grid)
    seen = {state: 0}
    history = [state]
    for step in range(1, cycles + 1):
        state = spin_cycle(state)
        if state in seen:
            start = seen[state]
            state = history[start + (cycles - start) % (step - start)]
            break
        seen[state] = step
        history.append(state)
    return north_load(state)


def main(argv=None):
    grid = [line for line in input_lines(argv) if line]
    print(load_after_cycles(grid, _SPINS))