import pytest

from advent.year2024_day21 import (
    DIRECTIONAL_KEYPAD,
    NUMERIC_KEYPAD,
    complexity_sum,
    directional_costs,
    key_paths,
    main,
    numeric_sequences,
    sequence_cost,
)

CODES = ["029A", "980A", "179A", "456A", "379A"]
_DELTA = {">": (1, 0), "<": (-1, 0), "v": (0, 1), "^": (0, -1)}


def _where(keypad, key):
    return next((row.index(key), y) for y, row in enumerate(keypad) if key in row)


def test_example_complexity():
    assert complexity_sum(CODES, 2) == 126384


def test_shortest_lengths_for_code():
    costs = directional_costs(2)
    sequences = numeric_sequences("029A")
    assert min(sequence_cost(s, 0, costs) for s in sequences) == 12
    assert min(sequence_cost(s, 2, costs) for s in sequences) == 68


def test_depth_zero_cost_is_length():
    costs = directional_costs(0)
    for sequence in numeric_sequences("179A"):
        assert sequence_cost(sequence, 0, costs) == len(sequence)


def test_same_key_path():
    assert key_paths(NUMERIC_KEYPAD, "A", "A") == ["A"]


@pytest.mark.parametrize(
    "keypad,start,end",
    [
        (NUMERIC_KEYPAD, "A", "7"),
        (NUMERIC_KEYPAD, "0", "1"),
        (NUMERIC_KEYPAD, "1", "A"),
        (DIRECTIONAL_KEYPAD, "A", "<"),
        (DIRECTIONAL_KEYPAD, "<", "^"),
    ],
)
def test_paths_are_shortest_and_avoid_gap(keypad, start, end):
    x0, y0 = _where(keypad, start)
    x1, y1 = _where(keypad, end)
    paths = key_paths(keypad, start, end)
    assert paths
    for path in paths:
        assert len(path) == abs(x1 - x0) + abs(y1 - y0) + 1
        assert path.endswith("A")
        x, y = x0, y0
        for move in path[:-1]:
            dx, dy = _DELTA[move]
            x, y = x + dx, y + dy
            assert keypad[y][x] != " "
        assert (x, y) == (x1, y1)


def test_sequences_press_once_per_key():
    for sequence in numeric_sequences("029A"):
        assert sequence.count("A") == len("029A")


def test_costs_grow_with_depth():
    costs = directional_costs(3)
    assert len(costs) == 4
    for depth in range(3):
        for pair, cost in costs[depth].items():
            assert costs[depth + 1][pair] >= cost


def test_unknown_key_raises():
    with pytest.raises(ValueError):
        key_paths(NUMERIC_KEYPAD, "A", "X")


def test_depth_out_of_range_raises():
    with pytest.raises(ValueError):
        sequence_cost("A", 3, directional_costs(1))


def test_main(tmp_path, capsys):
    path = tmp_path / "codes.txt"
    path.write_text("\n".join(CODES) + "\n")
    main([str(path)])
    assert capsys.readouterr().out.split() == [
        str(complexity_sum(CODES, 2)),
        str(complexity_sum(CODES, 25)),
    ]