import pytest

from advent.year2024_day18 import (
    first_blocking,
    grid_size,
    main,
    parse_bytes,
    shortest_path,
)

EXAMPLE = """5,4
4,2
4,5
3,0
2,1
6,3
2,4
1,5
0,6
3,3
2,6
5,1
1,2
5,5
2,5
6,5
1,4
0,4
6,4
1,1
6,1
1,0
0,5
1,6
2,0
"""


@pytest.fixture
def positions():
    return parse_bytes(EXAMPLE)


def test_parse(positions):
    assert positions[0] == (5, 4)
    assert len(positions) == len(EXAMPLE.split())


def test_grid_size(positions):
    assert grid_size(positions) == 6
    assert grid_size(positions + [(7, 0)]) == 70


def test_example_path(positions):
    assert shortest_path(positions, 12, 6) == 22


def test_empty_grid_is_manhattan(positions):
    assert shortest_path(positions, 0, 6) == 2 * 6


def test_first_blocking(positions):
    blocker = first_blocking(positions)
    assert blocker == (6, 1)
    index = positions.index(blocker)
    assert shortest_path(positions, index, 6) is not None
    assert shortest_path(positions, index + 1, 6) is None


def test_blocked_start_is_unreachable():
    assert shortest_path([(0, 0)], 1, 2) is None


def test_never_blocked_raises():
    with pytest.raises(ValueError):
        first_blocking([(1, 1)])


def test_main(tmp_path, capsys, positions):
    path = tmp_path / "bytes.txt"
    path.write_text(EXAMPLE)
    main([str(path)])
    lines = capsys.readouterr().out.splitlines()
    x, y = first_blocking(positions)
    assert lines == [str(shortest_path(positions, 12, 6)), f"{x},{y}"]