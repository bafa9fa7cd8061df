import pytest

from advent.year2024_day20 import (
    count_long_cheats,
    count_short_cheats,
    distances_from,
    main,
    parse_track,
)

EXAMPLE = """###############
#...#...#.....#
#.#.#.#.#.###.#
#S#...#.#.#...#
#######.#.#.###
#######.#.#...#
#######.#.###.#
###..E#...#...#
###.#######.###
#...###...#...#
#.#####.#.###.#
#.#...#.#.#...#
#.#.#.#.#.#.###
#...#...#...###
###############
"""


@pytest.fixture
def grid():
    return parse_track(EXAMPLE)


def _find(grid, tile):
    return next((row.index(tile), y) for y, row in enumerate(grid) if tile in row)


def test_normal_race_length(grid):
    start, end = _find(grid, "S"), _find(grid, "E")
    assert distances_from(grid, start)[end] == 84
    assert distances_from(grid, end)[start] == distances_from(grid, start)[end]


def test_distances_cover_exactly_the_track(grid):
    distances = distances_from(grid, _find(grid, "S"))
    track = {
        (x, y)
        for y, row in enumerate(grid)
        for x, tile in enumerate(row)
        if tile != "#"
    }
    assert set(distances) == track
    assert len(distances) == 85
    assert max(distances.values()) == 84


def test_all_short_cheats(grid):
    assert count_short_cheats(grid, 1) == 44


def test_long_cheats_example(grid):
    assert count_long_cheats(grid, 50, 20) == 285


def test_threshold_is_monotonic(grid):
    counts = [count_short_cheats(grid, t) for t in (1, 10, 40, 100)]
    assert counts == sorted(counts, reverse=True)


def test_long_cheats_include_short_ones(grid):
    for threshold in (1, 10, 50):
        assert count_long_cheats(grid, threshold, 2) >= count_short_cheats(grid, threshold)


def test_unreachable_end_raises():
    with pytest.raises(ValueError):
        count_short_cheats(["#####", "#S#E#", "#####"], 1)


def test_main(tmp_path, capsys, grid):
    path = tmp_path / "track.txt"
    path.write_text(EXAMPLE)
    main([str(path)])
    assert capsys.readouterr().out.split() == [
        str(count_short_cheats(grid, 100)),
        str(count_long_cheats(grid, 100, 20)),
    ]