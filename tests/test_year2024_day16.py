import pytest

from advent.year2024_day16 import main, parse_maze, solve_maze

EXAMPLE = "\n".join(
    [
        "###############",
        "#.......#....E#",
        "#.#.###.#.###.#",
        "#.....#.#...#.#",
        "#.###.#####.#.#",
        "#.#.#.......#.#",
        "#.#.#####.###.#",
        "#...........#.#",
        "###.#.#####.#.#",
        "#...#.....#.#.#",
        "#.#.#.###.#.#.#",
        "#.....#...#.#.#",
        "#.###.#.#.#.#.#",
        "#S..#.....#...#",
        "###############",
    ]
)


def test_example_score_and_tiles():
    assert solve_maze(parse_maze(EXAMPLE)) == (7036, 45)


def test_straight_corridor():
    best, tiles = solve_maze(["#####", "#S.E#", "#####"])
    assert best == 2
    assert tiles == best + 1


def test_parse_drops_blank_lines():
    grid = parse_maze(EXAMPLE + "\n\n")
    assert len(grid) == len(EXAMPLE.splitlines())
    assert all(len(row) == len(grid[0]) for row in grid)


def test_score_is_turns_plus_steps():
    best, tiles = solve_maze(parse_maze(EXAMPLE))
    assert best % 1000 < tiles


def test_unreachable_end_raises():
    with pytest.raises(ValueError):
        solve_maze(["#####", "#S#E#", "#####"])


def test_missing_start_raises():
    with pytest.raises(ValueError):
        solve_maze(["#####", "#..E#", "#####"])


def test_main_prints_both_answers(tmp_path, capsys):
    path = tmp_path / "maze.txt"
    path.write_text(EXAMPLE + "\n")
    main([str(path)])
    expected = solve_maze(parse_maze(EXAMPLE))
    assert capsys.readouterr().out.split() == [str(value) for value in expected]