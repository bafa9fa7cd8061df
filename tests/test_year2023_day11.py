from advent.year2023_day11 import galaxy_distance_sum, main

EXAMPLE = [
    "...#......",
    ".......#..",
    "#.........",
    "..........",
    "......#...",
    ".#........",
    ".........#",
    "..........",
    ".......#..",
    "#...#.....",
]


def _transpose(grid):
    return ["".join(column) for column in zip(*grid)]


def test_example_doubled():
    assert galaxy_distance_sum(EXAMPLE, 2) == 374


def test_example_tenfold():
    assert galaxy_distance_sum(EXAMPLE, 10) == 1030


def test_linear_in_factor():
    s1, s2, s3 = (galaxy_distance_sum(EXAMPLE, f) for f in (1, 2, 3))
    assert s3 - s2 == s2 - s1
    assert galaxy_distance_sum(EXAMPLE, 100) - galaxy_distance_sum(EXAMPLE, 10) == 90 * (s2 - s1)


def test_expansion_increases_distances():
    assert galaxy_distance_sum(EXAMPLE, 1) < galaxy_distance_sum(EXAMPLE, 2)


def test_transpose_invariant():
    assert galaxy_distance_sum(_transpose(EXAMPLE), 7) == galaxy_distance_sum(EXAMPLE, 7)


def test_reversed_rows_invariant():
    assert galaxy_distance_sum(EXAMPLE[::-1], 5) == galaxy_distance_sum(EXAMPLE, 5)


def test_no_empty_lines_ignores_factor():
    grid = ["#.", ".#"]
    assert galaxy_distance_sum(grid, 1) == galaxy_distance_sum(grid, 50)


def test_main(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(EXAMPLE) + "\n")
    main([str(path)])
    assert capsys.readouterr().out.strip() == str(galaxy_distance_sum(EXAMPLE, 1_000_000))