from advent.year2023_day13 import main, parse_patterns, reflection_score, smudge_total

P1 = [
    "#.##..##.",
    "..#.##.#.",
    "##......#",
    "##......#",
    "..#.##.#.",
    "..##..###",
    "#.#.##.#.",
]
P2 = [
    "#...##..#",
    "#....#..#",
    "..##..###",
    "#####.##.",
    "#####.##.",
    "..##..###",
    "#....#..#",
]
EXAMPLE = "\n".join(P1) + "\n\n" + "\n".join(P2) + "\n"


def _transpose(pattern):
    return ["".join(column) for column in zip(*pattern)]


def test_parse_patterns():
    assert parse_patterns(EXAMPLE) == [P1, P2]


def test_horizontal_reflection():
    assert reflection_score(P2, 0) == 400


def test_transpose_swaps_weights():
    assert reflection_score(_transpose(P1), 0) == 100 * reflection_score(P1, 0)
    assert 100 * reflection_score(_transpose(P2), 0) == reflection_score(P2, 0)


def test_ignore_own_line():
    score = reflection_score(P2, 0)
    assert reflection_score(P2, score) < score


def test_ignore_unrelated_value():
    assert reflection_score(P1, 7) == reflection_score(P1, 0)


def test_smudge_total_is_additive():
    assert smudge_total([P1, P2]) == smudge_total([P1]) + smudge_total([P2])


def test_smudge_finds_new_line():
    total = smudge_total([P2])
    assert total > 0
    assert total != reflection_score(P2, 0)


def test_main(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    main([str(path)])
    assert capsys.readouterr().out.strip() == str(smudge_total([P1, P2]))