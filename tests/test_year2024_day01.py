from advent.year2024_day01 import main, parse_lists, similarity_score, total_distance

EXAMPLE = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"


def test_parse_lists():
    left, right = parse_lists(EXAMPLE)
    assert left == [3, 4, 2, 1, 3, 3]
    assert right == [4, 3, 5, 3, 9, 3]


def test_parse_ignores_unpaired_token():
    assert parse_lists("1 2 3") == ([1], [2])


def test_example_distance():
    assert total_distance(*parse_lists(EXAMPLE)) == 11


def test_example_similarity():
    assert similarity_score(*parse_lists(EXAMPLE)) == 31


def test_distance_is_symmetric_and_order_free():
    left, right = parse_lists(EXAMPLE)
    assert total_distance(left, right) == total_distance(right, left)
    assert total_distance(left, right) == total_distance(left[::-1], right)


def test_identical_lists_have_no_distance():
    left, _ = parse_lists(EXAMPLE)
    assert total_distance(left, list(reversed(left))) == 0


def test_disjoint_lists_are_not_similar():
    assert similarity_score([1, 2], [3, 4]) == similarity_score([], [])


def test_main_prints_both_answers(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    main([str(path)])
    left, right = parse_lists(EXAMPLE)
    expected = [str(total_distance(left, right)), str(similarity_score(left, right))]
    assert capsys.readouterr().out.split() == expected