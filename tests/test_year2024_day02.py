import pytest

from advent.year2024_day02 import count_safe, is_safe, main, parse_reports

EXAMPLE = """7 6 4 2 1
1 2 7 8 9
9 7 6 2 1
1 3 2 4 5
8 6 4 4 1
1 3 6 7 9
"""


def test_parse_reports():
    reports = parse_reports(EXAMPLE)
    assert reports[0] == [7, 6, 4, 2, 1]
    assert len(reports) == 6


def test_example_strict():
    assert count_safe(parse_reports(EXAMPLE), False) == 2


def test_example_tolerant():
    assert count_safe(parse_reports(EXAMPLE), True) == 4


@pytest.mark.parametrize("report", parse_reports(EXAMPLE))
def test_strict_safety_implies_tolerant_safety(report):
    if is_safe(report, False):
        assert is_safe(report, True)
    else:
        assert not is_safe(report, False)


@pytest.mark.parametrize("report", parse_reports(EXAMPLE) + [[5, 1, 2, 3], [1, 5, 6, 7]])
@pytest.mark.parametrize("tolerate", [False, True])
def test_direction_does_not_matter(report, tolerate):
    assert is_safe(report, tolerate) == is_safe(report[::-1], tolerate)


def test_bad_first_level_can_be_dropped():
    assert is_safe([5, 1, 2, 3], True)
    assert not is_safe([5, 1, 2, 3], False)


def test_main(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    main([str(path)])
    reports = parse_reports(EXAMPLE)
    expected = [str(count_safe(reports, False)), str(count_safe(reports, True))]
    assert capsys.readouterr().out.split() == expected