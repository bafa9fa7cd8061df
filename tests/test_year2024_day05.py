from advent.year2024_day05 import (
    is_out_of_order,
    main,
    parse_manual,
    sum_ordered_middles,
    sum_reordered_middles,
)

EXAMPLE = """47|53
97|13
97|61
97|47
75|29
61|13
75|53
29|13
97|29
53|29
61|53
97|53
61|29
47|13
75|47
97|75
47|61
75|61
47|29
75|13
53|13

75,47,61,53,29
97,61,53,29,13
75,29,13
75,97,47,61,53
61,13,29
97,13,75,29,47
"""


def test_parse_manual():
    rules, updates = parse_manual(EXAMPLE)
    assert 47 in rules[53]
    assert updates[0] == [75, 47, 61, 53, 29]


def test_example_ordered():
    assert sum_ordered_middles(*parse_manual(EXAMPLE)) == 143


def test_example_reordered():
    assert sum_reordered_middles(*parse_manual(EXAMPLE)) == 123


def test_out_of_order_detection():
    rules = {2: [1]}
    assert is_out_of_order(rules, [2, 1])
    assert not is_out_of_order(rules, [1, 2])


def test_no_rules_means_nothing_to_reorder():
    _, updates = parse_manual(EXAMPLE)
    assert sum_reordered_middles({}, updates) == 0
    assert sum_ordered_middles({}, updates) == sum(u[len(u) // 2] for u in updates)


def test_main(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    main([str(path)])
    rules, updates = parse_manual(EXAMPLE)
    expected = [
        str(sum_ordered_middles(rules, updates)),
        str(sum_reordered_middles(rules, updates)),
    ]
    assert capsys.readouterr().out.split() == expected