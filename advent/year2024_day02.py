"""Red-Nosed Reports: checking level reports for safety."""

from itertools import pairwise

from advent.inputs import read_input


def parse_reports(text):
    """One list of levels per line."""
    return [[int(token) for token in line.split()] for line in text.splitlines()]


def _in_range(number):
    return 1 <= number <= 3


def _ascending(values, dropped):
    """True if values rise by 1..3 each step, allowing one drop unless dropped."""
    differences = values[:1] + [b - a for a, b in pairwise(values)]
    count = len(differences)
    index = 1
    while index < count:
        if _in_range(differences[index]):
            index += 1
            continue
        if dropped:
            return False
        dropped = True

        index += 1
        if index == count or _in_range(differences[index] + differences[index - 1]):
            index += 1
            continue
        if index == 2 or _in_range(differences[index - 2] + differences[index - 1]):
            if _in_range(differences[index]):
                index += 1
                continue
        return False
    return True


def is_safe(report, tolerate):
    """True if the report is monotonic with gentle steps.

    With tolerate set, a single bad level may be removed.
    """
    values = list(report)
    dropped = not tolerate
    return _ascending(values, dropped) or _ascending(values[::-1], dropped)


def count_safe(reports, tolerate):
    return sum(1 for report in reports if is_safe(report, tolerate))


def main(argv=None):
    reports = parse_reports(read_input(argv))
    print(count_safe(reports, False))
    print(count_safe(reports, True))