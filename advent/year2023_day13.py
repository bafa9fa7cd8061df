"""Point of Incidence: lines of reflection in patterns of ash and rocks."""

from advent.inputs import read_input

_ROW_WEIGHT = 100


def parse_patterns(text):
    """Patterns are blocks of lines separated by blank lines."""
    patterns = []
    current = []
    for line in text.splitlines():
        if line.strip():
            current.append(line)
        elif current:
            patterns.append(current)
            current = []
    if current:
        patterns.append(current)
    return patterns


def _mirrors_after(lines, index):
    """True if lines reflect across the gap after position index."""
    return all(a == b for a, b in zip(lines[index::-1], lines[index + 1 :]))


def reflection_score(pattern, ignore):
    """Sum of 100 per row above and 1 per column left of each reflection line.

    A line whose own score equals ignore is left out.
    """
    rows = list(pattern)
    columns = ["".join(column) for column in zip(*rows)]
    score = 0
    for index in range(len(rows) - 1):
        value = (index + 1) * _ROW_WEIGHT
        if value != ignore and _mirrors_after(rows, index):
            score += value
    for index in range(len(columns) - 1):
        value = index + 1
        if value != ignore and _mirrors_after(columns, index):
            score += value
    return score


def smudge_total(patterns):
    """Total score of the new reflection lines found by fixing one smudge.

    Every new line is found twice, once from each mirrored cell.
    """
    total = 0
    for pattern in patterns:
        original = reflection_score(pattern, 0)
        grid = [list(row) for row in pattern]
        for row in grid:
            for x, tile in enumerate(row):
                row[x] = "#" if tile == "." else "."
                score = reflection_score(["".join(line) for line in grid], original)
                row[x] = tile
                if score != original:
                    total += score
    return total // 2


def main(argv=None):
    print(smudge_total(parse_patterns(read_input(argv))))