"""Hot Springs: counting arrangements of damaged springs."""

from dataclasses import dataclass

from advent.inputs import input_lines

_COPIES = 5


@dataclass(frozen=True)
class Spring:
    data: str
    groups: tuple


def parse_record(line, unfold):
    """Parse '???.### 1,1,3'; unfolding repeats the record five times."""
    parts = line.split()
    if len(parts) != 2:
        raise ValueError(f"bad record: {line!r}")
    data = parts[0]
    groups = tuple(int(value) for value in parts[1].split(","))
    if unfold:
        data = "?".join([data] * _COPIES)
        groups = groups * _COPIES
    return Spring(data, groups)


def arrangements(data, groups):
    """Ways to fill the unknown springs so the damaged runs match groups."""
    groups = tuple(groups)
    n, m = len(data), len(groups)
    # table[i][g]: ways to place groups g.. in data[i:]
    table = [[0] * (m + 1) for _ in range(n + 1)]
    table[n][m] = 1
    for index in range(n - 1, -1, -1):
        current = data[index]
        row = table[index]
        row[m] = 0 if current == "#" else table[index + 1][m]
        for group in range(m - 1, -1, -1):
            total = 0
            if current != ".":
                end = index + groups[group]
                if (
                    end <= n
                    and "." not in data[index:end]
                    and (end == n or data[end] != "#")
                ):
                    total += table[end][group + 1] if end == n else table[end + 1][group + 1]
            if current != "#":
                total += table[index + 1][group]
            row[group] = total
    return table[0][0]


def main(argv=None):
    springs = [parse_record(line, True) for line in input_lines(argv) if line.strip()]
    print(sum(arrangements(spring.data, spring.groups) for spring in springs))