# advent

Solvers for Advent of Code puzzles: days 1–20 and 23 of 2023, and days 1–21
of 2024. Each day is a module, `advent.year<YYYY>_day<DD>`, with small
functions for parsing the input and computing the answers, and a command that
prints the answers for a whole puzzle input.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Command line

Every day has its own command, named `advent-<year>-<day>`. Give it the path
of your puzzle input, or pipe the input on standard input (a path of `-` also
means standard input). More than one argument is a usage error.

```
advent-2024-01 input.txt
advent-2023-07 < input.txt
```

### 2024 commands

Each prints the part one answer, then the part two answer, one per line, with
these particulars:

- `advent-2024-14` prints the safety factor, then the picture of the robots
  at the step where most of them line up, a blank line, and that step.
- `advent-2024-17` prints the program output as comma-separated values, then
  the lowest register A value that makes the program print itself.
- `advent-2024-18` prints the shortest path length, then the blocking byte as
  `x,y`.

### 2023 commands

Most 2023 commands print a single answer, the one for part two:

| Command | Prints |
| --- | --- |
| `advent-2023-01` | calibration sum, spelled-out digits counted |
| `advent-2023-02` | sum of the minimal cube powers |
| `advent-2023-03` | gear ratio sum, then part number sum |
| `advent-2023-04` | card points, then total cards |
| `advent-2023-05` | lowest location for the seed ranges |
| `advent-2023-06` | product of ways for the races, then ways for the joined race |
| `advent-2023-07` | total winnings with jokers |
| `advent-2023-08` | steps until every ghost stands on a Z node |
| `advent-2023-09` | sum of next values, then sum of previous values |
| `advent-2023-10` | farthest loop distance, then enclosed tiles |
| `advent-2023-11` | galaxy distance sum with an expansion of one million |
| `advent-2023-12` | arrangement count for the unfolded records |
| `advent-2023-13` | reflection total after fixing smudges |
| `advent-2023-14` | north load after 1,000,000,000 spin cycles |
| `advent-2023-15` | focusing power |
| `advent-2023-16` | most tiles energised from any edge |
| `advent-2023-17` | least heat loss for an ultra crucible (4 to 10 blocks) |
| `advent-2023-18` | lagoon volume from the hex-coded steps |
| `advent-2023-19` | accepted rating combinations |
| `advent-2023-20` | product of button presses until `qt` receives a high pulse |
| `advent-2023-23` | longest hike with slopes treated as paths |

The part one answers are available from the library; for instance
`advent.year2023_day12.parse_record(line, False)` reads a record without
unfolding, `advent.year2023_day17.minimal_heat_loss(grid, 1, 3)` gives the
ordinary crucible, `advent.year2023_day18.parse_plain_step` reads the plain
dig plan, and `advent.year2023_day23.longest_hike(grid, True)` keeps slopes
slippery.

## Library use

```python
from advent.year2024_day01 import parse_lists, total_distance, similarity_score

left, right = parse_lists("3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n")
print(total_distance(left, right))    # 11
print(similarity_score(left, right))  # 31
```

```python
from advent.year2023_day15 import hash_label

print(hash_label("HASH"))  # 52
```

`advent.inputs` holds `read_input(argv)` and `input_lines(argv)`, which the
commands use to read their input.

## What is not here

There are no solvers for 2023 days 21, 22, 24 and 25, nor for 2024 days 22
to 25. There is no command that runs every day at once, and nothing downloads
puzzle inputs; each command reads only the input it is given.