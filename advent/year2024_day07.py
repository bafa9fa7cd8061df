"""Bridge Repair: finding operators that make calibration equations true."""

from dataclasses import dataclass

from advent.inputs import read_input


@dataclass(frozen=True)
class Equation:
    result: int
    numbers: tuple


def parse_equations(text):
    equations = []
    for line in text.splitlines():
        if not line.strip():
            continue
        head, _, tail = line.partition(":")
        equations.append(Equation(int(head), tuple(int(v) for v in tail.split())))
    return equations


def _digits(number):
    return len(str(number)) if number else 0


def concatenate(left, right):
    """Join the decimal digits of left and right."""
    return left * 10 ** _digits(right) + right


def is_solvable(equation, allow_concat):
    """True if +, * (and, if allowed, ||) evaluated left to right can give the result."""
    target = equation.result
    values = {0}
    for number in equation.numbers:
        reached = set()
        for value in values:
            reached.add(value + number)
            product = value * number
            if product <= target:
                reached.add(product)
            if allow_concat and _digits(value) + _digits(number) <= _digits(target):
                joined = concatenate(value, number)
                if joined <= target:
                    reached.add(joined)
        values = reached
    return target in values


def calibration_total(equations, allow_concat):
    return sum(e.result for e in equations if is_solvable(e, allow_concat))


def main(argv=None):
    equations = parse_equations(read_input(argv))
    print(calibration_total(equations, False))
    print(calibration_total(equations, True))