"""Chronospatial Computer: a three-bit machine and a program that prints itself."""

import re

from advent.inputs import read_input

_NUMBER = re.compile(r"-?\d+")


def parse_computer(text):
    """Return (a, b, c, program) from the register lines and the program line."""
    numbers = [int(token) for token in _NUMBER.findall(text)]
    if len(numbers) < 3:
        raise ValueError("expected three registers")
    a, b, c, *program = numbers
    return a, b, c, program


def _combo(operand, a, b, c):
    if operand <= 3:
        return operand
    if operand == 4:
        return a
    if operand == 5:
        return b
    if operand == 6:
        return c
    raise ValueError(f"reserved combo operand: {operand}")


def run_program(a, b, c, program):
    """Run the program and return the values it outputs."""
    program = list(program)
    output = []
    pointer = 0
    while pointer + 1 < len(program):
        opcode, operand = program[pointer], program[pointer + 1]
        pointer += 2
        if opcode == 0:
            a = a >> _combo(operand, a, b, c)
        elif opcode == 1:
            b ^= operand
        elif opcode == 2:
            b = _combo(operand, a, b, c) % 8
        elif opcode == 3:
            if a != 0:
                pointer = operand
        elif opcode == 4:
            b ^= c
        elif opcode == 5:
            output.append(_combo(operand, a, b, c) % 8)
        elif opcode == 6:
            b = a >> _combo(operand, a, b, c)
        elif opcode == 7:
            c = a >> _combo(operand, a, b, c)
        else:
            raise ValueError(f"unknown opcode: {opcode}")
    return output


def find_self_output(program):
    """Lowest positive register A for which the program outputs itself.

    Register A is built one octal digit at a time, most significant first.
    """
    program = list(program)

    def search(prefix, length):
        if length > len(program):
            return prefix
        first = 1 if prefix == 0 else 0
        for digit in range(first, 8):
            a = prefix * 8 + digit
            if run_program(a, 0, 0, program) == program[-length:]:
                found = search(a, length + 1)
                if found is not None:
                    return found
        return None

    result = search(0, 1)
    if result is None:
        raise ValueError("no register value makes the program output itself")
    return result


def main(argv=None):
    a, b, c, program = parse_computer(read_input(argv))
    print(",".join(str(value) for value in run_program(a, b, c, program)))
    print(find_self_output(program))