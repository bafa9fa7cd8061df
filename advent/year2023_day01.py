"""Trebuchet?!: calibration values hidden in lines of text."""

from advent.inputs import input_lines

_WORDS = ("zero", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine")


def _digit_at(line, index):
    """The digit written at index, as a numeral or a spelled-out word, or None."""
    character = line[index]
    if "0" <= character <= "9":
        return ord(character) - ord("0")
    for value, word in enumerate(_WORDS):
        if line.startswith(word, index):
            return value
    return None


def _digits(line, indices):
    return (digit for digit in (_digit_at(line, index) for index in indices) if digit is not None)


def calibration_value(line):
    """First digit times ten plus last digit; 0 when the line has no digit."""
    first = next(_digits(line, range(len(line))), 0)
    last = next(_digits(line, reversed(range(len(line)))), 0)
    return first * 10 + last


def calibration_sum(lines):
    return sum(calibration_value(line) for line in lines)


def main(argv=None):
    print(calibration_sum(input_lines(argv)))