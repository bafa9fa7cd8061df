"""Lens Library: the HASH algorithm and a hash map of lenses."""

from collections import defaultdict

from advent.inputs import read_input

_MULTIPLIER = 17
_BOXES = 256


def hash_label(text):
    """The HASH of a string, a value from 0 to 255."""
    value = 0
    for character in text:
        value = (value + ord(character)) * _MULTIPLIER % _BOXES
    return value


def hash_sum(steps):
    return sum(hash_label(step) for step in steps)


def _split_step(step):
    for index, character in enumerate(step):
        if character in "-=":
            return step[:index], character, step[index + 1 :]
    raise ValueError(f"step has no operation: {step!r}")


def focusing_power(steps):
    """Total focusing power after placing and removing lenses in their boxes."""
    boxes = defaultdict(dict)
    for step in steps:
        label, operation, value = _split_step(step)
        box = boxes[hash_label(label)]
        if operation == "=":
            box[label] = int(value)
        else:
            box.pop(label, None)
    return sum(
        (number + 1) * slot * focal
        for number, box in boxes.items()
        for slot, focal in enumerate(box.values(), start=1)
    )


def _parse_steps(text):
    joined = "".join(text.split())
    return joined.split(",") if joined else []


def main(argv=None):
    print(focusing_power(_parse_steps(read_input(argv))))