"""Mirage Maintenance: extrapolating sensor histories in both directions."""

from itertools import pairwise

from advent.inputs import read_input


def parse_histories(text):
    """One list of integers per non-empty line."""
    return [[int(token) for token in line.split()] for line in text.splitlines() if line.strip()]


def _layers(history):
    """The history followed by its successive difference sequences, down to length one."""
    layer = list(history)
    if not layer:
        raise ValueError("empty history")
    layers = [layer]
    while len(layer) > 1:
        layer = [b - a for a, b in pairwise(layer)]
        layers.append(layer)
    return layers


def extrapolate(history):
    """Return (next value, previous value) of the history."""
    layers = _layers(history)
    following = sum(layer[-1] for layer in layers)
    previous = 0
    for layer in reversed(layers):
        previous = layer[0] - previous
    return following, previous


def main(argv=None):
    results = [extrapolate(history) for history in parse_histories(read_input(argv))]
    print(sum(following for following, _ in results))
    print(sum(previous for _, previous in results))