"""Historian Hysteria: comparing two lists of location ids."""

from collections import Counter

from advent.inputs import read_input


def parse_lists(text):
    """Split whitespace-separated pairs into a left and a right list."""
    tokens = iter(int(token) for token in text.split())
    left, right = [], []
    for first, second in zip(tokens, tokens):
        left.append(first)
        right.append(second)
    return left, right


def total_distance(left, right):
    """Sum of distances between the lists paired up in sorted order."""
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def similarity_score(left, right):
    """Sum of each left value times its number of occurrences on the right."""
    occurrences = Counter(right)
    return sum(value * occurrences[value] for value in left)


def main(argv=None):
    left, right = parse_lists(read_input(argv))
    print(total_distance(left, right))
    print(similarity_score(left, right))