"""Haunted Wasteland: ghosts walking a network until all stand on Z nodes."""

import re
from itertools import cycle
from math import lcm

from advent.inputs import read_input

_NODE = re.compile(r"(\w+)\s*=\s*\((\w+),\s*(\w+)\)")


def parse_network(text):
    """Return (instructions, network) where network maps a node to (left, right)."""
    lines = text.splitlines()
    if not lines or not lines[0].strip():
        raise ValueError("missing instructions")
    instructions = lines[0].strip()
    if set(instructions) - {"L", "R"}:
        raise ValueError(f"instructions must be L or R: {instructions!r}")
    network = {}
    for line in lines[1:]:
        if not line.strip():
            continue
        match = _NODE.fullmatch(line.strip())
        if match is None:
            raise ValueError(f"bad node line: {line!r}")
        network[match[1]] = (match[2], match[3])
    return instructions, network


def _arrivals(instructions, network, start):
    """Step of the first Z node reached and the steps until the next one."""
    node = start
    first = None
    for step, direction in enumerate(cycle(instructions), start=1):
        try:
            node = network[node][0 if direction == "L" else 1]
        except KeyError:
            raise ValueError(f"unknown node: {node!r}") from None
        if node.endswith("Z"):
            if first is None:
                first = step
            else:
                return first, step - first


def ghost_steps(instructions, network):
    """Steps until every ghost starting on an A node stands on a Z node at once."""
    starts = [node for node in network if node.endswith("A")]
    if not starts:
        raise ValueError("no starting nodes")
    ghosts = [_arrivals(instructions, network, start) for start in starts]
    first, period = ghosts[0]
    for other_first, other_period in ghosts[1:]:
        counter = first
        while (counter - other_first) % other_period:
            counter += period
        first = counter
        period = lcm(period, other_period)
    return first


def main(argv=None):
    instructions, network = parse_network(read_input(argv))
    print(ghost_steps(instructions, network))