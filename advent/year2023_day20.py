"""Pulse Propagation: button presses through flip-flops and conjunctions."""

from collections import deque
from dataclasses import dataclass, replace
from math import prod

from advent.inputs import read_input

FLIP_FLOP = "%"
CONJUNCTION = "&"
BROADCASTER = "broadcaster"

_BUTTON = "button"
_TARGET = "qt"
_LIMIT = 20_000_000


@dataclass(frozen=True)
class Module:
    kind: str
    name: str
    outputs: tuple
    inputs: tuple = ()


def _parse_line(line):
    before, arrow, after = line.partition(" -> ")
    if not arrow:
        raise ValueError(f"bad module line: {line!r}")
    before = before.strip()
    outputs = tuple(name.strip() for name in after.split(",") if name.strip())
    if before == BROADCASTER:
        return Module(BROADCASTER, before, outputs)
    if before[:1] in (FLIP_FLOP, CONJUNCTION) and len(before) > 1:
        return Module(before[0], before[1:], outputs)
    raise ValueError(f"unknown module type: {before!r}")


def parse_modules(text):
    """Modules by name, each knowing the modules that feed it."""
    modules = {}
    for line in text.splitlines():
        if line.strip():
            module = _parse_line(line)
            modules[module.name] = module
    feeders = {name: [] for name in modules}
    for module in modules.values():
        for receiver in module.outputs:
            if receiver in feeders:
                feeders[receiver].append(module.name)
    return {name: replace(module, inputs=tuple(feeders[name])) for name, module in modules.items()}


class _Network:
    def __init__(self, modules):
        self.modules = modules
        self.flips = {name: False for name, module in modules.items() if module.kind == FLIP_FLOP}
        self.memory = {
            name: dict.fromkeys(module.inputs, False)
            for name, module in modules.items()
            if module.kind == CONJUNCTION
        }

    def press(self, start, target):
        """Send a low pulse to start; report whether target got a high pulse."""
        found = False
        queue = deque([(False, _BUTTON, start)])
        while queue:
            high, sender, receiver = queue.popleft()
            if receiver == target and high:
                found = True
            module = self.modules.get(receiver)
            if module is None:
                continue
            if module.kind == FLIP_FLOP:
                if high:
                    continue
                self.flips[receiver] = not self.flips[receiver]
                out = self.flips[receiver]
            elif module.kind == CONJUNCTION:
                memory = self.memory[receiver]
                if sender in memory:
                    memory[sender] = high
                out = not all(memory.values())
            else:
                out = False
            queue.extend((out, receiver, following) for following in module.outputs)
        return found


def presses_to_high(modules, target):
    """Product over the broadcaster's outputs of the presses until target gets a high pulse.

    Each output is pressed directly in turn; module state carries over between them.
    """
    broadcaster = modules.get(BROADCASTER)
    if broadcaster is None:
        raise ValueError("no broadcaster module")
    network = _Network(modules)
    counts = []
    for start in broadcaster.outputs:
        for count in range(1, _LIMIT + 1):
            if network.press(start, target):
                counts.append(count)
                break
        else:
            raise ValueError(f"{target!r} never receives a high pulse from {start!r}")
    return prod(counts)


def main(argv=None):
    print(presses_to_high(parse_modules(read_input(argv)), _TARGET))