"""Aplenty: sorting machine parts through a system of workflows."""

import re
from dataclasses import dataclass
from math import prod

from advent.inputs import read_input

_CATEGORIES = "xmas"
_START = "in"
_ACCEPT = "A"
_REJECT = "R"
_LOWEST = 1
_HIGHEST = 4000

_WORKFLOW = re.compile(r"(\w+)\{(.*)\}")
_RULE = re.compile(r"([xmas])([<>])(\d+):(\w+)")
_FIELD = re.compile(r"([xmas])=(\d+)")


@dataclass(frozen=True)
class Rule:
    category: str
    less: bool
    threshold: int
    target: str

    def accepts(self, part):
        value = part[self.category]
        return value < self.threshold if self.less else value > self.threshold


@dataclass(frozen=True)
class Workflow:
    name: str
    rules: tuple
    fallback: str

    def route(self, part):
        """Target of the first rule the part satisfies, else the fallback."""
        for rule in self.rules:
            if rule.accepts(part):
                return rule.target
        return self.fallback


def _parse_rule(text):
    match = _RULE.fullmatch(text)
    if match is None:
        raise ValueError(f"bad rule: {text!r}")
    return Rule(match[1], match[2] == "<", int(match[3]), match[4])


def _parse_workflow(line):
    match = _WORKFLOW.fullmatch(line.strip())
    if match is None:
        raise ValueError(f"bad workflow: {line!r}")
    *rules, fallback = match[2].split(",")
    return Workflow(match[1], tuple(_parse_rule(rule) for rule in rules), fallback)


def _parse_part(line):
    body = line.strip()
    if not (body.startswith("{") and body.endswith("}")):
        raise ValueError(f"bad part: {line!r}")
    part = {}
    for field in body[1:-1].split(","):
        match = _FIELD.fullmatch(field.strip())
        if match is None:
            raise ValueError(f"bad rating: {field!r}")
        part[match[1]] = int(match[2])
    if set(part) != set(_CATEGORIES):
        raise ValueError(f"part needs x, m, a and s ratings: {line!r}")
    return part


def parse_system(text):
    """Return (workflows by name, parts as dicts of ratings)."""
    head, _, tail = text.strip().partition("\n\n")
    workflows = {}
    for line in head.splitlines():
        if line.strip():
            workflow = _parse_workflow(line)
            workflows[workflow.name] = workflow
    parts = [_parse_part(line) for line in tail.splitlines() if line.strip()]
    return workflows, parts


def _lookup(workflows, name):
    try:
        return workflows[name]
    except KeyError:
        raise ValueError(f"no workflow named {name!r}") from None


def accepted_rating_sum(workflows, parts):
    """Sum of all ratings of the parts that end up accepted."""
    total = 0
    for part in parts:
        label = _START
        while label not in (_ACCEPT, _REJECT):
            label = _lookup(workflows, label).route(part)
        if label == _ACCEPT:
            total += sum(part[category] for category in _CATEGORIES)
    return total


def _count(workflows, label, ranges):
    if any(low > high for low, high in ranges.values()):
        return 0
    if label == _ACCEPT:
        return prod(high - low + 1 for low, high in ranges.values())
    if label == _REJECT:
        return 0
    workflow = _lookup(workflows, label)
    total = 0
    for rule in workflow.rules:
        low, high = ranges[rule.category]
        if rule.less:
            taken, rest = (low, min(high, rule.threshold - 1)), (max(low, rule.threshold), high)
        else:
            taken, rest = (max(low, rule.threshold + 1), high), (low, min(high, rule.threshold))
        total += _count(workflows, rule.target, {**ranges, rule.category: taken})
        ranges = {**ranges, rule.category: rest}
    return total + _count(workflows, workflow.fallback, ranges)


def accepted_combinations(workflows):
    """How many rating combinations from 1 to 4000 each are accepted."""
    ranges = {category: (_LOWEST, _HIGHEST) for category in _CATEGORIES}
    return _count(workflows, _START, ranges)


def main(argv=None):
    workflows, _ = parse_system(read_input(argv))
    print(accepted_combinations(workflows))