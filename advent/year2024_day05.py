"""Print Queue: checking and repairing page orderings."""

from functools import cmp_to_key

from advent.inputs import read_input


def parse_manual(text):
    """Return (rules, updates).

    rules maps a page to the pages that must be printed before it.
    """
    rules = {}
    updates = []
    for token in text.split():
        if "|" in token:
            before, after = token.split("|")
            rules.setdefault(int(after), []).append(int(before))
        else:
            updates.append([int(value) for value in token.split(",")])
    return rules, updates


def is_out_of_order(rules, update):
    """True if some page comes after a page it must precede."""
    pending = set()
    for page in update:
        pending.update(rules.get(page, ()))
        if page in pending:
            return True
    return False


def _middle(update):
    return update[len(update) // 2]


def sum_ordered_middles(rules, updates):
    return sum(_middle(update) for update in updates if not is_out_of_order(rules, update))


def sum_reordered_middles(rules, updates):
    """Sum of middle pages of the out-of-order updates after sorting them."""

    def compare(left, right):
        if left in rules.get(right, ()):
            return -1
        if right in rules.get(left, ()):
            return 1
        return 0

    return sum(
        _middle(sorted(update, key=cmp_to_key(compare)))
        for update in updates
        if is_out_of_order(rules, update)
    )


def main(argv=None):
    rules, updates = parse_manual(read_input(argv))
    print(sum_ordered_middles(rules, updates))
    print(sum_reordered_middles(rules, updates))