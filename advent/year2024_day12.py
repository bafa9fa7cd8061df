"""Garden Groups: pricing fences around garden regions."""

from collections import Counter

from advent.inputs import input_lines

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


class UnionFind:
    """Disjoint sets with path halving and union by size."""

    def __init__(self, items=()):
        self._parents = {}
        self._sizes = {}
        for item in items:
            self.add(item)

    def add(self, item):
        self._parents.setdefault(item, item)
        self._sizes.setdefault(item, 1)

    def find(self, value):
        parents = self._parents
        while parents[value] != value:
            parents[value] = parents[parents[value]]
            value = parents[value]
        return value

    def merge(self, left, right):
        left, right = self.find(left), self.find(right)
        if left == right:
            return left
        if self._sizes[left] < self._sizes[right]:
            left, right = right, left
        self._parents[right] = left
        self._sizes[left] += self._sizes[right]
        return left


def _dimensions(garden):
    return len(garden[0]), len(garden)


def regions(garden):
    """Union-find over (x, y) cells joining orthogonal neighbours of the same plant."""
    width, height = _dimensions(garden)
    union_find = UnionFind((x, y) for x in range(width) for y in range(height))
    for y in range(height):
        for x in range(width):
            if x + 1 < width and garden[y][x] == garden[y][x + 1]:
                union_find.merge((x, y), (x + 1, y))
            if y + 1 < height and garden[y][x] == garden[y + 1][x]:
                union_find.merge((x, y), (x, y + 1))
    return union_find


def _areas(union_find, width, height):
    return Counter(union_find.find((x, y)) for x in range(width) for y in range(height))


def fence_price(garden):
    """Sum over regions of area times perimeter."""
    width, height = _dimensions(garden)
    union_find = regions(garden)
    areas = _areas(union_find, width, height)
    inner = Counter()
    for y in range(height):
        for x in range(width):
            root = union_find.find((x, y))
            for dx, dy in _STEPS:
                nx, ny = x + dx, y + dy
                if 0 <= nx < width and 0 <= ny < height and union_find.find((nx, ny)) == root:
                    inner[root] += 1
    return sum(area * (4 * area - inner[root]) for root, area in areas.items())


def _count_sides(boundaries, sides):
    """Count straight fence segments along each boundary line.

    Each boundary is a sequence of (before, after) region pairs, None meaning outside.
    """
    for boundary in boundaries:
        before = after = None
        for new_before, new_after in boundary:
            if new_before != new_after:
                if before != new_before or after == new_before:
                    sides[new_before] += 1
                if after != new_after or before == new_after:
                    sides[new_after] += 1
            before, after = new_before, new_after


def bulk_fence_price(garden):
    """Sum over regions of area times number of straight sides."""
    width, height = _dimensions(garden)
    union_find = regions(garden)
    areas = _areas(union_find, width, height)

    def root(x, y):
        if 0 <= x < width and 0 <= y < height:
            return union_find.find((x, y))
        return None

    sides = Counter()
    _count_sides(
        ([(root(x - 1, y), root(x, y)) for y in range(height)] for x in range(width + 1)),
        sides,
    )
    _count_sides(
        ([(root(x, y - 1), root(x, y)) for x in range(width)] for y in range(height + 1)),
        sides,
    )
    return sum(area * sides[region] for region, area in areas.items())


def main(argv=None):
    garden = input_lines(argv)
    print(fence_price(garden))
    print(bulk_fence_price(garden))