"""Disk Fragmenter: compacting files on a disk and computing checksums."""

import heapq

from advent.inputs import read_input

_MAX_SPAN = 9


def parse_disk_map(text):
    """Digits of the dense disk map: file and free-space lengths alternating."""
    tokens = text.split()
    if not tokens:
        raise ValueError("empty disk map")
    return [int(character) for character in tokens[0]]


def _layout(sizes):
    return [
        index // 2 if index % 2 == 0 else None
        for index, size in enumerate(sizes)
        for _ in range(size)
    ]


def compact_blocks(sizes):
    """Checksum after moving single blocks from the end into the leftmost gaps."""
    disk = _layout(sizes)
    left, right = 0, len(disk) - 1
    while True:
        while left < right and disk[left] is not None:
            left += 1
        while left < right and disk[right] is None:
            right -= 1
        if left >= right:
            break
        disk[left], disk[right] = disk[right], None
    return sum(position * file_id for position, file_id in enumerate(disk) if file_id is not None)


def compact_files(sizes):
    """Checksum after moving whole files, highest id first, into the leftmost fitting gap."""
    files = []
    free = [[] for _ in range(_MAX_SPAN + 1)]
    block = 0
    for index, size in enumerate(sizes):
        if index % 2 == 0:
            files.append([block, index // 2, size])
        else:
            heapq.heappush(free[size], block)
        block += size

    for entry in reversed(files):
        start, _, count = entry
        candidates = [
            (heap[0], span)
            for span, heap in enumerate(free[count:], start=count)
            if heap and heap[0] < start
        ]
        if not candidates:
            continue
        new_start, span = min(candidates)
        heapq.heappop(free[span])
        heapq.heappush(free[span - count], new_start + count)
        entry[0] = new_start

    return sum(file_id * sum(range(start, start + count)) for start, file_id, count in files)


def main(argv=None):
    sizes = parse_disk_map(read_input(argv))
    print(compact_blocks(sizes))
    print(compact_files(sizes))