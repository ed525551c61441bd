"""Knot hash and the disk grid built from it."""

from collections import deque
from functools import reduce
from operator import xor

SIZE = 256
ROUNDS = 64
BLOCK = 16
SUFFIX = (17, 31, 73, 47, 23)
GRID = 128


def knot_rounds(lengths, rounds: int = 1, size: int = SIZE) -> list[int]:
    """Apply knot-tying rounds to the marks ``0..size-1``.

    Position and skip size carry over from one round to the next.
    """
    lengths = list(lengths)
    marks = list(range(size))
    position = skip = 0
    for _ in range(rounds):
        for length in lengths:
            if not 0 <= length <= size:
                raise ValueError(f"length {length} out of range for size {size}")
            if length:
                rotated = marks[position:] + marks[:position]
                rotated[:length] = rotated[length - 1::-1]
                marks = rotated[size - position:] + rotated[:size - position]
            position = (position + length + skip) % size
            skip += 1
    return marks


def first_two_product(lengths, size: int = SIZE) -> int:
    """Product of the first two marks after a single round."""
    marks = knot_rounds(lengths, 1, size)
    return marks[0] * marks[1]


def dense_hash(sparse) -> list[int]:
    """XOR each block of sixteen numbers together."""
    sparse = list(sparse)
    if len(sparse) % BLOCK:
        raise ValueError(f"length {len(sparse)} is not a multiple of {BLOCK}")
    return [reduce(xor, sparse[start:start + BLOCK]) for start in range(0, len(sparse), BLOCK)]


def knot_hash(text: str) -> str:
    """Full knot hash of ``text`` as 32 lower-case hex digits."""
    lengths = list(text.encode()) + list(SUFFIX)
    return bytes(dense_hash(knot_rounds(lengths, ROUNDS, SIZE))).hex()


def disk_grid(key: str) -> list[list[bool]]:
    """Rows of used squares: row ``i`` holds the bits of the hash of ``key-i``."""
    width = GRID
    return [
        [bit == "1" for bit in format(int(knot_hash(f"{key}-{row}"), 16), f"0{width}b")]
        for row in range(GRID)
    ]


def count_regions(key: str) -> int:
    """Number of regions of used squares joined horizontally or vertically."""
    used = {
        (row, col)
        for row, bits in enumerate(disk_grid(key))
        for col, bit in enumerate(bits)
        if bit
    }
    regions = 0
    while used:
        regions += 1
        queue = deque([used.pop()])
        while queue:
            row, col = queue.popleft()
            for neighbour in ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)):
                if neighbour in used:
                    used.remove(neighbour)
                    queue.append(neighbour)
    return regions