"""Walks over the square spiral of numbered cells."""

from collections.abc import Iterator
from itertools import islice

_HEADINGS = ((1, 0), (0, 1), (-1, 0), (0, -1))  # right, up, left, down


def _spiral_positions() -> Iterator[tuple[int, int]]:
    """Yield the coordinates of the spiral cells, starting at the origin."""
    x = y = 0
    yield x, y
    run = 1
    heading = 0
    while True:
        for _ in range(2):
            dx, dy = _HEADINGS[heading]
            for _ in range(run):
                x += dx
                y += dy
                yield x, y
            heading = (heading + 1) % len(_HEADINGS)
        run += 1


def spiral_distance(square: int) -> int:
    """Manhattan distance from the given square back to square 1."""
    for index, (x, y) in enumerate(_spiral_positions(), start=1):
        if index >= square:
            return abs(x) + abs(y)
    raise AssertionError("unreachable")


def first_value_reaching(limit: int) -> int:
    """First value written when each cell holds the sum of its filled neighbours."""
    values = {(0, 0): 1}
    if values[(0, 0)] >= limit:
        return values[(0, 0)]
    for x, y in islice(_spiral_positions(), 1, None):
        value = sum(
            values.get((x + dx, y + dy), 0)
            for dx in (-1, 0, 1)
            for dy in (-1, 0, 1)
        )
        values[(x, y)] = value
        if value >= limit:
            return value
    raise AssertionError("unreachable")