"""Walking a hexagonal grid and measuring distances back to the start."""

from collections.abc import Iterator

# Doubled vertical coordinates: a north step moves two rows, diagonal steps one.
_STEPS = {
    "n": (0, 2),
    "s": (0, -2),
    "ne": (1, 1),
    "nw": (-1, 1),
    "se": (1, -1),
    "sw": (-1, -1),
}


def hex_distance(x: int, y: int) -> int:
    """Number of hex steps from the origin to ``(x, y)``."""
    a, b = abs(x), abs(y)
    return a if a >= b else a + (b - a) // 2


def walk(path: str) -> Iterator[tuple[int, int]]:
    """Yield the position after each comma-separated step of the first line."""
    x = y = 0
    for step in path.split("\n", 1)[0].split(","):
        step = step.strip()
        if not step:
            continue
        try:
            dx, dy = _STEPS[step]
        except KeyError:
            raise ValueError(f"unknown hex step {step!r}") from None
        x += dx
        y += dy
        yield x, y


def final_and_furthest(path: str) -> tuple[int, int]:
    """Distance at the end of the path and the greatest distance reached."""
    final = furthest = 0
    for x, y in walk(path):
        final = hex_distance(x, y)
        furthest = max(furthest, final)
    return final, furthest