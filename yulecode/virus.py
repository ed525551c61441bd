"""A virus carrier wandering over an infinite grid of nodes."""

BURSTS = 10_000
SIZE = 25

# Up, right, down, left as (row, column) steps.
_HEADINGS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def parse_infected(text: str) -> set[tuple[int, int]]:
    """Positions ``(row, column)`` of every ``#`` in the map."""
    return {
        (row, col)
        for row, line in enumerate(text.splitlines())
        for col, char in enumerate(line)
        if char == "#"
    }


def count_infections(infected, bursts: int = BURSTS, size: int = SIZE) -> int:
    """Number of bursts that infect a node.

    The carrier starts facing up at ``(size // 2, size // 2)``. On an
    infected node it turns right and cleans it; on a clean node it turns
    left and infects it. Then it moves forward one node.
    """
    grid = set(infected)
    row = col = size // 2
    facing = 0
    infections = 0
    for _ in range(bursts):
        here = (row, col)
        if here in grid:
            facing = (facing + 1) % 4
            grid.remove(here)
        else:
            facing = (facing + 3) % 4
            grid.add(here)
            infections += 1
        d_row, d_col = _HEADINGS[facing]
        row += d_row
        col += d_col
    return infections