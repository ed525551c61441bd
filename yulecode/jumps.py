"""Maze of jump offsets that change after each use."""


def parse_offsets(text: str) -> list[int]:
    """Parse one integer offset per non-blank line."""
    return [int(line) for line in text.splitlines() if line.strip()]


def count_steps(offsets) -> int:
    """Number of jumps needed to leave the list.

    After each jump the used offset decreases by one if it was three or
    more, otherwise it increases by one. The input is not modified.
    """
    maze = list(offsets)
    position = 0
    steps = 0
    while 0 <= position < len(maze):
        jump = maze[position]
        maze[position] += -1 if jump >= 3 else 1
        position += jump
        steps += 1
    return steps