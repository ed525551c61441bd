"""Memory bank reallocation cycles."""


def redistribute(banks) -> tuple[int, ...]:
    """One reallocation cycle: empty the fullest bank and spread its blocks.

    Ties are broken by the lowest index. Blocks go one at a time to the
    following banks, wrapping around.
    """
    state = list(banks)
    if not state:
        raise ValueError("no memory banks")
    blocks = max(state)
    start = state.index(blocks)
    state[start] = 0
    size = len(state)
    for offset in range(1, blocks + 1):
        state[(start + offset) % size] += 1
    return tuple(state)


def loop_size(banks) -> int:
    """Number of cycles in the loop that reallocation eventually repeats."""
    state = tuple(banks)
    if not state:
        raise ValueError("no memory banks")
    seen: dict[tuple[int, ...], int] = {}
    cycle = 0
    while True:
        state = redistribute(state)
        cycle += 1
        if state in seen:
            return cycle - seen[state]
        seen[state] = cycle