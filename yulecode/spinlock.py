"""Circular buffer grown by a spinlock."""

INSERTS = 2017


def value_after(step: int, inserts: int = INSERTS) -> int:
    """Value following the last inserted one once ``inserts`` values are placed."""
    if step < 0 or inserts < 0:
        raise ValueError("step and inserts must not be negative")
    buffer = [0]
    position = 0
    for value in range(1, inserts + 1):
        position = (position + step) % len(buffer) + 1
        buffer.insert(position, value)
    return buffer[(position + 1) % len(buffer)]