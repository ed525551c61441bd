"""Scoring of a character stream of groups and garbage."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StreamStats:
    """Total group score and number of non-cancelled garbage characters."""

    score: int
    garbage: int


def scan_stream(text: str) -> StreamStats:
    """Scan the first line of ``text`` for groups ``{}`` and garbage ``<>``.

    ``!`` cancels the character after it, inside or outside garbage.
    """
    chars = iter(text.split("\n", 1)[0])
    score = depth = garbage = 0
    in_garbage = False
    for char in chars:
        if char == "!":
            next(chars, None)
        elif in_garbage:
            if char == ">":
                in_garbage = False
            else:
                garbage += 1
        elif char == "{":
            depth += 1
        elif char == "}":
            score += depth
            depth -= 1
        elif char == "<":
            in_garbage = True
    return StreamStats(score=score, garbage=garbage)