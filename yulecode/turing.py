"""Turing machine blueprints and their diagnostic checksum."""

import re
from dataclasses import dataclass

_HEADER = re.compile(
    r"Begin in state (\w)\.\s*Perform a diagnostic checksum after (\d+) steps?\."
)
_BRANCH = (
    r"If the current value is {value}:\s*"
    r"- Write the value (\d+)\.\s*"
    r"- Move one slot to the (left|right)\.\s*"
    r"- Continue with state (\w)\."
)
_STATE = re.compile(
    r"In state (\w):\s*" + _BRANCH.format(value=0) + r"\s*" + _BRANCH.format(value=1)
)

Action = tuple[int, int, str]


@dataclass(frozen=True)
class Blueprint:
    """Start state, step count, and per state the actions for reading 0 and 1.

    Each action is ``(value_to_write, move, next_state)`` with move ``+1`` for
    right and ``-1`` for left.
    """

    start: str
    steps: int
    rules: dict[str, tuple[Action, Action]]


def parse_blueprint(text: str) -> Blueprint:
    """Parse the blueprint's header and state descriptions."""
    header = _HEADER.search(text)
    if header is None:
        raise ValueError("blueprint header not found")
    rules: dict[str, tuple[Action, Action]] = {}
    for match in _STATE.finditer(text):
        name, w0, m0, n0, w1, m1, n1 = match.groups()
        rules[name] = (
            (int(w0), 1 if m0 == "right" else -1, n0),
            (int(w1), 1 if m1 == "right" else -1, n1),
        )
    if not rules:
        raise ValueError("blueprint has no states")
    return Blueprint(start=header.group(1), steps=int(header.group(2)), rules=rules)


def diagnostic_checksum(blueprint: Blueprint) -> int:
    """Number of non-zero tape cells after running the blueprint's steps."""
    ones: set[int] = set()
    cursor = 0
    state = blueprint.start
    for _ in range(blueprint.steps):
        try:
            rule = blueprint.rules[state]
        except KeyError:
            raise ValueError(f"unknown state {state!r}") from None
        write, move, state = rule[cursor in ones]
        if write:
            ones.add(cursor)
        else:
            ones.discard(cursor)
        cursor += move
    return len(ones)