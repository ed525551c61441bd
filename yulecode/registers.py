"""Conditional register increment and decrement instructions."""

import operator
from dataclasses import dataclass

_COMPARISONS = {
    "==": operator.eq,
    "!=": operator.ne,
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
}

_DIRECTIONS = {"inc": 1, "dec": -1}


@dataclass(frozen=True)
class Instruction:
    """Add ``delta`` to ``register`` if the condition holds."""

    register: str
    delta: int
    condition_register: str
    operator: str
    comparand: int


def parse_instruction(line: str) -> Instruction:
    """Parse a line like ``b inc 5 if a > 1``."""
    parts = line.split()
    if len(parts) != 7 or parts[3] != "if":
        raise ValueError(f"malformed instruction: {line!r}")
    register, direction, amount, _, condition_register, comparison, comparand = parts
    if direction not in _DIRECTIONS:
        raise ValueError(f"unknown direction {direction!r}")
    return Instruction(
        register=register,
        delta=_DIRECTIONS[direction] * int(amount),
        condition_register=condition_register,
        operator=comparison,
        comparand=int(comparand),
    )


def condition_holds(left: int, right: int, operator: str) -> bool:
    """Evaluate the comparison; an unknown operator always holds."""
    comparison = _COMPARISONS.get(operator)
    return True if comparison is None else comparison(left, right)


def run(text: str) -> dict[str, int]:
    """Execute every instruction and return the target registers' values.

    Registers appear in order of first use as a target; registers only
    named in conditions read as zero.
    """
    instructions = [parse_instruction(line) for line in text.splitlines() if line.strip()]
    registers = dict.fromkeys((ins.register for ins in instructions), 0)
    for ins in instructions:
        current = registers.get(ins.condition_register, 0)
        if condition_holds(current, ins.comparand, ins.operator):
            registers[ins.register] += ins.delta
    return registers


def largest_value(text: str) -> int:
    """Largest register value after running all instructions."""
    registers = run(text)
    if not registers:
        raise ValueError("no registers")
    return max(registers.values())