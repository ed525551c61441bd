"""Assembly for sound recovery and for two programs talking over queues."""

from collections import deque
from dataclasses import dataclass, field

_ARITY = {"snd": 1, "set": 2, "add": 2, "mul": 2, "mod": 2, "rcv": 1, "jgz": 2}


@dataclass(frozen=True)
class PairResult:
    """Final registers, positions and number of values sent by each program."""

    registers: tuple[dict[str, int], dict[str, int]]
    positions: tuple[int, int]
    sent: tuple[int, int]


def parse_program(text: str) -> list[tuple[str, ...]]:
    """Parse one instruction per non-blank line into ``(op, *operands)``."""
    program = []
    for line in text.splitlines():
        parts = line.split()
        if not parts:
            continue
        op, *operands = parts
        if op not in _ARITY:
            raise ValueError(f"unknown instruction {op!r}")
        if len(operands) != _ARITY[op]:
            raise ValueError(f"wrong operand count in {line.strip()!r}")
        program.append((op, *operands))
    return program


def _value(registers: dict[str, int], operand: str) -> int:
    if any("a" <= char <= "z" for char in operand):
        return registers.get(operand[0], 0)
    return int(operand)


def _truncated_mod(a: int, b: int) -> int:
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def _arithmetic(registers: dict[str, int], op: str, target: str, operand: str) -> None:
    register = target[0]
    value = _value(registers, operand)
    current = registers.get(register, 0)
    if op == "set":
        registers[register] = value
    elif op == "add":
        registers[register] = current + value
    elif op == "mul":
        registers[register] = current * value
    else:
        registers[register] = _truncated_mod(current, value)


def recover_frequency(program) -> int | None:
    """Last sound played when the first non-zero ``rcv`` runs, or None if none does."""
    program = list(program)
    registers: dict[str, int] = {}
    last_sound = None
    position = 0
    while 0 <= position < len(program):
        op, *operands = program[position]
        if op == "snd":
            last_sound = _value(registers, operands[0])
        elif op == "rcv":
            if _value(registers, operands[0]) != 0:
                return last_sound
        elif op == "jgz":
            if _value(registers, operands[0]) > 0:
                position += _value(registers, operands[1])
                continue
        else:
            _arithmetic(registers, op, *operands)
        position += 1
    return None


@dataclass
class _Machine:
    registers: dict[str, int]
    position: int = 0
    inbox: deque = field(default_factory=deque)
    sent: int = 0

    def step(self, program, peer: "_Machine") -> None:
        op, *operands = program[self.position]
        if op == "snd":
            peer.inbox.append(_value(self.registers, operands[0]))
            self.sent += 1
        elif op == "rcv":
            if not self.inbox:
                return
            self.registers[operands[0][0]] = self.inbox.popleft()
        elif op == "jgz":
            if _value(self.registers, operands[0]) > 0:
                self.position += _value(self.registers, operands[1])
                return
        else:
            _arithmetic(self.registers, op, *operands)
        self.position += 1


def run_pair(program) -> PairResult:
    """Run two copies in lockstep, ``p`` set to 0 and 1, until both stall or one leaves."""
    program = list(program)
    first, second = _Machine({"p": 0}), _Machine({"p": 1})
    while program:
        before = (first.position, second.position)
        first.step(program, second)
        second.step(program, first)
        after = (first.position, second.position)
        if after == before:
            break
        if not all(0 <= position < len(program) for position in after):
            break
    return PairResult(
        registers=(dict(sorted(first.registers.items())), dict(sorted(second.registers.items()))),
        positions=(first.position, second.position),
        sent=(first.sent, second.sent),
    )