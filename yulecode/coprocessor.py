"""A small coprocessor language; counts how often ``mul`` runs."""

_OPERATIONS = {"set", "sub", "mul", "jnz"}


def _parse(text: str) -> list[tuple[str, ...]]:
    program = []
    for line in text.splitlines():
        parts = line.split()
        if not parts:
            continue
        if parts[0] in _OPERATIONS and len(parts) != 3:
            raise ValueError(f"wrong operand count in {line.strip()!r}")
        program.append(tuple(parts))
    return program


def _value(registers: dict[str, int], operand: str) -> int:
    if any("a" <= char <= "z" for char in operand):
        return registers.get(operand[0], 0)
    return int(operand)


def count_multiplications(program) -> int:
    """Run the program and return how many ``mul`` instructions executed.

    ``program`` is assembly text or a sequence of ``(op, x, y)`` tuples.
    Unknown operations do nothing. Execution stops when the position leaves
    the program.
    """
    if isinstance(program, str):
        program = _parse(program)
    program = list(program)
    registers: dict[str, int] = {}
    position = 0
    multiplications = 0
    while 0 <= position < len(program):
        op, *operands = program[position]
        if op in _OPERATIONS:
            target, source = operands
            if op == "jnz":
                if _value(registers, target) != 0:
                    position += _value(registers, source)
                    continue
            else:
                register = target[0]
                value = _value(registers, source)
                current = registers.get(register, 0)
                if op == "set":
                    registers[register] = value
                elif op == "sub":
                    registers[register] = current - value
                else:
                    registers[register] = current * value
                    multiplications += 1
        position += 1
    return multiplications