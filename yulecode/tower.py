"""Program towers: find the bottom program and unbalanced sub-towers."""

import re
from dataclasses import dataclass

_LINE = re.compile(r"(\S+) \((\d+)\)(?: -> (.+))?")


@dataclass(frozen=True)
class Program:
    """One program in the tower, with the names of those it holds up."""

    name: str
    weight: int
    children: tuple[str, ...] = ()


def parse_tower(text: str) -> dict[str, Program]:
    """Parse lines like ``name (weight) -> a, b`` into programs by name."""
    programs: dict[str, Program] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        match = _LINE.fullmatch(line)
        if match is None:
            raise ValueError(f"malformed tower line: {line!r}")
        name, weight, rest = match.groups()
        children = tuple(child.strip() for child in rest.split(",")) if rest else ()
        programs[name] = Program(name, int(weight), children)
    return programs


def find_bottom(programs: dict[str, Program]) -> str:
    """Name of the first program that no other program holds."""
    held = {child for program in programs.values() for child in program.children}
    for name in programs:
        if name not in held:
            return name
    raise ValueError("every program is held by another")


def tower_weight(programs: dict[str, Program], name: str) -> int:
    """Total weight of a program and everything it holds."""
    program = programs[name]
    return program.weight + sum(tower_weight(programs, child) for child in program.children)


def find_imbalances(programs: dict[str, Program], name: str):
    """Programs whose children carry differing tower weights, deepest first.

    Each report is ``(parent, ((child, tower_weight, own_weight), ...))``.
    """
    reports = []

    def total(node: str) -> int:
        program = programs[node]
        carried = tuple(
            (child, total(child), programs[child].weight) for child in program.children
        )
        if len({weight for _, weight, _ in carried}) > 1:
            reports.append((node, carried))
        return program.weight + sum(weight for _, weight, _ in carried)

    total(name)
    return reports