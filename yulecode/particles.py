"""Particles moving under constant acceleration."""

import re
from collections import defaultdict
from dataclasses import dataclass

ITERATIONS = 300

_VECTOR = re.compile(r"([pva])\s*=\s*<([^>]*)>")

Vector = tuple[int, int, int]


@dataclass(frozen=True)
class Particle:
    """Position, velocity and acceleration of one particle."""

    position: Vector
    velocity: Vector
    acceleration: Vector


def _vector(body: str, line: str) -> Vector:
    try:
        values = tuple(int(part) for part in body.split(","))
    except ValueError:
        raise ValueError(f"malformed particle: {line!r}") from None
    if len(values) != 3:
        raise ValueError(f"malformed particle: {line!r}")
    return values  # type: ignore[return-value]


def parse_particles(text: str) -> list[Particle]:
    """Parse lines like ``p=<1,2,3>, v=<0,0,0>, a=<-1,0,1>``."""
    particles = []
    for line in text.splitlines():
        if not line.strip():
            continue
        found = _VECTOR.findall(line)
        if [name for name, _ in found] != ["p", "v", "a"]:
            raise ValueError(f"malformed particle: {line!r}")
        position, velocity, acceleration = (_vector(body, line) for _, body in found)
        particles.append(Particle(position, velocity, acceleration))
    return particles


def _tick(particle: Particle) -> Particle:
    velocity = tuple(v + a for v, a in zip(particle.velocity, particle.acceleration))
    position = tuple(p + v for p, v in zip(particle.position, velocity))
    return Particle(position, velocity, particle.acceleration)  # type: ignore[arg-type]


def simulate(particles) -> list[Particle]:
    """Advance every particle by one tick: velocity first, then position."""
    return [_tick(particle) for particle in particles]


def closest_particle(particles, iterations: int = ITERATIONS) -> int:
    """Index of the particle nearest the origin after ``iterations`` ticks.

    Distance is Manhattan distance; ties go to the lowest index.
    """
    state = list(particles)
    if not state:
        raise ValueError("no particles")
    for _ in range(iterations):
        state = simulate(state)
    distances = [sum(abs(c) for c in particle.position) for particle in state]
    return distances.index(min(distances))


def surviving_particles(particles, iterations: int = ITERATIONS) -> int:
    """Number of particles not destroyed by collisions within ``iterations`` ticks.

    Destroyed particles keep moving. In each group sharing a position, the
    lowest-numbered live particle and every higher-numbered member are
    destroyed, provided that live particle is not the group's last member.
    """
    state = list(particles)
    alive = [True] * len(state)
    for _ in range(iterations):
        state = simulate(state)
        groups: dict[tuple, list[int]] = defaultdict(list)
        for index, particle in enumerate(state):
            groups[particle.position].append(index)
        for members in groups.values():
            if len(members) < 2:
                continue
            first_live = next((index for index in members if alive[index]), None)
            if first_live is None or first_live == members[-1]:
                continue
            for index in members:
                if index >= first_live:
                    alive[index] = False
    return sum(alive)