"""Groups of programs connected by two-way pipes."""

from collections import deque


def parse_pipes(text: str) -> dict[int, tuple[int, ...]]:
    """Parse lines like ``2 <-> 0, 3, 4`` into neighbour lists by program id."""
    graph: dict[int, tuple[int, ...]] = {}
    for line in text.splitlines():
        if not line.strip():
            continue
        left, arrow, right = line.partition("<->")
        if not arrow:
            raise ValueError(f"malformed pipe line: {line!r}")
        try:
            node = int(left)
            neighbours = tuple(int(part) for part in right.split(",") if part.strip())
        except ValueError:
            raise ValueError(f"malformed pipe line: {line!r}") from None
        graph[node] = neighbours
    return graph


def group_of(graph: dict[int, tuple[int, ...]], start: int) -> set[int]:
    """Every program reachable from ``start``, itself included."""
    seen = {start}
    queue = deque([start])
    while queue:
        for neighbour in graph.get(queue.popleft(), ()):
            if neighbour not in seen:
                seen.add(neighbour)
                queue.append(neighbour)
    return seen


def count_groups(graph: dict[int, tuple[int, ...]]) -> int:
    """Number of separate groups among all programs named in the graph."""
    remaining = set(graph)
    remaining.update(n for neighbours in graph.values() for n in neighbours)
    groups = 0
    while remaining:
        remaining -= group_of(graph, next(iter(remaining)))
        groups += 1
    return groups