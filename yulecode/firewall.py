"""Packet scanners in a layered firewall."""

from itertools import count


def parse_firewall(text: str) -> dict[int, int]:
    """Parse ``depth: range`` lines; layers of range zero hold no scanner."""
    layers: dict[int, int] = {}
    for line in text.splitlines():
        if not line.strip():
            continue
        depth, colon, scan_range = line.partition(":")
        if not colon:
            raise ValueError(f"malformed firewall line: {line!r}")
        try:
            depth_value, range_value = int(depth), int(scan_range)
        except ValueError:
            raise ValueError(f"malformed firewall line: {line!r}") from None
        if depth_value < 0 or range_value < 0:
            raise ValueError(f"negative value in firewall line: {line!r}")
        if range_value:
            layers[depth_value] = range_value
    return layers


def _period(scan_range: int) -> int:
    return max(2 * (scan_range - 1), 1)


def _caught(depth: int, scan_range: int, delay: int) -> bool:
    return scan_range > 0 and (depth + delay) % _period(scan_range) == 0


def severity(layers: dict[int, int]) -> int:
    """Sum of depth times range over the layers that catch an undelayed packet."""
    return sum(
        depth * scan_range
        for depth, scan_range in layers.items()
        if _caught(depth, scan_range, 0)
    )


def smallest_delay(layers: dict[int, int]) -> int:
    """Fewest picoseconds to wait so that no scanner catches the packet."""
    if any(scan_range == 1 for scan_range in layers.values()):
        raise ValueError("a layer of range 1 catches every packet")
    for delay in count():
        if not any(_caught(d, r, delay) for d, r in layers.items()):
            return delay
    raise AssertionError("unreachable")