"""Spreadsheet checksums over tab-separated rows of integers."""

from itertools import combinations


def parse_rows(text: str) -> list[list[int]]:
    """Parse tab-separated integers, one row per non-blank line."""
    rows = []
    for line in text.splitlines():
        if not line.strip():
            continue
        rows.append([int(cell) for cell in (part.strip() for part in line.split("\t")) if cell])
    return rows


def range_checksum(rows) -> int:
    """Sum, over all rows, of the difference between largest and smallest value."""
    return sum(max(row) - min(row) for row in rows)


def divisible_checksum(rows) -> int:
    """Sum, over all rows, of the quotient of the first evenly dividing pair."""
    total = 0
    for row in rows:
        for first, second in combinations(row, 2):
            big, small = (first, second) if first > second else (second, first)
            if big % small == 0:
                total += big // small
                break
        else:
            raise ValueError(f"no evenly divisible pair in row {row!r}")
    return total