"""Following a routing diagram of tubes and collecting the letters on the way."""

_DELTAS = {"u": (0, -1), "d": (0, 1), "l": (-1, 0), "r": (1, 0)}


def _is_letter(char: str) -> bool:
    return "A" <= char <= "Z"


def parse_diagram(text: str) -> list[str]:
    """Split the diagram into rows, dropping empty lines and padding with spaces."""
    rows = [line for line in text.splitlines() if line]
    width = max((len(row) for row in rows), default=0)
    return [row.ljust(width) for row in rows]


def _find_start(diagram: list[str]) -> tuple[int, int, str]:
    top, bottom = diagram[0], diagram[-1]
    if "|" in top:
        return top.index("|"), 0, "d"
    if "|" in bottom:
        return bottom.index("|"), len(diagram) - 1, "u"
    for y, row in enumerate(diagram):
        if row[:1] == "-":
            return 0, y, "r"
    for y, row in enumerate(diagram):
        if row[-1:] == "-":
            return len(row) - 1, y, "l"
    raise ValueError("no entry point on the edge of the diagram")


def follow_path(diagram: list[str]) -> str:
    """Letters met while following the path from its edge entry to its end.

    At a ``+`` a vertical path turns left if a horizontal segment or letter
    lies there, otherwise right; a horizontal path turns up if a vertical
    segment or letter lies above, otherwise down. The walk ends on a space
    or at the edge of the diagram.
    """
    if not diagram:
        raise ValueError("empty diagram")

    def cell(x: int, y: int) -> str:
        if 0 <= y < len(diagram) and 0 <= x < len(diagram[y]):
            return diagram[y][x]
        return " "

    x, y, heading = _find_start(diagram)
    letters = []
    while True:
        dx, dy = _DELTAS[heading]
        x += dx
        y += dy
        here = cell(x, y)
        if here == "+":
            if heading in "ud":
                left = cell(x - 1, y)
                heading = "l" if left == "-" or _is_letter(left) else "r"
            else:
                above = cell(x, y - 1)
                heading = "u" if above == "|" or _is_letter(above) else "d"
        elif _is_letter(here):
            letters.append(here)
        elif here == " ":
            break
    return "".join(letters)