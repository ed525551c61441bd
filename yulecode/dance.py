"""Dance moves that shuffle a line of programs."""

from dataclasses import dataclass

LINE = "abcdefghijklmnop"
TIMES = 1_000_000_000


@dataclass(frozen=True)
class Move:
    """A spin ``s``, an exchange ``x`` of positions, or a partner swap ``p``."""

    kind: str
    first: int | str
    second: int | str | None = None

    def apply(self, line: str) -> str:
        """Return the line after this move."""
        if self.kind == "s":
            if not line:
                return line
            shift = self.first % len(line)
            return line[-shift:] + line[:-shift] if shift else line
        programs = list(line)
        if self.kind == "x":
            a, b = self.first, self.second
        else:
            try:
                a, b = programs.index(self.first), programs.index(self.second)
            except ValueError:
                raise ValueError(f"partner not in line: {self}") from None
        programs[a], programs[b] = programs[b], programs[a]
        return "".join(programs)


def _parse_move(token: str) -> Move:
    kind, rest = token[:1], token[1:]
    try:
        if kind == "s":
            return Move("s", int(rest))
        if kind == "x":
            a, b = rest.split("/")
            return Move("x", int(a), int(b))
        if kind == "p":
            a, b = rest.split("/")
            if len(a) != 1 or len(b) != 1:
                raise ValueError
            return Move("p", a, b)
    except ValueError:
        pass
    raise ValueError(f"malformed dance move: {token!r}")


def parse_moves(text: str) -> list[Move]:
    """Parse the comma-separated moves on the first line."""
    return [
        _parse_move(token.strip())
        for token in text.split("\n", 1)[0].split(",")
        if token.strip()
    ]


def perform(moves, line: str = LINE) -> str:
    """Perform every move once, in order."""
    for move in moves:
        line = move.apply(line)
    return line


def dance_repeated(moves, times: int = TIMES, line: str = LINE) -> str:
    """The line after dancing ``times`` times, using the cycle the dance falls into."""
    if times < 0:
        raise ValueError("times must not be negative")
    moves = list(moves)
    history: list[str] = []
    seen: dict[str, int] = {}
    state = line
    while len(history) < times:
        if state in seen:
            start = seen[state]
            period = len(history) - start
            return history[start + (times - start) % period]
        seen[state] = len(history)
        history.append(state)
        state = perform(moves, state)
    return state