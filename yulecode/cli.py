"""Command line entry point: solve one puzzle from a file, stdin or a value."""

import argparse
import sys
from pathlib import Path

from yulecode.captcha import halfway_captcha
from yulecode.checksum import divisible_checksum, parse_rows, range_checksum
from yulecode.coprocessor import count_multiplications
from yulecode.dance import dance_repeated, parse_moves
from yulecode.duet import parse_program, recover_frequency, run_pair
from yulecode.firewall import parse_firewall, severity, smallest_delay
from yulecode.hexgrid import final_and_furthest
from yulecode.jumps import count_steps, parse_offsets
from yulecode.knot import count_regions, first_two_product, knot_hash
from yulecode.particles import closest_particle, parse_particles, surviving_particles
from yulecode.passphrase import count_valid
from yulecode.pipes import count_groups, group_of, parse_pipes
from yulecode.reallocation import loop_size
from yulecode.registers import largest_value
from yulecode.spinlock import value_after
from yulecode.spiral import first_value_reaching, spiral_distance
from yulecode.stream import scan_stream
from yulecode.tower import find_bottom, find_imbalances, parse_tower
from yulecode.tubes import follow_path, parse_diagram
from yulecode.turing import diagnostic_checksum, parse_blueprint
from yulecode.virus import count_infections, parse_infected


def _first_line(text: str) -> str:
    return text.split("\n", 1)[0].strip()


def _tower(text: str) -> str:
    programs = parse_tower(text)
    bottom = find_bottom(programs)
    lines = [bottom]
    for _, children in find_imbalances(programs, bottom):
        lines.append("".join(f"[{total} - {own}]" for _, total, own in children))
    return "\n".join(lines)


def _hex_walk(text: str) -> str:
    final, furthest = final_and_furthest(text)
    return f"{final}\nmax={furthest}"


def _pair(text: str) -> str:
    result = run_pair(parse_program(text))
    lines = [
        " ".join(f"{name}={value}" for name, value in registers.items())
        for registers in result.registers
    ]
    lines.append("positions={} {}".format(*result.positions))
    lines.append("sent={} {}".format(*result.sent))
    return "\n".join(lines)


def _recover(text: str):
    return recover_frequency(parse_program(text))


_FILE_PUZZLES = {
    "1": halfway_captcha,
    "2": lambda text: range_checksum(parse_rows(text)),
    "2b": lambda text: divisible_checksum(parse_rows(text)),
    "4b": count_valid,
    "5": lambda text: count_steps(parse_offsets(text)),
    "6b": lambda text: loop_size(int(part) for part in text.split()),
    "7": _tower,
    "8": largest_value,
    "9b": lambda text: scan_stream(text).garbage,
    "10": lambda text: first_two_product(
        int(part) for part in _first_line(text).split(",") if part.strip()
    ),
    "10b": lambda text: knot_hash(_first_line(text)),
    "11": lambda text: final_and_furthest(text)[0],
    "11b": _hex_walk,
    "12": lambda text: len(group_of(parse_pipes(text), 0)),
    "12b": lambda text: count_groups(parse_pipes(text)),
    "13": lambda text: severity(parse_firewall(text)),
    "13b": lambda text: smallest_delay(parse_firewall(text)),
    "16b": lambda text: dance_repeated(parse_moves(text)),
    "18": _recover,
    "18b": _pair,
    "19": lambda text: follow_path(parse_diagram(text)),
    "20": lambda text: closest_particle(parse_particles(text)),
    "20b": lambda text: surviving_particles(parse_particles(text)),
    "22": lambda text: count_infections(parse_infected(text)),
    "23": count_multiplications,
    "25": lambda text: diagnostic_checksum(parse_blueprint(text)),
}

_VALUE_PUZZLES = {
    "3": lambda value: spiral_distance(int(value)),
    "3b": lambda value: first_value_reaching(int(value)),
    "14b": count_regions,
    "17": lambda value: value_after(int(value)),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yulecode",
        description="Solve one puzzle. File puzzles read INPUT as a path "
        "(stdin when absent or '-'); value puzzles take INPUT itself.",
    )
    parser.add_argument("puzzle", choices=[*_FILE_PUZZLES, *_VALUE_PUZZLES])
    parser.add_argument("input", nargs="?")
    return parser


def _read(source) -> str:
    if source is None or source == "-":
        return sys.stdin.read()
    return Path(source).read_text()


def main(argv=None) -> int:
    """Run the chosen puzzle and print its answer."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.puzzle in _VALUE_PUZZLES and args.input is None:
        parser.error(f"puzzle {args.puzzle} needs a value")
    try:
        if args.puzzle in _VALUE_PUZZLES:
            answer = _VALUE_PUZZLES[args.puzzle](args.input)
        else:
            answer = _FILE_PUZZLES[args.puzzle](_read(args.input))
    except (OSError, ValueError) as error:
        print(f"yulecode: {error}", file=sys.stderr)
        return 1
    if answer is not None:
        print(answer)
    return 0


if __name__ == "__main__":
    sys.exit(main())