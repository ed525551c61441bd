"""Solvers for a month of festive programming puzzles, with a command line entry point."""

__version__ = "1.0.0"

__all__ = [
    "captcha",
    "checksum",
    "spiral",
    "passphrase",
    "jumps",
    "reallocation",
    "tower",
    "registers",
    "stream",
    "knot",
    "hexgrid",
    "pipes",
    "firewall",
    "dance",
    "spinlock",
    "duet",
    "tubes",
    "particles",
    "virus",
    "coprocessor",
    "turing",
    "cli",
]