"""Text patterns: a letter square, a number pyramid and a hollow diamond."""

from __future__ import annotations

import argparse


def letter_square(n: int) -> str:
    """An ``n`` by ``n`` square of consecutive letters starting from ``A``."""
    rows = []
    for i in range(n):
        letters = (chr(ord("A") + i * n + j) for j in range(n))
        rows.append("".join(f"{letter} " for letter in letters))
    return "".join(f"{row}\n" for row in rows)


def number_pyramid(n: int) -> str:
    """A centred pyramid whose row ``i`` counts up to ``i`` and back to 1."""
    rows = []
    for i in range(1, n + 1):
        rising = "".join(str(k) for k in range(1, i + 1))
        falling = "".join(str(k) for k in range(i - 1, 0, -1))
        rows.append(" " * (n - i) + rising + falling)
    return "".join(f"{row}\n" for row in rows)


def _outline(width: int) -> str:
    if width == 1:
        return "*"
    return "*" + " " * (width - 2) + "*"


def hollow_diamond(n: int) -> str:
    """The outline of a diamond drawn with ``*``, ``n`` rows to its widest."""
    rows = [" " * (n + 1 - i) + _outline(2 * i - 1) for i in range(1, n + 1)]
    rows.extend(" " * (i + 1) + _outline(2 * (n - i) - 1) for i in range(1, n))
    return "".join(f"{row}\n" for row in rows)


_PATTERNS = {
    "square": (letter_square, None),
    "pyramid": (number_pyramid, 4),
    "diamond": (hollow_diamond, 8),
}


def main(argv: list[str] | None = None) -> int:
    """Print one of the patterns; the square asks for its size if none is given."""
    parser = argparse.ArgumentParser(prog="patterns", description="Print a text pattern.")
    parser.add_argument("pattern", choices=sorted(_PATTERNS), help="pattern to print")
    parser.add_argument("n", nargs="?", type=int, help="size of the pattern")
    args = parser.parse_args(argv)
    draw, default = _PATTERNS[args.pattern]
    n = args.n if args.n is not None else default
    if n is None:
        try:
            n = int(input("Enter n: "))
        except ValueError:
            parser.error("n must be an integer")
    if n < 0:
        parser.error("n must not be negative")
    print(draw(n), end="")
    return 0