"""Tower of Hanoi move sequence."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Move:
    """Moving one disk from one peg to another."""

    disk: int
    source: str
    destination: str

    def __str__(self) -> str:
        return f"Move disk {self.disk} from {self.source} to {self.destination}"


def _moves(n: int, source: str, auxiliary: str, destination: str) -> Iterator[Move]:
    if n == 1:
        yield Move(1, source, destination)
        return
    yield from _moves(n - 1, source, destination, auxiliary)
    yield Move(n, source, destination)
    yield from _moves(n - 1, auxiliary, source, destination)


def tower_of_hanoi(
    n: int, source: str = "A", auxiliary: str = "B", destination: str = "C"
) -> Iterator[Move]:
    """Yield the moves that carry ``n`` disks from ``source`` to ``destination``."""
    if n < 1:
        raise ValueError("number of disks must be at least 1")
    return _moves(n, source, auxiliary, destination)


def main(argv: list[str] | None = None) -> int:
    """Print the moves for a number of disks given as an argument or on stdin."""
    parser = argparse.ArgumentParser(
        prog="hanoi", description="Print the Tower of Hanoi moves."
    )
    parser.add_argument("disks", nargs="?", type=int, help="number of disks")
    args = parser.parse_args(argv)
    disks = args.disks
    if disks is None:
        try:
            disks = int(input("Enter the number of disks: "))
        except ValueError:
            parser.error("number of disks must be an integer")
    if disks < 1:
        parser.error("number of disks must be at least 1")
    print(f"The sequence of moves to solve the Tower of Hanoi for {disks} disks is:")
    for move in tower_of_hanoi(disks):
        print(move)
    return 0