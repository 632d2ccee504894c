"""Towers of Hanoi move generation."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from dataclasses import dataclass

__all__ = ["Move", "hanoi_moves", "main"]


@dataclass(frozen=True)
class Move:
    """One disk moved from one peg to another."""

    disk: int
    source: str
    target: str

    def __str__(self) -> str:
        return f"Move disk {self.disk} from peg {self.source} to peg {self.target}"


def hanoi_moves(
    disks: int, source: str = "A", target: str = "C", spare: str = "B"
) -> Iterator[Move]:
    """Yield the moves that carry ``disks`` disks from ``source`` to ``target``."""
    if disks < 0:
        raise ValueError("number of disks must not be negative")
    if disks == 0:
        return
    yield from hanoi_moves(disks - 1, source, spare, target)
    yield Move(disks, source, target)
    yield from hanoi_moves(disks - 1, spare, target, source)


def main(argv: list[str] | None = None) -> int:
    """Print the moves for a tower of the given height."""
    parser = argparse.ArgumentParser(prog="algokit-hanoi", description=__doc__)
    parser.add_argument("disks", type=int, help="number of disks")
    parser.add_argument("--source", default="A", help="name of the first tower")
    parser.add_argument("--spare", default="B", help="name of the second tower")
    parser.add_argument("--target", default="C", help="name of the third tower")
    args = parser.parse_args(argv)
    try:
        for move in hanoi_moves(args.disks, args.source, args.target, args.spare):
            print(move)
    except ValueError as exc:
        print(f"Error! {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())