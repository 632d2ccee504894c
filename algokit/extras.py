"""A number-guessing game, triangular masking, process ids and FCFS scheduling."""

from __future__ import annotations

import os
import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

__all__ = [
    "MATCH",
    "LOW",
    "HIGH",
    "GuessGame",
    "upper_triangle",
    "process_ids",
    "ProcessTimes",
    "fcfs_schedule",
]

MATCH = "match"
LOW = "low"
HIGH = "high"


class GuessGame:
    """Guess a secret number below 100 within a limited number of moves."""

    def __init__(
        self,
        secret: int | None = None,
        moves: int = 7,
        rng: random.Random | None = None,
    ) -> None:
        if moves < 1:
            raise ValueError("moves must be at least 1")
        if secret is None:
            secret = (rng or random.Random()).randrange(100)
        self.secret = secret
        self.remaining = moves
        self.won = False

    @property
    def over(self) -> bool:
        """True once the number was matched or the moves ran out."""
        return self.won or self.remaining == 0

    @property
    def lost(self) -> bool:
        """True if the moves ran out without a match."""
        return not self.won and self.remaining == 0

    def guess(self, number: int) -> str:
        """Use one move; return MATCH, LOW (guess too small) or HIGH (too large)."""
        if self.over:
            raise RuntimeError("the game is over")
        self.remaining -= 1
        if number == self.secret:
            self.won = True
            return MATCH
        return LOW if number < self.secret else HIGH


def upper_triangle(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Copy of a square matrix with every entry below the diagonal set to zero."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    return [
        [value if i <= j else 0 for j, value in enumerate(row)]
        for i, row in enumerate(matrix)
    ]


def process_ids() -> tuple[int, int]:
    """The current process id and the parent process id."""
    return os.getpid(), os.getppid()


@dataclass(frozen=True)
class ProcessTimes:
    """Scheduling figures for one process."""

    arrival: int
    burst: int
    turnaround: int
    waiting: int


def fcfs_schedule(processes: Iterable[tuple[int, int]]) -> list[ProcessTimes]:
    """First-come, first-served figures for ``(arrival, burst)`` pairs in order.

    Turnaround is the running total of bursts minus the arrival time; waiting
    is turnaround minus burst.
    """
    elapsed = 0
    result: list[ProcessTimes] = []
    for arrival, burst in processes:
        turnaround = elapsed + burst - arrival
        result.append(ProcessTimes(arrival, burst, turnaround, turnaround - burst))
        elapsed += burst
    return result