"""Polynomials as term lists ordered by descending exponent."""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

__all__ = ["Term", "Polynomial"]


@dataclass(frozen=True)
class Term:
    """One term ``coeff * x**expo``."""

    coeff: float
    expo: int

    def __str__(self) -> str:
        return f"({self.coeff:.1f}x^{self.expo})"


class Polynomial:
    """Terms kept in descending exponent order; equal exponents are not merged on insert."""

    def __init__(self, terms: Iterable[tuple[float, int]] = ()) -> None:
        self._terms: list[Term] = []
        for coeff, expo in terms:
            self.insert(coeff, expo)

    def insert(self, coeff: float, expo: int) -> None:
        """Add a term after every existing term whose exponent is at least ``expo``."""
        position = bisect.bisect_right(self._terms, -expo, key=lambda term: -term.expo)
        self._terms.insert(position, Term(float(coeff), expo))

    def __add__(self, other: Polynomial) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        result = Polynomial()
        mine, theirs = self._terms, other._terms
        i = j = 0
        while i < len(mine) and j < len(theirs):
            a, b = mine[i], theirs[j]
            if a.expo == b.expo:
                result.insert(a.coeff + b.coeff, a.expo)
                i += 1
                j += 1
            elif a.expo > b.expo:
                result.insert(a.coeff, a.expo)
                i += 1
            else:
                result.insert(b.coeff, b.expo)
                j += 1
        for term in mine[i:] + theirs[j:]:
            result.insert(term.coeff, term.expo)
        return result

    def __iter__(self) -> Iterator[Term]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __str__(self) -> str:
        if not self._terms:
            return "empty list"
        return "+".join(str(term) for term in self._terms)

    def __repr__(self) -> str:
        pairs = [(term.coeff, term.expo) for term in self._terms]
        return f"Polynomial({pairs!r})"