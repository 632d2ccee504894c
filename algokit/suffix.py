"""Suffix arrays by prefix doubling and longest-common-prefix arrays by Kasai's method."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise

__all__ = ["suffix_array", "lcp_array"]


def suffix_array(text: str) -> list[int]:
    """Start positions of the suffixes of ``text`` in sorted order."""
    n = len(text)
    if n == 0:
        return []
    rank = [ord(ch) for ch in text]
    order = list(range(n))
    step = 1
    while True:
        current_rank = rank

        def key(i: int, step: int = step) -> tuple[int, int]:
            following = current_rank[i + step] if i + step < n else -1
            return current_rank[i], following

        order.sort(key=key)
        new_rank = [0] * n
        for prev, cur in pairwise(order):
            new_rank[cur] = new_rank[prev] + (key(cur) != key(prev))
        rank = new_rank
        if rank[order[-1]] == n - 1:
            return order
        step *= 2


def lcp_array(text: str, suffixes: Sequence[int]) -> list[int]:
    """Common prefix length of each suffix with the next one in ``suffixes``.

    The entry for the last suffix in sorted order is 0.
    """
    n = len(suffixes)
    if sorted(suffixes) != list(range(len(text))):
        raise ValueError("suffixes is not a permutation of the text's positions")
    rank_of = [0] * n
    for rank, position in enumerate(suffixes):
        rank_of[position] = rank

    longest = [0] * n
    k = 0
    for i in range(n):
        rank = rank_of[i]
        if rank == n - 1:
            k = 0
            continue
        j = suffixes[rank + 1]
        while i + k < n and j + k < n and text[i + k] == text[j + k]:
            k += 1
        longest[rank] = k
        if k:
            k -= 1
    return longest