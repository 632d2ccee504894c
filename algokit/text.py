"""String algorithms: subsequences, brackets, case toggling, shifting and segmentation."""

from __future__ import annotations

import functools
import os
from collections.abc import Iterable

__all__ = [
    "KEYWORDS",
    "DEFAULT_DICTIONARY",
    "lcs_length",
    "is_balanced",
    "toggle_case",
    "shift_encrypt",
    "write_keywords",
    "count_lines",
    "word_break",
]

KEYWORDS: tuple[str, ...] = (
    "extern", "return", "union", "const", "float", "short",
    "auto", "double", "int", "struct", "break", "else", "long",
    "goto", "sizeof", "voltile", "do", "if", "static", "while",
    "unsigned", "continue", "for", "signed", "void", "default",
    "switch", "case", "enum", "register", "typedef", "char",
)

DEFAULT_DICTIONARY: frozenset[str] = frozenset(
    {
        "mobile", "samsung", "sam", "sung", "man", "mango", "icecream",
        "and", "go", "i", "like", "ice", "cream",
    }
)

_OPENERS = "([{"
_CLOSER_TO_OPENER = {")": "(", "]": "[", "}": "{"}


def lcs_length(first: str, second: str) -> int:
    """Length of the longest common subsequence of two sequences."""
    previous = [0] * (len(second) + 1)
    for a in first:
        current = [0]
        for j, b in enumerate(second):
            if a == b:
                current.append(previous[j] + 1)
            else:
                current.append(max(previous[j + 1], current[j]))
        previous = current
    return previous[-1]


def is_balanced(expression: str) -> bool:
    """Check that every closing bracket matches the innermost open one.

    A character that is not an opening bracket fails the check when no
    bracket is open. Brackets still open at the end are not reported.
    """
    stack: list[str] = []
    for ch in expression:
        if ch in _OPENERS:
            stack.append(ch)
            continue
        if not stack:
            return False
        opener = _CLOSER_TO_OPENER.get(ch)
        if opener is not None:
            if stack[-1] != opener:
                return False
            stack.pop()
    return True


def toggle_case(text: str) -> str:
    """Swap the case of ASCII letters, leaving everything else as it is."""
    return "".join(
        ch.swapcase() if ch.isascii() and ch.isalpha() else ch for ch in text
    )


def shift_encrypt(text: str) -> str:
    """Replace every character with the one whose code point follows it."""
    return "".join(chr(ord(ch) + 1) for ch in text)


def write_keywords(path: str | os.PathLike[str]) -> None:
    """Write the keyword list to ``path``, one keyword per line."""
    with open(path, "w", encoding="utf-8", newline="\n") as handle:
        for keyword in KEYWORDS:
            handle.write(keyword)
            handle.write("\n")


def count_lines(path: str | os.PathLike[str]) -> int:
    """Number of newline characters in the file at ``path``."""
    with open(path, "rb") as handle:
        return sum(chunk.count(b"\n") for chunk in iter(lambda: handle.read(65536), b""))


def word_break(text: str, dictionary: Iterable[str] | None = None) -> bool:
    """True if ``text`` splits into a sequence of dictionary words."""
    words = DEFAULT_DICTIONARY if dictionary is None else frozenset(dictionary)
    length = len(text)

    @functools.lru_cache(maxsize=None)
    def can_split(start: int) -> bool:
        if start == length:
            return True
        return any(
            text[start:end] in words and can_split(end)
            for end in range(start + 1, length + 1)
        )

    return can_split(0)