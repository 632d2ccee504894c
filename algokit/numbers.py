"""Classic integer puzzles: digit properties, factorials, sequences and codes."""

from __future__ import annotations

import itertools
import math

__all__ = [
    "is_armstrong",
    "factorial",
    "factorial_digits",
    "fibonacci",
    "is_leap_year",
    "reverse_number",
    "is_palindrome_number",
    "is_perfect",
    "is_prime",
    "strong_sum",
    "is_strong",
    "floyds_triangle",
    "gray_code",
]


def _signed_digits(number: int) -> list[int]:
    """Decimal digits from least significant, each carrying the number's sign."""
    if number == 0:
        return []
    sign = -1 if number < 0 else 1
    return [sign * int(ch) for ch in reversed(str(abs(number)))]


def is_armstrong(number: int) -> bool:
    """True if the number equals the sum of its digits raised to the digit count."""
    digits = _signed_digits(number)
    power = len(digits)
    return sum(digit**power for digit in digits) == number


def factorial(n: int) -> int:
    """Product of 1..n; 1 for n below 1."""
    return math.prod(range(1, n + 1))


def factorial_digits(n: int) -> str:
    """Every decimal digit of n!, most significant first."""
    return str(factorial(n))


def fibonacci(count: int) -> list[int]:
    """The first ``count`` Fibonacci terms, starting from 0."""
    terms = []
    current, following = 0, 1
    for _ in range(max(count, 0)):
        terms.append(current)
        current, following = following, current + following
    return terms


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def reverse_number(n: int) -> int:
    """The number with its decimal digits reversed, keeping its sign."""
    sign = -1 if n < 0 else 1
    return sign * int(str(abs(n))[::-1])


def is_palindrome_number(n: int) -> bool:
    """True if the number reads the same reversed."""
    return reverse_number(n) == n


def is_perfect(number: int) -> bool:
    """True if the number equals the sum of its divisors up to half of it."""
    return sum(i for i in range(1, number // 2 + 1) if number % i == 0) == number


def is_prime(n: int) -> bool:
    """True if n is a prime number."""
    if n < 2:
        return False
    return all(n % divisor for divisor in range(2, math.isqrt(n) + 1))


def strong_sum(number: int) -> int:
    """Sum of the factorials of the number's decimal digits (0 for 0)."""
    total = 0
    remaining = abs(number)
    while remaining:
        remaining, digit = divmod(remaining, 10)
        total += math.factorial(digit)
    return total


def is_strong(number: int) -> bool:
    """True if the number equals the sum of the factorials of its digits."""
    return strong_sum(number) == number


def floyds_triangle(rows: int) -> list[list[int]]:
    """Rows of Floyd's triangle: consecutive integers, row k holding k of them."""
    counter = itertools.count(1)
    return [[next(counter) for _ in range(length)] for length in range(1, rows + 1)]


def gray_code(bits: int) -> list[int]:
    """The reflected binary Gray code sequence for the given bit width."""
    if bits < 0:
        raise ValueError("bit width must not be negative")
    sequence = [0]
    for bit in range(bits):
        sequence += [value | (1 << bit) for value in reversed(sequence)]
    return sequence