"""Integer calculator and temperature conversion."""

from __future__ import annotations

import argparse
import sys

__all__ = ["calculate", "convert_temperature", "main"]


def _truncating_div(dividend: int, divisor: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend >= 0) == (divisor >= 0) else -quotient


def calculate(op: str, first: int, second: int) -> int:
    """Apply ``+``, ``-``, ``*``, ``/`` or ``%`` (percentage) to two integers.

    Division truncates toward zero; ``%`` yields ``first`` percent of ``second``.
    """
    if op == "+":
        return first + second
    if op == "-":
        return first - second
    if op == "*":
        return first * second
    if op == "/":
        if second == 0:
            raise ZeroDivisionError("division by zero")
        return _truncating_div(first, second)
    if op == "%":
        return _truncating_div(first * second, 100)
    raise ValueError(f"operator is not correct: {op!r}")


def convert_temperature(value: float, scale: str) -> float:
    """Convert a Celsius value (scale ``C``) to Fahrenheit or a Fahrenheit value (``F``) to Celsius."""
    if scale == "C":
        return value * 9 / 5 + 32
    if scale == "F":
        return (value - 32) * 5 / 9
    raise ValueError(f"unknown temperature scale: {scale!r}")


def _format_calculation(op: str, first: int, second: int, result: int) -> str:
    if op == "%":
        return f"({first} /100)* {second} = {result}"
    return f"{first} {op} {second} = {result}"


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(prog="algokit-calc", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)

    calc = commands.add_parser("calc", help="apply an operator to two integers")
    calc.add_argument("op", help="one of + - * / %%")
    calc.add_argument("first", type=int)
    calc.add_argument("second", type=int)

    temp = commands.add_parser("temp", help="convert a temperature")
    temp.add_argument("scale", help="C for a Celsius value, F for a Fahrenheit value")
    temp.add_argument("value", type=float)

    args = parser.parse_args(argv)

    if args.command == "calc":
        try:
            result = calculate(args.op, args.first, args.second)
        except ValueError:
            print("Error! operator is not correct")
            return 1
        except ZeroDivisionError:
            print("Error! division by zero", file=sys.stderr)
            return 1
        print(_format_calculation(args.op, args.first, args.second, result))
        return 0

    try:
        converted = convert_temperature(args.value, args.scale)
    except ValueError:
        print("Error! enter the correct letter")
        return 1
    if args.scale == "C":
        print(f"The temperature in Fahrenheit is: {converted:.2f}°F")
    else:
        print(f"The temperature in Celcius is: {converted:.2f}°C")
    return 0


if __name__ == "__main__":
    sys.exit(main())