"""A four-operation calculator and a banknote counter."""

from __future__ import annotations

import argparse
import sys

NOTE_VALUES = (100, 50, 20, 1)


class InvalidOperatorError(ValueError):
    """Raised when a calculator operation is not one of + - * /."""


def _truncating_divide(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def calculate(a: int, b: int, operation: str) -> int:
    """Apply ``operation`` to ``a`` and ``b``; division truncates toward zero."""
    if operation == "+":
        return a + b
    if operation == "-":
        return a - b
    if operation == "*":
        return a * b
    if operation == "/":
        if b == 0:
            raise ZeroDivisionError("division by zero")
        return _truncating_divide(a, b)
    raise InvalidOperatorError(f"invalid operator {operation!r}")


def count_notes(amount: int) -> dict[int, int]:
    """Return the fewest notes of 100, 50, 20 and 1 making ``amount``, omitting zero counts."""
    counts: dict[int, int] = {}
    remaining = max(amount, 0)
    for value in NOTE_VALUES:
        count, remaining = divmod(remaining, value)
        if count:
            counts[value] = count
    return counts


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="drillbook-cashier")
    commands = parser.add_subparsers(dest="command", required=True)

    calc = commands.add_parser("calc", help="apply + - * or / to two integers")
    calc.add_argument("a", type=int)
    calc.add_argument("b", type=int)
    calc.add_argument("operation")

    notes = commands.add_parser("notes", help="split an amount into the fewest notes")
    notes.add_argument("amount", type=int)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the calculator or the note counter from the command line."""
    args = _build_parser().parse_args(argv)
    if args.command == "calc":
        try:
            result = calculate(args.a, args.b, args.operation)
        except (InvalidOperatorError, ZeroDivisionError) as error:
            print(f"error: {error}", file=sys.stderr)
            return 1
        print(f"The result is:{result}")
        return 0

    print("Minimum notes required:")
    for value, count in count_notes(args.amount).items():
        print(f"{value} notes: {count}")
    return 0