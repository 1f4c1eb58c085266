"""Text patterns of stars, numbers and letters, drawn row by row."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator
from itertools import count

PatternFn = Callable[[int], Iterator[str]]

_PATTERNS: dict[int, PatternFn] = {}


def _pattern(number: int) -> Callable[[PatternFn], PatternFn]:
    def register(fn: PatternFn) -> PatternFn:
        _PATTERNS[number] = fn
        return fn

    return register


def _letter(offset: int) -> str:
    return chr(ord("A") + offset)


def _spaced(items) -> str:
    """Each item followed by one space."""
    return "".join(f"{item} " for item in items)


def _rows(n: int) -> range:
    return range(1, n + 1)


@_pattern(1)
def _square_stars(n: int) -> Iterator[str]:
    for _ in _rows(n):
        yield "*" * n


@_pattern(2)
def _square_row_numbers(n: int) -> Iterator[str]:
    for row in _rows(n):
        yield _spaced([row] * n)


@_pattern(3)
def _square_column_numbers(n: int) -> Iterator[str]:
    for _ in _rows(n):
        yield _spaced(_rows(n))


@_pattern(4)
def _square_descending_columns(n: int) -> Iterator[str]:
    for _ in _rows(n):
        yield _spaced(range(n, 0, -1))


@_pattern(5)
def _square_counting(n: int) -> Iterator[str]:
    counter = count(1)
    for _ in _rows(n):
        yield _spaced(next(counter) for _ in range(n))


@_pattern(6)
def _triangle_stars(n: int) -> Iterator[str]:
    for row in _rows(n):
        yield "* " * row


@_pattern(7)
def _triangle_row_numbers(n: int) -> Iterator[str]:
    for row in _rows(n):
        yield _spaced([row] * row)


@_pattern(8)
def _triangle_counting(n: int) -> Iterator[str]:
    counter = count(1)
    for row in _rows(n):
        yield _spaced(next(counter) for _ in range(row))


@_pattern(9)
def _triangle_from_row(n: int) -> Iterator[str]:
    for row in _rows(n):
        yield _spaced(range(row, 2 * row))


@_pattern(10)
def _triangle_descending(n: int) -> Iterator[str]:
    for row in _rows(n):
        yield _spaced(range(row, 0, -1))


@_pattern(11)
def _square_row_letters(n: int) -> Iterator[str]:
    for row in _rows(n):
        yield _spaced([_letter(row - 1)] * n)


@_pattern(12)
def _square_column_letters(n: int) -> Iterator[str]:
    for _ in _rows(n):
        yield _spaced(_letter(col - 1) for col in _rows(n))


@_pattern(13)
def _square_counting_letters(n: int) -> Iterator[str]:
    counter = count(0)
    for _ in _rows(n):
        yield _spaced(_letter(next(counter)) for _ in range(n))


@_pattern(14)
def _square_shifted_letters(n: int) -> Iterator[str]:
    for row in _rows(n):
        yield _spaced(_letter(row + col - 2) for col in _rows(n))


@_pattern(15)
def _triangle_row_letters(n: int) -> Iterator[str]:
    for row in _rows(n):
        yield _spaced([_letter(row - 1)] * row)


@_pattern(16)
def _triangle_counting_letters(n: int) -> Iterator[str]:
    counter = count(0)
    for row in _rows(n):
        yield _spaced(_letter(next(counter)) for _ in range(row))


@_pattern(17)
def _triangle_shifted_letters(n: int) -> Iterator[str]:
    for row in _rows(n):
        yield _spaced(_letter(row + col - 2) for col in _rows(row))


@_pattern(18)
def _triangle_tail_letters(n: int) -> Iterator[str]:
    for row in _rows(n):
        start = n - row
        yield _spaced(_letter(start + col) for col in range(row))


@_pattern(19)
def _right_aligned_stars(n: int) -> Iterator[str]:
    for row in _rows(n):
        yield " " * (n - row) + "*" * row


@_pattern(20)
def _shrinking_stars(n: int) -> Iterator[str]:
    for row in _rows(n):
        yield "*" * (n - row + 1)


@_pattern(21)
def _right_aligned_shrinking_stars(n: int) -> Iterator[str]:
    for row in _rows(n):
        yield " " * (row - 1) + "*" * (n - row + 1)


@_pattern(22)
def _right_aligned_shrinking_numbers(n: int) -> Iterator[str]:
    for row in _rows(n):
        yield "  " * (row - 1) + _spaced([row] * (n - row + 1))


@_pattern(23)
def _right_aligned_row_numbers(n: int) -> Iterator[str]:
    for row in _rows(n):
        yield "  " * (n - row) + _spaced([row] * row)


@_pattern(24)
def _right_aligned_tails(n: int) -> Iterator[str]:
    for row in _rows(n):
        yield "  " * (row - 1) + _spaced(range(row, n + 1))


@_pattern(25)
def _number_pyramid(n: int) -> Iterator[str]:
    for row in _rows(n):
        rising = "".join(str(col) for col in _rows(row))
        falling = "".join(str(col) for col in range(row - 1, 0, -1))
        yield " " * (n - row) + rising + falling


@_pattern(26)
def _number_butterfly(n: int) -> Iterator[str]:
    for row in _rows(n):
        width = n - row + 1
        rising = "".join(str(col) for col in _rows(width))
        falling = "".join(str(col) for col in range(width, 0, -1))
        yield rising + "*" * ((row - 1) * 2) + falling


@_pattern(27)
def _square_countdown(n: int) -> Iterator[str]:
    counter = count(n * n, -1)
    for _ in _rows(n):
        yield "".join(str(next(counter)) for _ in range(n))


def available_patterns() -> tuple[int, ...]:
    """Return the numbers of all known patterns in ascending order."""
    return tuple(sorted(_PATTERNS))


def pattern_lines(number: int, rows: int) -> list[str]:
    """Return the lines of pattern ``number`` drawn with ``rows`` rows."""
    try:
        draw = _PATTERNS[number]
    except KeyError:
        raise ValueError(f"unknown pattern {number}") from None
    return list(draw(rows))


def render(number: int, rows: int) -> str:
    """Return pattern ``number`` as text, each line ended by a newline."""
    return "".join(f"{line}\n" for line in pattern_lines(number, rows))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="drillbook-patterns", description="draw a text pattern")
    parser.add_argument("number", type=int, nargs="?", help="pattern number")
    parser.add_argument("rows", type=int, nargs="?", help="number of rows")
    parser.add_argument("--list", action="store_true", help="list the pattern numbers")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Draw a pattern chosen on the command line."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.list:
        print(" ".join(str(number) for number in available_patterns()))
        return 0
    if args.number is None or args.rows is None:
        parser.error("a pattern number and a row count are required")
    try:
        text = render(args.number, args.rows)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(text)
    return 0