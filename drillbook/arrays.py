"""Small exercises on sequences of integers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import reduce
from operator import xor


def swap_alternate(values: Sequence[int]) -> list[int]:
    """Return a copy with each neighbouring pair swapped; a trailing odd item stays put."""
    result = list(values)
    result[0:len(result) - 1:2], result[1::2] = result[1::2], result[0:len(result) - 1:2]
    return result


def _check_index(index: int, size: int) -> None:
    if not 0 <= index < size:
        raise IndexError(f"index {index} out of range for {size} items")


def delete_at(values: Sequence[int], index: int) -> list[int]:
    """Return a copy with the item at ``index`` removed."""
    _check_index(index, len(values))
    return [*values[:index], *values[index + 1:]]


def insert_at(values: Sequence[int], index: int, value: int) -> list[int]:
    """Return a copy with ``value`` placed at ``index``, shifting later items right."""
    if not 0 <= index <= len(values):
        raise IndexError(f"index {index} out of range for insertion into {len(values)} items")
    return [*values[:index], value, *values[index:]]


def linear_search(values: Iterable[int], key: int) -> bool:
    """Tell whether ``key`` occurs in ``values``, scanning front to back."""
    return any(item == key for item in values)


def max_min(values: Iterable[int]) -> tuple[int, int]:
    """Return the largest and the smallest item as ``(maximum, minimum)``."""
    items = list(values)
    if not items:
        raise ValueError("max_min() needs at least one value")
    return max(items), min(items)


def reverse(values: Sequence[int]) -> list[int]:
    """Return the items in reverse order."""
    return list(reversed(values))


def array_sum(values: Iterable[int]) -> int:
    """Return the sum of the items."""
    return sum(values)


def format_values(values: Iterable[int]) -> str:
    """Render the items separated by single spaces."""
    return " ".join(str(item) for item in values)


def find_unique(values: Iterable[int]) -> int:
    """Return the one item that appears once when every other appears twice."""
    return reduce(xor, values, 0)


def find_duplicate(values: Sequence[int]) -> int:
    """Return the repeated item of a list holding 1..n-1 plus one duplicate."""
    return reduce(xor, values, 0) ^ reduce(xor, range(1, len(values)), 0)


def sorted_intersection(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Return the common items of two ascending sequences, duplicates matched pairwise."""
    result: list[int] = []
    left = iter(first)
    right = iter(second)
    a = next(left, None)
    b = next(right, None)
    while a is not None and b is not None:
        if a == b:
            result.append(a)
            a = next(left, None)
            b = next(right, None)
        elif a < b:
            a = next(left, None)
        else:
            b = next(right, None)
    return result