"""Fixed-capacity queues and a fixed-capacity stack."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

DEFAULT_CAPACITY = 5


class ContainerFullError(OverflowError):
    """Raised when a value is added to a container with no room left."""


class ContainerEmptyError(IndexError):
    """Raised when a value is taken from or looked up in an empty container."""


def _check_capacity(capacity: int) -> int:
    if capacity < 1:
        raise ValueError(f"capacity must be at least 1, got {capacity}")
    return capacity


class LinearQueue:
    """A queue over a fixed row of slots that are not reused until it empties.

    Each enqueue takes the next slot; dequeuing does not free it. Only when
    the last value leaves does the queue start again from the first slot.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = _check_capacity(capacity)
        self._values: deque[int] = deque()
        self._slots_used = 0

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._values)!r}, capacity={self.capacity})"

    def enqueue(self, value: int) -> None:
        """Add ``value`` at the rear; raise if every slot has been taken."""
        if self._slots_used == self.capacity:
            raise ContainerFullError(f"queue is full, can't insert {value}")
        self._values.append(value)
        self._slots_used += 1

    def dequeue(self) -> int:
        """Remove and return the front value."""
        if not self._values:
            raise ContainerEmptyError("queue is empty")
        value = self._values.popleft()
        if not self._values:
            self._slots_used = 0
        return value

    def peek(self) -> int:
        """Return the front value without removing it."""
        if not self._values:
            raise ContainerEmptyError("queue is empty")
        return self._values[0]

    def items(self) -> tuple[int, ...]:
        """Return the values from front to rear."""
        return tuple(self._values)


class CircularQueue:
    """A queue over a ring of slots, holding at most ``capacity`` values."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = _check_capacity(capacity)
        self._values: deque[int] = deque()

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._values)!r}, capacity={self.capacity})"

    def enqueue(self, value: int) -> None:
        """Add ``value`` at the rear; raise if the ring is full."""
        if len(self._values) == self.capacity:
            raise ContainerFullError(f"queue is full, can't insert {value}")
        self._values.append(value)

    def dequeue(self) -> int:
        """Remove and return the front value."""
        if not self._values:
            raise ContainerEmptyError("queue is empty")
        return self._values.popleft()

    def peek(self) -> int:
        """Return the front value without removing it."""
        if not self._values:
            raise ContainerEmptyError("queue is empty")
        return self._values[0]

    def items(self) -> tuple[int, ...]:
        """Return the values from front to rear."""
        return tuple(self._values)


class Stack:
    """A last-in first-out stack holding at most ``capacity`` values."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = _check_capacity(capacity)
        self._values: list[int] = []

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[int]:
        return reversed(self._values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._values!r}, capacity={self.capacity})"

    def push(self, value: int) -> None:
        """Put ``value`` on top; raise on overflow."""
        if len(self._values) == self.capacity:
            raise ContainerFullError(f"stack overflow, cannot push {value}")
        self._values.append(value)

    def pop(self) -> int:
        """Remove and return the top value; raise on underflow."""
        if not self._values:
            raise ContainerEmptyError("stack underflow, no element to pop")
        return self._values.pop()

    def peek(self) -> int:
        """Return the top value without removing it."""
        if not self._values:
            raise ContainerEmptyError("stack is empty")
        return self._values[-1]

    def items(self) -> tuple[int, ...]:
        """Return the values from top to bottom."""
        return tuple(reversed(self._values))