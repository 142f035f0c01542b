"""A stack with a fixed capacity."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

__all__ = ["StackOverflowError", "StackUnderflowError", "BoundedStack"]

DEFAULT_CAPACITY = 5


class StackOverflowError(OverflowError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when popping or peeking an empty stack."""


class BoundedStack:
    """LIFO stack that holds at most *capacity* items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put *value* on top; raise StackOverflowError if the stack is full."""
        if self.is_full():
            raise StackOverflowError(f"Stack Overflow! Unable to push {value}")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if self.is_empty():
            raise StackUnderflowError("Stack Underflow! Unable to pop")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if self.is_empty():
            raise StackUnderflowError("Stack is empty! Nothing to peek.")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the bottom of the stack to the top."""
        return iter(self._items)

    def __str__(self) -> str:
        if self.is_empty():
            return "Stack is empty."
        return "Stack elements: " + " ".join(str(item) for item in self._items)