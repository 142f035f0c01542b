"""A singly linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["SinglyLinkedList"]


@dataclass(slots=True)
class _Node:
    value: Any
    next: _Node | None = None


class SinglyLinkedList:
    """Linked list of values, each node pointing to the next."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add *value* at the end of the list."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def prepend(self, value: Any) -> None:
        """Add *value* at the front of the list."""
        node = _Node(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def remove(self, value: Any) -> None:
        """Unlink the first node holding *value*; raise ValueError if none does."""
        if self._head is None:
            raise ValueError("List is empty!")
        previous: _Node | None = None
        node: _Node | None = self._head
        while node is not None and node.value != value:
            previous, node = node, node.next
        if node is None:
            raise ValueError(f"Node with value {value} not found.")
        if previous is None:
            self._head = node.next
        else:
            previous.next = node.next
        if node is self._tail:
            self._tail = previous
        self._size -= 1

    def position(self, value: Any) -> int | None:
        """Return the 1-based position of the first *value*, or None."""
        return next(
            (index for index, item in enumerate(self, start=1) if item == value),
            None,
        )

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        if self._head is None:
            return "List is empty."
        return "Linked List: " + "".join(f"{value} -> " for value in self) + "NULL"