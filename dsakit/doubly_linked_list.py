"""A doubly linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["DoublyLinkedList"]


@dataclass(slots=True)
class _Node:
    value: Any
    next: _Node | None = None
    prev: _Node | None = None


class DoublyLinkedList:
    """Linked list whose nodes point both forward and backward."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add *value* at the end of the list."""
        node = _Node(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def prepend(self, value: Any) -> None:
        """Add *value* at the front of the list."""
        node = _Node(value, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def remove(self, value: Any) -> None:
        """Unlink the first node holding *value*; raise ValueError if none does."""
        if self._head is None:
            raise ValueError("List is empty!")
        node = self._head
        while node is not None and node.value != value:
            node = node.next
        if node is None:
            raise ValueError(f"Node with value {value} not found.")
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
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

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def _format(self, label: str, values: Iterable[Any]) -> str:
        if self._head is None:
            return "List is empty."
        body = "".join(f"{value} <-> " for value in values)
        return f"Doubly Linked List ({label}): {body}NULL"

    def format_forward(self) -> str:
        """Render the list from head to tail."""
        return self._format("Forward", self)

    def format_backward(self) -> str:
        """Render the list from tail to head."""
        return self._format("Backward", reversed(self))