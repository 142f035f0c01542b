"""A fixed-size hash table that resolves collisions by separate chaining."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable
from typing import Any

__all__ = ["ChainedHashTable"]

DEFAULT_SIZE = 10


class ChainedHashTable:
    """Hash table with a fixed number of buckets, each a chain of entries.

    New entries go to the front of their chain, so a key inserted twice is
    found with its most recent value.
    """

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size <= 0:
            raise ValueError(f"table size must be positive, got {size}")
        self.size = size
        self._buckets: list[deque[tuple[Hashable, Any]]] = [
            deque() for _ in range(size)
        ]

    def _bucket(self, key: Hashable) -> deque[tuple[Hashable, Any]]:
        return self._buckets[hash(key) % self.size]

    def insert(self, key: Hashable, value: Any) -> None:
        """Add *key* with *value* at the front of its chain."""
        self._bucket(key).appendleft((key, value))

    def search(self, key: Hashable) -> Any:
        """Return the value stored for *key*; raise KeyError if absent."""
        for stored_key, value in self._bucket(key):
            if stored_key == key:
                return value
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        try:
            self.search(key)  # type: ignore[arg-type]
        except (KeyError, TypeError):
            return False
        return True

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)