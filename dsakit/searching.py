"""Linear and binary search over sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

__all__ = ["linear_search", "binary_search"]


def linear_search(items: Sequence[Any], target: Any) -> int | None:
    """Return the index of the first item equal to *target*, or None."""
    return next(
        (index for index, item in enumerate(items) if item == target),
        None,
    )


def binary_search(items: Sequence[Any], target: Any) -> int | None:
    """Return an index of *target* in the ascending sequence *items*, or None.

    The halving follows the midpoint ``left + (right - left) // 2``, so when
    *target* occurs more than once the index found is the first midpoint that
    lands on it.
    """
    left, right = 0, len(items) - 1
    while left <= right:
        mid = left + (right - left) // 2
        value = items[mid]
        if value == target:
            return mid
        if value > target:
            right = mid - 1
        else:
            left = mid + 1
    return None