"""Comparison sorts: selection, heap, quick and merge sort."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

__all__ = ["selection_sort", "heap_sort", "quick_sort", "merge_sort"]


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new ascending list, built by repeated minimum selection."""
    result = list(items)
    n = len(result)
    for i in range(n - 1):
        min_index = min(range(i, n), key=result.__getitem__)
        if min_index != i:
            result[i], result[min_index] = result[min_index], result[i]
    return result


def _sift_down(heap: list[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def heap_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new ascending list, sorted through a max-heap."""
    result = list(items)
    n = len(result)
    for i in range(n // 2 - 1, -1, -1):
        _sift_down(result, n, i)
    for end in range(n - 1, 0, -1):
        result[0], result[end] = result[end], result[0]
        _sift_down(result, end, 0)
    return result


def _partition(values: list[Any], low: int, high: int) -> int:
    pivot = values[high]
    boundary = low - 1
    for j in range(low, high):
        if values[j] < pivot:
            boundary += 1
            values[boundary], values[j] = values[j], values[boundary]
    values[boundary + 1], values[high] = values[high], values[boundary + 1]
    return boundary + 1


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new ascending list, sorted by quicksort with a last-element pivot."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = _partition(result, low, high)
            pending.append((low, pivot_index - 1))
            pending.append((pivot_index + 1, high))
    return result


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new ascending list, sorted by a stable top-down merge sort."""
    values = list(items)
    if len(values) <= 1:
        return values
    mid = (len(values) - 1) // 2 + 1
    return _merge(merge_sort(values[:mid]), merge_sort(values[mid:]))