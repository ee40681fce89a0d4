"""Merge sort and quick sort returning new sorted lists."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    li = ri = 0
    while li < len(left) and ri < len(right):
        if left[li] < right[ri]:
            merged.append(left[li])
            li += 1
        else:
            merged.append(right[ri])
            ri += 1
    merged.extend(left[li:])
    merged.extend(right[ri:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list with the items in ascending order, by merge sort."""
    values = list(items)
    if len(values) <= 1:
        return values
    mid = (len(values) - 1) // 2 + 1
    return _merge(merge_sort(values[:mid]), merge_sort(values[mid:]))


def _partition(values: list[Any], low: int, high: int) -> int:
    pivot = values[low]
    i, j = low, high
    while i < j:
        while values[i] <= pivot and i <= high - 1:
            i += 1
        while values[j] > pivot and j >= low + 1:
            j -= 1
        if i < j:
            values[i], values[j] = values[j], values[i]
    values[low], values[j] = values[j], values[low]
    return j


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list with the items in ascending order, by quick sort.

    The first element of each range is the pivot.
    """
    values = list(items)
    pending = [(0, len(values) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _partition(values, low, high)
            pending.append((low, split - 1))
            pending.append((split + 1, high))
    return values