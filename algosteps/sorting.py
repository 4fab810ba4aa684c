"""Classic comparison sorts. Each returns a new sorted list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def selection_sort(items: Iterable[Any]) -> list:
    """Sort by repeatedly moving the smallest remaining element forward."""
    result = list(items)
    for start in range(len(result)):
        smallest = min(range(start, len(result)), key=result.__getitem__)
        result[start], result[smallest] = result[smallest], result[start]
    return result


def bubble_sort(items: Iterable[Any]) -> list:
    """Sort by swapping adjacent out-of-order pairs, pass after pass."""
    result = list(items)
    for done in range(len(result)):
        for j in range(len(result) - 1 - done):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def insertion_sort(items: Iterable[Any]) -> list:
    """Sort by inserting each element into the sorted prefix before it."""
    result: list = []
    for key in items:
        position = len(result)
        while position > 0 and result[position - 1] > key:
            position -= 1
        result.insert(position, key)
    return result


def _merge(left: list, right: list) -> list:
    merged = []
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


def merge_sort(items: Iterable[Any]) -> list:
    """Stable top-down merge sort."""
    values = list(items)
    if len(values) <= 1:
        return values
    mid = (len(values) - 1) // 2 + 1
    return _merge(merge_sort(values[:mid]), merge_sort(values[mid:]))