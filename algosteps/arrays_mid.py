"""Intermediate array and matrix problems."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import zip_longest

from algosteps.sorting import selection_sort

_MISSING = object()


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return indices ``[i, j]`` of two distinct elements summing to ``target``.

    The pair with the smallest ``i``, then the smallest ``j``, is chosen.
    An empty list is returned when no pair exists.
    """
    first_positions: dict[int, list[int]] = {}
    for index, value in enumerate(nums):
        positions = first_positions.setdefault(value, [])
        if len(positions) < 2:
            positions.append(index)
    for i, value in enumerate(nums):
        for j in first_positions.get(target - value, []):
            if j != i:
                return [i, j]
    return []


def sort_colors(nums: Iterable[int]) -> list[int]:
    """Return ``nums`` in ascending order."""
    return selection_sort(nums)


def majority_element(nums: Iterable[int]) -> int:
    """Return the most frequent element; ties go to the smallest value."""
    counts = Counter(nums)
    if not counts:
        raise ValueError("majority_element() of an empty sequence")
    return min(counts, key=lambda value: (-counts[value], value))


def max_subarray_sum(nums: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray."""
    best: int | None = None
    running = 0
    for value in nums:
        running += value
        best = running if best is None else max(best, running)
        running = max(running, 0)
    if best is None:
        raise ValueError("max_subarray_sum() of an empty sequence")
    return best


def max_profit(prices: Iterable[int]) -> int:
    """Return the best profit from one buy followed by one sale, or 0."""
    lowest: int | None = None
    profit = 0
    for price in prices:
        lowest = price if lowest is None else min(lowest, price)
        profit = max(profit, price - lowest)
    return profit


def alternate_signs(nums: Iterable[int]) -> list[int]:
    """Interleave positives and non-positives, starting with a positive.

    Each group keeps its original order; leftovers of the longer group follow.
    """
    values = list(nums)
    positives = [v for v in values if v > 0]
    others = [v for v in values if v <= 0]
    return [
        value
        for pair in zip_longest(positives, others, fillvalue=_MISSING)
        for value in pair
        if value is not _MISSING
    ]


def next_permutation(nums: Iterable[int]) -> list[int]:
    """Return the next lexicographic permutation, wrapping to the smallest."""
    values = list(nums)
    pivot = len(values) - 2
    while pivot >= 0 and values[pivot] >= values[pivot + 1]:
        pivot -= 1
    if pivot >= 0:
        successor = len(values) - 1
        while values[successor] <= values[pivot]:
            successor -= 1
        values[pivot], values[successor] = values[successor], values[pivot]
    values[pivot + 1:] = reversed(values[pivot + 1:])
    return values


def leaders(nums: Sequence[int]) -> list[int]:
    """Return the elements strictly greater than every element to their right."""
    found: list[int] = []
    highest: int | None = None
    for value in reversed(nums):
        if highest is None or value > highest:
            found.append(value)
            highest = value
    found.reverse()
    return found


def longest_consecutive(nums: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive integers present."""
    present = set(nums)
    best = 0
    for value in present:
        if value - 1 in present:
            continue
        length = 1
        while value + length in present:
            length += 1
        best = max(best, length)
    return best


def set_zeroes(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return a copy where every row and column holding a zero is all zeros."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    return [
        [0 if i in zero_rows or j in zero_cols else value for j, value in enumerate(row)]
        for i, row in enumerate(matrix)
    ]


def rotate_matrix(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the matrix rotated a quarter turn clockwise."""
    return [list(row) for row in zip(*matrix[::-1])]


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements read clockwise from the top-left corner inwards."""
    remaining = [list(row) for row in matrix]
    result: list[int] = []
    while remaining:
        result.extend(remaining.pop(0))
        remaining = [list(row) for row in zip(*remaining)][::-1]
    return result


def count_subarrays_with_sum(nums: Iterable[int], k: int) -> int:
    """Return how many contiguous subarrays sum to ``k``."""
    seen: Counter[int] = Counter({0: 1})
    running = 0
    count = 0
    for value in nums:
        running += value
        count += seen[running - k]
        seen[running] += 1
    return count