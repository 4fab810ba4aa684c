"""Harder array problems: Pascal's triangle, frequent elements, triplets, products."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from math import comb


def pascal_row(n: int) -> list[int]:
    """Return row ``n`` of Pascal's triangle, counting from 0."""
    if n < 0:
        raise ValueError(f"row index must be non-negative, got {n}")
    return [comb(n, k) for k in range(n + 1)]


def pascal_triangle(num_rows: int) -> list[list[int]]:
    """Return the first ``num_rows`` rows of Pascal's triangle."""
    return [pascal_row(n) for n in range(max(num_rows, 0))]


def majority_third(nums: Iterable[int]) -> list[int]:
    """Return elements occurring more than ``len(nums) // 3`` times.

    Elements are listed in the order in which they pass that threshold.
    """
    values = list(nums)
    threshold = len(values) // 3
    counts: Counter[int] = Counter()
    found: list[int] = []
    for value in values:
        counts[value] += 1
        if counts[value] == threshold + 1:
            found.append(value)
    return found


def three_sum(nums: Iterable[int]) -> list[tuple[int, int, int]]:
    """Return every distinct sorted triplet of elements that sums to zero."""
    values = sorted(nums)
    triplets: list[tuple[int, int, int]] = []
    for i, first in enumerate(values):
        if i > 0 and first == values[i - 1]:
            continue
        lo, hi = i + 1, len(values) - 1
        while lo < hi:
            total = first + values[lo] + values[hi]
            if total == 0:
                triplets.append((first, values[lo], values[hi]))
                lo += 1
                hi -= 1
                while lo < hi and values[lo] == values[lo - 1]:
                    lo += 1
                while lo < hi and values[hi] == values[hi + 1]:
                    hi -= 1
            elif total < 0:
                lo += 1
            else:
                hi -= 1
    return triplets


def max_product(nums: Iterable[int]) -> int:
    """Return the largest product of a non-empty contiguous subarray."""
    values = list(nums)
    if not values:
        raise ValueError("max_product() of an empty sequence")
    high = low = best = values[0]
    for value in values[1:]:
        if value < 0:
            high, low = low, high
        high = max(value, high * value)
        low = min(value, low * value)
        best = max(best, high)
    return best