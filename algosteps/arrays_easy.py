"""Basic array problems: extremes, rotation, deduplication and simple searches."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Sequence
from functools import reduce
from itertools import groupby
from operator import xor


def largest_element(nums: Sequence[int]) -> int:
    """Return the largest element."""
    if not nums:
        raise ValueError("largest_element() of an empty sequence")
    return max(nums)


def second_largest(nums: Sequence[int]) -> int:
    """Return the last element below the maximum that exceeds its predecessor, or 0."""
    if not nums:
        raise ValueError("second_largest() of an empty sequence")
    largest = max(nums)
    found = 0
    for previous, current in zip(nums, nums[1:]):
        if largest > current > previous:
            found = current
    return found


def is_sorted_rotated(nums: Sequence[int]) -> bool:
    """Return True if ``nums`` is a rotation of a non-decreasing sequence."""
    following = list(nums[1:]) + list(nums[:1])
    drops = sum(1 for a, b in zip(nums, following) if a > b)
    return drops <= 1


def remove_duplicates(nums: Iterable[int]) -> list[int]:
    """Collapse runs of equal adjacent elements into one."""
    return [value for value, _ in groupby(nums)]


def rotate(nums: Sequence[int], k: int) -> list[int]:
    """Return ``nums`` rotated right by ``k`` positions."""
    if not nums:
        raise ValueError("cannot rotate an empty sequence")
    k %= len(nums)
    values = list(nums)
    return values[len(values) - k:] + values[: len(values) - k]


def move_zeros(nums: Iterable[int]) -> list[int]:
    """Move zeros to the end, keeping the order of the other elements."""
    values = list(nums)
    non_zero = [v for v in values if v != 0]
    return non_zero + [0] * (len(values) - len(non_zero))


def linear_search(nums: Iterable[int], target: int) -> int:
    """Return the index of the first occurrence of ``target``."""
    for index, value in enumerate(nums):
        if value == target:
            return index
    raise ValueError(f"{target!r} not found")


def merge_sorted(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Merge two sorted sequences, taking from ``first`` on ties."""
    return list(heapq.merge(first, second))


def missing_number(nums: Sequence[int]) -> int:
    """Return the number of 0..len(nums) absent from ``nums``."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)


def single_number(nums: Iterable[int]) -> int:
    """Return the element that appears an odd number of times when all others pair up."""
    return reduce(xor, nums, 0)


def subarrays_with_sum(nums: Iterable[int], target: int) -> list[list[int]]:
    """Scan ``nums`` in sorted order and collect windows that sum to ``target``.

    A window is shrunk from the front while its sum exceeds ``target``; once it
    matches, it is recorded and scanning restarts with an empty window.
    """
    window: deque[int] = deque()
    total = 0
    found: list[list[int]] = []
    for value in sorted(nums):
        window.append(value)
        total += value
        while total > target and window:
            total -= window.popleft()
        if total == target:
            found.append(list(window))
            window.clear()
            total = 0
    return found