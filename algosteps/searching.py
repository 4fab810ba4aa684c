"""Binary-search problems on sorted and rotated sequences, plus integer roots."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence
from math import isqrt


def binary_search(nums: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in the ascending sequence ``nums``.

    Raises ValueError when ``target`` is absent.
    """
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    raise ValueError(f"{target!r} not found")


def lower_bound(nums: Sequence[int], target: int) -> int:
    """Return the first index whose element is not less than ``target``."""
    return bisect_left(nums, target)


def upper_bound(nums: Sequence[int], target: int) -> int:
    """Return the first index whose element is greater than ``target``."""
    return bisect_right(nums, target)


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return an index of ``target``, or the index where it would be inserted."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return low


def count_occurrences(nums: Sequence[int], target: int) -> int:
    """Return how many times ``target`` occurs in the ascending sequence ``nums``."""
    return bisect_right(nums, target) - bisect_left(nums, target)


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a rotated ascending sequence of distinct values.

    Returns -1 when ``target`` is absent.
    """
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if nums[mid] == target:
            return mid
        if nums[low] <= nums[mid]:
            if nums[low] <= target < nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] < target <= nums[high]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def contains_rotated(nums: Sequence[int], target: int) -> bool:
    """Return True if ``target`` occurs in a rotated ascending sequence that may repeat values."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if nums[mid] == target:
            return True
        if nums[low] == nums[mid] == nums[high]:
            low += 1
            high -= 1
        elif nums[low] <= nums[mid]:
            if nums[low] <= target < nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] < target <= nums[high]:
            low = mid + 1
        else:
            high = mid - 1
    return False


def _min_index_rotated(nums: Sequence[int]) -> int:
    if not nums:
        raise ValueError("empty sequence")
    low, high = 0, len(nums) - 1
    while low < high:
        mid = low + (high - low) // 2
        if nums[mid] > nums[high]:
            low = mid + 1
        else:
            high = mid
    return low


def find_min_rotated(nums: Sequence[int]) -> int:
    """Return the smallest element of a rotated ascending sequence of distinct values."""
    return nums[_min_index_rotated(nums)]


def find_rotation_index(nums: Sequence[int]) -> int:
    """Return how many places an ascending sequence of distinct values was rotated.

    This is the index at which its smallest element now sits.
    """
    return _min_index_rotated(nums)


def single_non_duplicate(nums: Sequence[int]) -> int:
    """Return the one element of a sorted sequence that is not part of an adjacent pair."""
    if not nums:
        raise ValueError("single_non_duplicate() of an empty sequence")
    low, high = 0, len(nums) - 1
    while low < high:
        mid = low + (high - low) // 2
        if mid % 2 == 1:
            mid -= 1
        if nums[mid] == nums[mid + 1]:
            low = mid + 2
        else:
            high = mid
    return nums[low]


def floor_sqrt(n: int) -> int:
    """Return the largest integer whose square does not exceed ``n``."""
    if n < 0:
        raise ValueError(f"square root of a negative number: {n}")
    return isqrt(n)


def nth_root(n: int, m: int) -> int:
    """Return the integer ``r`` with ``r ** m == n``, or -1 if there is none."""
    if m < 1:
        raise ValueError(f"root degree must be positive, got {m}")
    low, high = 0, n
    while low <= high:
        mid = low + (high - low) // 2
        power = mid**m
        if power == n:
            return mid
        if power > n:
            high = mid - 1
        else:
            low = mid + 1
    return -1