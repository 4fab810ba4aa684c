"""Digit tricks, palindromes, Fibonacci numbers and frequency windows."""

from __future__ import annotations

from collections.abc import Iterable

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def reverse_number(x: int) -> int:
    """Reverse the decimal digits of ``x``, keeping its sign.

    Returns 0 when the reversed value does not fit in a signed 32-bit integer.
    """
    sign = -1 if x < 0 else 1
    reversed_value = sign * int(str(abs(x))[::-1])
    if not INT32_MIN <= reversed_value <= INT32_MAX:
        return 0
    return reversed_value


def is_palindrome_number(x: int) -> bool:
    """Return True if ``x`` reads the same backwards; negatives never do."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def is_armstrong(num: int) -> bool:
    """Return True if ``num`` equals the sum of its digits raised to its digit count.

    For negative numbers each digit carries the sign of the number.
    """
    digits = str(abs(num))
    power = len(digits)
    sign = -1 if num < 0 else 1
    return sum((sign * int(d)) ** power for d in digits) == num


def is_palindrome_text(s: str) -> bool:
    """Return True if the ASCII letters and digits of ``s`` form a palindrome, ignoring case."""
    cleaned = [c.lower() for c in s if c.isascii() and c.isalnum()]
    return cleaned == cleaned[::-1]


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with fibonacci(0) == 0."""
    if n < 0:
        raise ValueError(f"Fibonacci index must be non-negative, got {n}")
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def max_frequency(nums: Iterable[int], k: int) -> int:
    """Return the largest count of equal elements reachable with at most ``k`` increments.

    An empty input yields 1.
    """
    if k < 0:
        raise ValueError(f"increment budget must be non-negative, got {k}")
    values = sorted(nums)
    window_sum = 0
    left = 0
    best = 1
    for right, value in enumerate(values):
        window_sum += value
        while value * (right - left + 1) - window_sum > k:
            window_sum -= values[left]
            left += 1
        best = max(best, right - left + 1)
    return best