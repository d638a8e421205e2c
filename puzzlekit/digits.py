"""Puzzles about the decimal digits of integers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


def _digit_count(x: int) -> int:
    return len(str(x)) if x > 0 else 0


def digit_sum(x: int) -> int:
    """Return the sum of the decimal digits of ``x``; zero for ``x <= 0``."""
    return sum(int(d) for d in str(x)) if x > 0 else 0


def find_numbers(nums: Iterable[int]) -> int:
    """Count values with an even number of digits (values <= 0 count as having none)."""
    return sum(1 for value in nums if _digit_count(value) % 2 == 0)


def count_largest_group(n: int) -> int:
    """Group 1..n by digit sum and count the groups of the largest size."""
    if n < 1:
        raise ValueError("n must be at least 1")
    sizes = Counter(digit_sum(i) for i in range(1, n + 1))
    largest = max(sizes.values())
    return sum(1 for size in sizes.values() if size == largest)