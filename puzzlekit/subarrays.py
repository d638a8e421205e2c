"""Sliding-window counts of contiguous subarrays."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def count_complete_subarrays(nums: Sequence[int]) -> int:
    """Count subarrays holding every distinct value of ``nums``."""
    n = len(nums)
    distinct = len(set(nums))
    window: Counter[int] = Counter()
    count = 0
    left = 0
    for right, value in enumerate(nums):
        window[value] += 1
        while len(window) == distinct:
            count += n - right
            leaving = nums[left]
            window[leaving] -= 1
            if window[leaving] == 0:
                del window[leaving]
            left += 1
    return count


def count_subarrays_score_below(nums: Sequence[int], k: int) -> int:
    """Count subarrays whose sum times length is strictly below ``k``."""
    total = 0
    count = 0
    left = 0
    for right, value in enumerate(nums):
        total += value
        while left <= right and total * (right - left + 1) >= k:
            total -= nums[left]
            left += 1
        count += right - left + 1
    return count


def count_fixed_bound_subarrays(nums: Sequence[int], min_k: int, max_k: int) -> int:
    """Count subarrays whose minimum is ``min_k`` and maximum is ``max_k``."""
    count = 0
    last_min = last_max = -1
    start = 0
    for index, value in enumerate(nums):
        if value < min_k or value > max_k:
            last_min = last_max = -1
            start = index + 1
        if value == min_k:
            last_min = index
        if value == max_k:
            last_max = index
        count += max(0, min(last_min, last_max) - start + 1)
    return count