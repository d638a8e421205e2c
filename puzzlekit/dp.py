"""Array puzzles solved by dynamic programming or greedy scans."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise


def rob(nums: Sequence[int]) -> int:
    """Return the largest sum of values taken with no two neighbours taken."""
    if not nums:
        raise ValueError("at least one house is required")
    if len(nums) == 1:
        return nums[0]
    before, best = nums[0], max(nums[0], nums[1])
    for value in nums[2:]:
        before, best = best, max(best, before + value)
    return best


def min_jumps(nums: Sequence[int]) -> int:
    """Return the fewest jumps from the first to the last index.

    ``nums[i]`` is the longest jump allowed from index ``i``. Raises
    ``ValueError`` when the last index cannot be reached.
    """
    if not nums:
        raise ValueError("at least one position is required")
    last = len(nums) - 1
    jumps = 0
    edge = 0
    farthest = 0
    for index, step in enumerate(nums[:-1]):
        if index > farthest:
            break
        farthest = max(farthest, index + step)
        if index == edge:
            jumps += 1
            edge = farthest
    if edge < last:
        raise ValueError("the last index cannot be reached")
    return jumps


def can_jump(nums: Sequence[int]) -> bool:
    """Tell whether the last index can be reached from the first."""
    reach = 0
    for index, step in enumerate(nums):
        if index > reach:
            break
        reach = max(reach, index + step)
    return reach >= len(nums) - 1


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from any number of buy-then-sell trades."""
    return sum(max(0, later - earlier) for earlier, later in pairwise(prices))


def can_complete_circuit(gas: Sequence[int], cost: Sequence[int]) -> int:
    """Return the station from which a full loop is possible, or -1."""
    start = 0
    tank = 0
    balance = 0
    for index, (fuel, spend) in enumerate(zip(gas, cost)):
        tank += fuel - spend
        balance += fuel - spend
        if tank < 0:
            tank = 0
            start = index + 1
    return -1 if balance < 0 else start