"""Lookup-table puzzles: duplicates, intersections, pair sums and anagrams."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def contains_nearby_duplicate(nums: Iterable[int], k: int) -> bool:
    """Tell whether two equal values sit at most ``k`` positions apart."""
    last_seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        previous = last_seen.get(value)
        if previous is not None and index - previous <= k:
            return True
        last_seen[value] = index
    return False


def intersection(nums1: Iterable[int], nums2: Iterable[int]) -> list[int]:
    """Return the distinct values found in both inputs, in no set order."""
    return list(set(nums1) & set(nums2))


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return indices ``(i, j)``, ``i < j``, of two values adding to ``target``.

    The pair returned is the one whose second index is smallest. ``None`` is
    returned when no such pair exists.
    """
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return partner, index
        seen[value] = index
    return None


def contains_duplicate(nums: Iterable[int]) -> bool:
    """Tell whether any value appears more than once."""
    seen: set[int] = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False


def is_anagram(s: str, t: str) -> bool:
    """Tell whether ``t`` is a rearrangement of the letters of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)