"""String puzzles."""

from __future__ import annotations


def _is_palindrome(s: str, left: int, right: int) -> bool:
    segment = s[left:right + 1]
    return segment == segment[::-1]


def valid_palindrome(s: str) -> bool:
    """Tell whether ``s`` reads the same both ways after deleting at most one character."""
    left, right = 0, len(s) - 1
    while left < right:
        if s[left] != s[right]:
            return _is_palindrome(s, left + 1, right) or _is_palindrome(s, left, right - 1)
        left += 1
        right -= 1
    return True