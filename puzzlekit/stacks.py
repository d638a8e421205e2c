"""Stack-based puzzles: postfix evaluation and a stack tracking its minimum."""

from __future__ import annotations

from collections.abc import Callable, Iterable


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _truncating_div,
}


def eval_rpn(tokens: Iterable[str]) -> int:
    """Evaluate integer tokens in reverse Polish notation.

    Division truncates toward zero. Raises ``ValueError`` for a malformed
    expression and ``ZeroDivisionError`` when dividing by zero.
    """
    stack: list[int] = []
    for token in tokens:
        operator = _OPERATORS.get(token)
        if operator is None:
            stack.append(int(token))
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {token!r} lacks operands")
        right = stack.pop()
        left = stack.pop()
        stack.append(operator(left, right))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


class MinStack:
    """A stack that reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._items: list[tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, val: int) -> None:
        """Put ``val`` on top."""
        smallest = min(val, self._items[-1][1]) if self._items else val
        self._items.append((val, smallest))

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()[0]

    def top(self) -> int:
        """Return the top value."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1][0]

    def get_min(self) -> int:
        """Return the smallest value on the stack."""
        if not self._items:
            raise IndexError("minimum of empty stack")
        return self._items[-1][1]