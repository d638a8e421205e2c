"""Grid puzzles: spreading rot, lattice paths and sorted-matrix search."""

from __future__ import annotations

from bisect import bisect_left
from collections import deque
from collections.abc import Iterator, Sequence

EMPTY = 0
FRESH = 1
ROTTEN = 2

_DIRECTIONS = ((1, 0), (0, 1), (-1, 0), (0, -1))


def _neighbours(x: int, y: int, rows: int, cols: int) -> Iterator[tuple[int, int]]:
    for dx, dy in _DIRECTIONS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < rows and 0 <= ny < cols:
            yield nx, ny


def rotting_oranges(grid: Sequence[Sequence[int]]) -> int:
    """Return the minutes until no fresh orange is left, or -1 if some never rot.

    Cells hold 0 (empty), 1 (fresh) or 2 (rotten). Each minute every rotten
    orange rots its fresh four-way neighbours. The input is not modified.
    """
    cells = [list(row) for row in grid]
    rows, cols = len(cells), len(cells[0])

    fresh = sum(row.count(FRESH) for row in cells)
    frontier = deque(
        (i, j)
        for i, row in enumerate(cells)
        for j, value in enumerate(row)
        if value == ROTTEN
    )

    if fresh == 0:
        return 0

    minutes = 0
    while frontier:
        rotted = False
        for _ in range(len(frontier)):
            x, y = frontier.popleft()
            for nx, ny in _neighbours(x, y, rows, cols):
                if cells[nx][ny] == FRESH:
                    cells[nx][ny] = ROTTEN
                    fresh -= 1
                    rotted = True
                    frontier.append((nx, ny))
        minutes += rotted

    return minutes if fresh == 0 else -1


def unique_paths_with_obstacles(grid: Sequence[Sequence[int]]) -> int:
    """Count right/down paths from the top-left to the bottom-right cell.

    A truthy cell is an obstacle that no path may enter.
    """
    if grid[0][0]:
        return 0

    counts = [0] * len(grid[0])
    for i, line in enumerate(grid):
        for j, blocked in enumerate(line):
            if blocked:
                counts[j] = 0
            elif i == 0 and j == 0:
                counts[j] = 1
            elif j:
                counts[j] += counts[j - 1]
    return counts[-1]


def min_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Return the smallest sum along a right/down path across the grid."""
    previous: list[int] | None = None
    for line in grid:
        current: list[int] = []
        for j, value in enumerate(line):
            if previous is None:
                best = current[-1] if current else 0
            elif j == 0:
                best = previous[0]
            else:
                best = min(previous[j], current[-1])
            current.append(best + value)
        previous = current
    if previous is None:
        raise IndexError("grid has no rows")
    return previous[-1]


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Tell whether ``target`` is in a matrix sorted row by row, end to end."""
    rows, cols = len(matrix), len(matrix[0])
    if cols == 0:
        return False

    total = rows * cols
    index = bisect_left(range(total), target, key=lambda k: matrix[k // cols][k % cols])
    return index < total and matrix[index // cols][index % cols] == target