"""Backtracking searches: knight's tours, n queens and a rat in a maze."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

_KNIGHT_MOVES = (
    (1, 2), (-1, 2),
    (2, 1), (2, -1),
    (-1, -2), (1, -2),
    (-2, 1), (-2, -1),
)

_RAT_MOVES = (
    (0, 1, "R"),
    (0, -1, "L"),
    (1, 0, "D"),
    (-1, 0, "U"),
)


def knights_tour(n: int) -> list[list[list[int]]]:
    """Return every knight's tour of an n x n board from the top-left corner
    that ends on the bottom-right corner.

    Each board holds the step number at which the knight visits each cell.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    if n == 0:
        return []

    board = [[-1] * n for _ in range(n)]
    board[0][0] = 0
    last = n * n - 1
    tours: list[list[list[int]]] = []

    def walk(x: int, y: int, step: int) -> None:
        if step == n * n and board[n - 1][n - 1] == last:
            tours.append([row[:] for row in board])
            return
        for dx, dy in _KNIGHT_MOVES:
            nx, ny = x + dx, y + dy
            if 0 <= nx < n and 0 <= ny < n and board[nx][ny] == -1:
                board[nx][ny] = step
                walk(nx, ny, step + 1)
                board[nx][ny] = -1

    walk(0, 0, 1)
    return tours


def _queen_boards(n: int) -> Iterator[list[str]]:
    if n < 0:
        raise ValueError("board size must not be negative")

    board = [["."] * n for _ in range(n)]

    def place(i: int, cols: int, ne_diags: int, se_diags: int) -> Iterator[list[str]]:
        if i == n:
            yield ["".join(row) for row in board]
            return
        for j in range(n):
            col = 1 << j
            ne = 1 << (i + j)
            se = 1 << (i - j + n - 1)
            if cols & col or ne_diags & ne or se_diags & se:
                continue
            board[i][j] = "Q"
            yield from place(i + 1, cols | col, ne_diags | ne, se_diags | se)
            board[i][j] = "."

    yield from place(0, 0, 0, 0)


def n_queens_all(n: int) -> list[list[str]]:
    """Return every placement of n non-attacking queens, one row per string."""
    return list(_queen_boards(n))


def n_queens_first(n: int) -> list[str]:
    """Return the first placement found, or an empty list if there is none."""
    return next(_queen_boards(n), [])


def n_queens_count(n: int) -> int:
    """Return how many placements of n non-attacking queens exist."""
    return sum(1 for _ in _queen_boards(n))


def rat_in_maze(maze: Sequence[Sequence[int]]) -> list[str]:
    """Return every path of moves R, L, D, U through open (1) cells from the
    top-left to the bottom-right of a square maze, never revisiting a cell.
    """
    n = len(maze)
    cells = [list(row) for row in maze]
    paths: list[str] = []
    route: list[str] = []

    def explore(x: int, y: int) -> None:
        if x == n - 1 and y == n - 1:
            paths.append("".join(route))
            return
        cells[x][y] = 0
        for dx, dy, move in _RAT_MOVES:
            nx, ny = x + dx, y + dy
            if 0 <= nx < n and 0 <= ny < n and cells[nx][ny] == 1:
                route.append(move)
                explore(nx, ny)
                route.pop()
        cells[x][y] = 1

    if cells[0][0] == 1 and cells[n - 1][n - 1] == 1:
        explore(0, 0)
    return paths