import pytest

from puzzlekit.backtracking import (
    knights_tour,
    n_queens_all,
    n_queens_count,
    n_queens_first,
    rat_in_maze,
)

KNIGHT_STEPS = {(1, 2), (2, 1)}


def _is_valid_queens(board):
    n = len(board)
    positions = []
    for i, row in enumerate(board):
        if len(row) != n or row.count("Q") != 1 or set(row) - {"Q", "."}:
            return False
        positions.append((i, row.index("Q")))
    cols = {j for _, j in positions}
    ne = {i + j for i, j in positions}
    se = {i - j for i, j in positions}
    return len(cols) == len(ne) == len(se) == n


def test_knights_tour_single_cell():
    assert knights_tour(1) == [[[0]]]


@pytest.mark.parametrize("n", [2, 3, 4])
def test_knights_tour_small_boards_have_none(n):
    assert not knights_tour(n)


def test_knights_tour_negative_size():
    with pytest.raises(ValueError):
        knights_tour(-1)


def test_n_queens_all_four():
    assert n_queens_all(4) == [
        [".Q..", "...Q", "Q...", "..Q."],
        ["..Q.", "Q...", "...Q", ".Q.."],
    ]


@pytest.mark.parametrize("n", [1, 4, 5, 6, 7])
def test_n_queens_all_boards_are_valid_and_distinct(n):
    boards = n_queens_all(n)
    assert boards
    assert all(_is_valid_queens(board) for board in boards)
    assert len({tuple(board) for board in boards}) == len(boards)


@pytest.mark.parametrize("n", range(0, 8))
def test_n_queens_count_matches_all(n):
    assert n_queens_count(n) == len(n_queens_all(n))


@pytest.mark.parametrize("n", [1, 4, 5, 6, 8])
def test_n_queens_first_is_first_of_all(n):
    first = n_queens_first(n)
    assert _is_valid_queens(first)
    assert first == n_queens_all(n)[0]


@pytest.mark.parametrize("n", [2, 3])
def test_n_queens_unsolvable(n):
    assert not n_queens_first(n)
    assert not n_queens_all(n)
    assert n_queens_count(n) == 0


def test_n_queens_mirror_closed():
    boards = {tuple(b) for b in n_queens_all(6)}
    mirrored = {tuple(row[::-1] for row in b) for b in boards}
    assert mirrored == boards


def test_n_queens_negative_size():
    with pytest.raises(ValueError):
        n_queens_count(-2)


SOURCE_MAZE = [
    [1, 0, 0, 0],
    [1, 1, 0, 1],
    [1, 1, 0, 0],
    [0, 1, 1, 1],
]


def _follow(maze, path):
    moves = {"R": (0, 1), "L": (0, -1), "D": (1, 0), "U": (-1, 0)}
    x = y = 0
    seen = {(0, 0)}
    for step in path:
        dx, dy = moves[step]
        x, y = x + dx, y + dy
        if not (0 <= x < len(maze) and 0 <= y < len(maze)) or maze[x][y] != 1:
            return None
        if (x, y) in seen:
            return None
        seen.add((x, y))
    return x, y


def test_rat_in_maze_source_example():
    assert rat_in_maze(SOURCE_MAZE) == ["DRDDRR", "DDRDRR"]


def test_rat_in_maze_paths_are_valid():
    maze = [[1, 1, 1], [1, 1, 1], [1, 1, 1]]
    paths = rat_in_maze(maze)
    assert paths
    assert len(set(paths)) == len(paths)
    assert all(_follow(maze, p) == (2, 2) for p in paths)


def test_rat_in_maze_blocked_start_or_end():
    assert not rat_in_maze([[0, 1], [1, 1]])
    assert not rat_in_maze([[1, 1], [1, 0]])


def test_rat_in_maze_does_not_modify_input():
    maze = [row[:] for row in SOURCE_MAZE]
    rat_in_maze(maze)
    assert maze == SOURCE_MAZE


def test_rat_in_maze_transpose_swaps_moves():
    swap = str.maketrans("RLDU", "DURL")
    transposed = [list(col) for col in zip(*SOURCE_MAZE)]
    expected = sorted(p.translate(swap) for p in rat_in_maze(SOURCE_MAZE))
    assert sorted(rat_in_maze(transposed)) == expected