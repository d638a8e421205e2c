# puzzlekit

Small solutions to well-known algorithm puzzles, grouped by technique. They use only the standard library.

## Installation

```
pip install puzzlekit
```

## Modules

| Module | Contents |
| --- | --- |
| `puzzlekit.grids` | `rotting_oranges`, `unique_paths_with_obstacles`, `min_path_sum`, `search_matrix` |
| `puzzlekit.backtracking` | `knights_tour`, `n_queens_all`, `n_queens_first`, `n_queens_count`, `rat_in_maze` |
| `puzzlekit.hashing` | `contains_nearby_duplicate`, `intersection`, `two_sum`, `contains_duplicate`, `is_anagram` |
| `puzzlekit.subarrays` | `count_complete_subarrays`, `count_subarrays_score_below`, `count_fixed_bound_subarrays` |
| `puzzlekit.dp` | `rob`, `min_jumps`, `can_jump`, `max_profit`, `can_complete_circuit` |
| `puzzlekit.strings` | `valid_palindrome` |
| `puzzlekit.digits` | `find_numbers`, `count_largest_group`, `digit_sum` |
| `puzzlekit.stacks` | `eval_rpn`, `MinStack` |

A few behaviours worth knowing:

- `rotting_oranges` and `rat_in_maze` work on copies and leave their input unchanged.
- `two_sum` returns a tuple of indices `(i, j)`, or `None` when no pair adds up to the target.
- `min_jumps` raises `ValueError` when the last index cannot be reached.
- `n_queens_first` returns an empty list when no placement exists.
- `eval_rpn` truncates division toward zero. It raises `ValueError` for a malformed expression and `ZeroDivisionError` for a division by zero.
- `MinStack.pop` returns the removed value. `pop`, `top` and `get_min` raise `IndexError` on an empty stack.

## Examples

```python
from puzzlekit.backtracking import n_queens_count, rat_in_maze
from puzzlekit.dp import min_jumps
from puzzlekit.stacks import MinStack, eval_rpn

n_queens_count(5)                      # 10
min_jumps([2, 3, 1, 1, 4])             # 2
eval_rpn(["2", "1", "+", "3", "*"])    # 9

maze = [
    [1, 0, 0, 0],
    [1, 1, 0, 1],
    [1, 1, 0, 0],
    [0, 1, 1, 1],
]
rat_in_maze(maze)                      # ['DRDDRR', 'DDRDRR']

stack = MinStack()
stack.push(3)
stack.push(1)
stack.get_min()                        # 1
stack.pop()                            # 1
stack.get_min()                        # 3
```

## What it does not do

puzzlekit is a library only. It has no command-line program, and nothing in it prints results. You call the functions from your own code.

## Running the tests

```
pip install puzzlekit[test]
pytest
```