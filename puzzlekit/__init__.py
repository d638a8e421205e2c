"""Solutions to classic algorithm puzzles, grouped by technique."""

__version__ = "0.1.0"

__all__ = ["backtracking", "digits", "dp", "grids", "hashing", "stacks", "strings", "subarrays"]