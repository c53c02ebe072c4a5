"""Classic backtracking, dynamic programming and greedy algorithms."""

__version__ = "0.1.0"
__all__ = ["backtracking", "dynamic", "greedy"]