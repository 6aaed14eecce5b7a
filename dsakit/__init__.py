"""Classic array, dynamic-programming and binary-tree algorithms."""

__version__ = "0.1.0"

__all__ = ["arrays", "knapsack", "paths", "strings", "tree", "traversal", "views", "properties"]