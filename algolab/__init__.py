"""Graph, knapsack, backtracking and sorting algorithms, with a sorting benchmark."""

__version__ = "0.1.0"
__all__ = ["backtracking", "graphs", "knapsack", "sorting"]