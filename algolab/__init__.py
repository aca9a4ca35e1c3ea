"""Classic algorithms and data structures for study and comparison."""

__version__ = "0.1.0"

__all__ = [
    "binary_heap",
    "dynamic_programming",
    "greedy",
    "max_subsequence",
    "recursion",
    "searching",
    "sorting",
]