"""Dynamic programming: Fibonacci, 0/1 knapsack and minimum-cost grid path."""

from __future__ import annotations

import sys
from collections.abc import Sequence


def fibonacci_bottom_up(n: int) -> int:
    """Return the n-th Fibonacci number by filling a table from the bottom."""
    if n < 0:
        raise ValueError("n must be non-negative")
    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return previous


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Return the largest total value of items whose weights fit in capacity."""
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def min_cost_path(grid: Sequence[Sequence[int]]) -> int:
    """Cheapest sum from top-left to bottom-right moving only down or right."""
    if not grid or not grid[0]:
        raise ValueError("grid must be non-empty")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("grid rows must all have the same length")

    below: list[float] = [float("inf")] * width
    for i in reversed(range(len(grid))):
        row_cost: list[float] = [0.0] * width
        for j in reversed(range(width)):
            if i == len(grid) - 1 and j == width - 1:
                row_cost[j] = grid[i][j]
                continue
            right = row_cost[j + 1] if j + 1 < width else float("inf")
            row_cost[j] = grid[i][j] + min(below[j], right)
        below = row_cost
    return int(below[0])


def main(argv: list[str] | None = None) -> int:
    """Print the three sample computations."""
    out = sys.stdout
    n = 6
    print(f"F({n}) = {fibonacci_bottom_up(n)}", file=out)
    values = [30, 20, 100, 90, 160]
    weights = [5, 10, 20, 30, 40]
    print(f"Maksimum deger: {knapsack(60, weights, values)}", file=out)
    grid = [[1, 5, 1], [2, 4, 2], [1, 3, 6]]
    print(f"Minimum maliyet: {min_cost_path(grid)}", file=out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())