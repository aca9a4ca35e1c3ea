"""Linear and binary search over sequences."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Optional


def binary_search(values: Sequence[int], key: int) -> Optional[int]:
    """Return an index of key in the ascending sequence values, or None."""
    left, right = 0, len(values) - 1
    while left <= right:
        middle = (left + right) // 2
        if values[middle] == key:
            return middle
        if key < values[middle]:
            right = middle - 1
        else:
            left = middle + 1
    return None


def linear_search_forward(values: Sequence[int], key: int) -> Optional[int]:
    """Return the index of the first occurrence of key, or None."""
    return next((i for i, value in enumerate(values) if value == key), None)


def linear_search_backward(values: Sequence[int], key: int) -> Optional[int]:
    """Return the index of the last occurrence of key, or None."""
    return next(
        (i for i in reversed(range(len(values))) if values[i] == key), None
    )


def main(argv: list[str] | None = None) -> int:
    """Print the demonstration searches; a missing key prints -1."""

    def show(index: Optional[int]) -> None:
        print(-1 if index is None else index, file=sys.stdout)

    ordered = [3, 8, 10, 11, 20, 50, 55, 60, 65, 70]
    show(binary_search(ordered, 55))
    show(binary_search(ordered, 77))

    unordered = [9, 4, 10, 1, 20, 12, 3]
    show(linear_search_backward(unordered, 12))
    show(linear_search_backward(unordered, 77))
    show(linear_search_forward(unordered, 12))
    show(linear_search_forward(unordered, 77))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())