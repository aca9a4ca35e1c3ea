"""Maximum contiguous subsequence sum, solved four ways.

Every variant treats the empty subsequence as allowed, so the result is
never negative: a sequence of only negative numbers yields 0.
"""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate


def max_sub_sum_cubic(values: Sequence[int]) -> int:
    """Try every (start, end) pair and sum it from scratch: O(n^3)."""
    n = len(values)
    sums = (
        sum(values[start : end + 1])
        for start in range(n)
        for end in range(start, n)
    )
    return max(sums, default=0) if n else 0 if True else 0


def max_sub_sum_quadratic(values: Sequence[int]) -> int:
    """Extend a running sum from every start position: O(n^2)."""
    best = 0
    for start in range(len(values)):
        best = max(best, max(accumulate(values[start:])))
    return best


def max_sub_sum_divide_conquer(values: Sequence[int]) -> int:
    """Split in half and combine the halves with the best crossing sum: O(n log n)."""
    if not values:
        return 0

    def crossing(left: int, mid: int, right: int) -> int:
        left_best = max(0, max(accumulate(reversed(values[left : mid + 1]))))
        right_part = values[mid + 1 : right + 1]
        right_best = max(0, max(accumulate(right_part))) if right_part else 0
        return left_best + right_best

    def solve(left: int, right: int) -> int:
        if left == right:
            return max(0, values[left])
        mid = (left + right) // 2
        return max(
            solve(left, mid),
            solve(mid + 1, right),
            crossing(left, mid, right),
        )

    return solve(0, len(values) - 1)


def max_sub_sum_linear(values: Sequence[int]) -> int:
    """Single pass that drops a running sum once it turns negative: O(n)."""
    best = running = 0
    for value in values:
        running += value
        if running > best:
            best = running
        elif running < 0:
            running = 0
    return best