"""Classic comparison and distribution sorts.

Every function returns a new sorted list and leaves its argument untouched.
"""

from __future__ import annotations

import sys
import time
from collections.abc import Callable, Iterable


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Swap adjacent out-of-order pairs, pass after pass."""
    items = list(values)
    n = len(items)
    for done in range(n - 1):
        for j in range(n - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def selection_sort(values: Iterable[int]) -> list[int]:
    """Move the smallest remaining value to the front of the unsorted part."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        smallest = min(range(i, n), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Insert each value into the sorted prefix before it."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def merge_sort(values: Iterable[int]) -> list[int]:
    """Sort both halves and merge them, keeping equal values in order."""
    items = list(values)
    if len(items) < 2:
        return items
    mid = (len(items) + 1) // 2
    left, right = merge_sort(items[:mid]), merge_sort(items[mid:])
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def quick_sort(values: Iterable[int]) -> list[int]:
    """Partition around the last element of each range and recurse."""
    items = list(values)

    def partition(low: int, high: int) -> int:
        pivot = items[high]
        boundary = low - 1
        for j in range(low, high):
            if items[j] < pivot:
                boundary += 1
                items[boundary], items[j] = items[j], items[boundary]
        items[boundary + 1], items[high] = items[high], items[boundary + 1]
        return boundary + 1

    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = partition(low, high)
            pending.append((low, pivot_index - 1))
            pending.append((pivot_index + 1, high))
    return items


def heap_sort(values: Iterable[int]) -> list[int]:
    """Build a max-heap, then repeatedly move its root to the end."""
    items = list(values)

    def sift_down(size: int, index: int) -> None:
        while True:
            largest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and items[child] > items[largest]:
                    largest = child
            if largest == index:
                return
            items[index], items[largest] = items[largest], items[index]
            index = largest

    n = len(items)
    for index in reversed(range(n // 2)):
        sift_down(n, index)
    for end in range(n - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        sift_down(end, 0)
    return items


def counting_sort(values: Iterable[int], max_value: int) -> list[int]:
    """Sort integers in the range 0..max_value by counting occurrences."""
    items = list(values)
    counts = [0] * (max_value + 1)
    for value in items:
        if not 0 <= value <= max_value:
            raise ValueError(f"value {value} outside 0..{max_value}")
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def radix_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers digit by digit, least significant first."""
    items = list(values)
    if any(value < 0 for value in items):
        raise ValueError("radix_sort needs non-negative integers")
    if not items:
        return items
    largest = max(items)
    exp = 1
    while largest // exp > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in items:
            buckets[(value // exp) % 10].append(value)
        items = [value for bucket in buckets for value in bucket]
        exp *= 10
    return items


def _timed(sorter: Callable[[], list[int]]) -> int:
    start = time.perf_counter_ns()
    sorter()
    return (time.perf_counter_ns() - start) // 1000


def main(argv: list[str] | None = None) -> int:
    """Time each sort on a small sample and print the results."""
    sample = [5, 3, 8, 4, 2]
    runs = [
        ("Bubble", lambda: bubble_sort(sample)),
        ("Counting", lambda: counting_sort([1, 4, 1, 2, 7, 5, 2], 9)),
        ("Heap", lambda: heap_sort(sample)),
        ("Insertion", lambda: insertion_sort(sample)),
        ("Merge", lambda: merge_sort(sample)),
        ("Quick", lambda: quick_sort(sample)),
        ("Radix", lambda: radix_sort([170, 45, 75, 90, 802, 24, 2, 66])),
        ("Selection", lambda: selection_sort(sample)),
    ]
    for name, run in runs:
        print(f"{name} Sort Time: {_timed(run)} microseconds", file=sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())