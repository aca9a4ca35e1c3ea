"""A fixed-capacity binary min-heap addressed by 1-based positions."""

from __future__ import annotations

import sys
from collections.abc import Iterable


class HeapEmptyError(LookupError):
    """Raised when reading or removing from an empty heap."""


class HeapOverflowError(OverflowError):
    """Raised when the heap has no room left."""


class BinaryHeap:
    """Min-heap holding at most ``capacity - 1`` keys.

    Positions passed to the key operations are 1-based, with the root at 1.
    """

    def __init__(self, capacity: int = 100) -> None:
        self.capacity = capacity
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def _check_position(self, position: int) -> int:
        if not 1 <= position <= len(self._items):
            raise IndexError(f"heap position {position} out of range")
        return position - 1

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if items[parent] <= items[index]:
                break
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and items[child] < items[smallest]:
                    smallest = child
            if smallest == index:
                return
            items[index], items[smallest] = items[smallest], items[index]
            index = smallest

    def find_min(self) -> int:
        """Return the smallest key without removing it."""
        if not self._items:
            raise HeapEmptyError("heap is empty")
        return self._items[0]

    def insert(self, key: int) -> None:
        """Add a key, keeping the heap order."""
        if len(self._items) >= self.capacity - 1:
            raise HeapOverflowError("heap overflow")
        self._items.append(key)
        self._sift_up(len(self._items) - 1)

    def delete_min(self) -> int:
        """Remove and return the smallest key."""
        if not self._items:
            raise HeapEmptyError("heap is empty")
        smallest = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._sift_down(0)
        return smallest

    def build_heap(self) -> None:
        """Restore the heap order over all stored keys."""
        for index in reversed(range(len(self._items) // 2)):
            self._sift_down(index)

    def decrease_key(self, position: int, delta: int) -> None:
        """Subtract delta from the key at position and move it up."""
        index = self._check_position(position)
        self._items[index] -= delta
        self._sift_up(index)

    def increase_key(self, position: int, delta: int) -> None:
        """Add delta to the key at position and move it down."""
        index = self._check_position(position)
        self._items[index] += delta
        self._sift_down(index)

    def delete_key(self, position: int) -> None:
        """Replace the key at position with the last key and move it down."""
        index = self._check_position(position)
        last = self._items.pop()
        if index < len(self._items):
            self._items[index] = last
            self._sift_down(index)

    def merge(self, values: Iterable[int]) -> None:
        """Append the given keys and rebuild the heap."""
        incoming = list(values)
        if len(self._items) + len(incoming) > self.capacity - 1:
            raise HeapOverflowError("heap overflow")
        self._items.extend(incoming)
        self.build_heap()


def main(argv: list[str] | None = None) -> int:
    """Run the demonstration sequence of heap operations."""
    heap = BinaryHeap()
    for key in (10, 4, 15, 20, 0):
        heap.insert(key)
    print(f"Minimum element: {heap.find_min()}", file=sys.stdout)

    heap.delete_min()
    print(f"Minimum after deleteMin: {heap.find_min()}", file=sys.stdout)

    heap.decrease_key(3, 10)
    print(f"Minimum after decreaseKey: {heap.find_min()}", file=sys.stdout)

    heap.increase_key(2, 5)
    print(f"Minimum after increaseKey: {heap.find_min()}", file=sys.stdout)

    heap.delete_key(2)
    print(f"Minimum after deleteKey: {heap.find_min()}", file=sys.stdout)

    heap.merge([7, 3, 9])
    print(f"Minimum after merge: {heap.find_min()}", file=sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())