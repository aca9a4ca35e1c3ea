# algolab

A small collection of classic algorithms, written plainly so they can be
read, run and compared. Each topic lives in its own module:

| Module | What it holds |
| --- | --- |
| `algolab.max_subsequence` | Maximum contiguous subsequence sum in cubic, quadratic, divide-and-conquer and linear time |
| `algolab.recursion` | Recursive array sum, digit sum, Fibonacci, Towers of Hanoi, power and 1..n sum |
| `algolab.searching` | Binary search and forward/backward linear search |
| `algolab.sorting` | Bubble, selection, insertion, merge, quick, heap, counting and radix sort |
| `algolab.binary_heap` | A bounded binary min-heap with key updates, deletion and merging |
| `algolab.greedy` | Shortest-job-first scheduling, activity selection and Huffman codes |
| `algolab.dynamic_programming` | Bottom-up Fibonacci, 0/1 knapsack and minimum-cost grid path |

No third-party libraries are needed.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from algolab.max_subsequence import max_sub_sum_linear
from algolab.searching import binary_search
from algolab.recursion import fibonacci, hanoi
from algolab.dynamic_programming import knapsack, min_cost_path

max_sub_sum_linear([-2, 11, -4, 13, -5, -2])   # 20

binary_search([3, 8, 10, 11, 20, 50, 55, 60, 65, 70], 55)   # 6
binary_search([3, 8, 10, 11, 20, 50, 55, 60, 65, 70], 77)   # None

fibonacci(5)   # 5
list(hanoi(2, "A", "C", "B"))
# [(1, 'A', 'B'), (2, 'A', 'C'), (1, 'B', 'C')]

knapsack(60, [5, 10, 20, 30, 40], [30, 20, 100, 90, 160])   # 260

min_cost_path([[1, 5, 1], [2, 4, 2], [1, 3, 6]])   # 13
```

The maximum subsequence functions (`max_sub_sum_cubic`,
`max_sub_sum_quadratic`, `max_sub_sum_divide_conquer`,
`max_sub_sum_linear`) allow the empty subsequence, so an all-negative
input gives 0.

The search functions return the index of the key, or `None` when it is
absent. `linear_search_forward` finds the first occurrence and
`linear_search_backward` the last; `binary_search` expects an ascending
sequence.

Some recursive routines reject inputs they are not defined for with
`ValueError`: `array_sum` of an empty sequence, `fibonacci` of a negative
number, `power` with a negative exponent and `sum_to` below 1.

The sorting functions each take an iterable of integers and return a new
ascending list, leaving the argument untouched. `counting_sort(values,
max_value)` accepts values from 0 to `max_value` and `radix_sort` accepts
non-negative integers; both raise `ValueError` otherwise.

The heap is a min-heap with a fixed capacity; it holds at most
`capacity - 1` keys, and key positions are 1-based with the root at 1:

```python
from algolab.binary_heap import BinaryHeap, HeapEmptyError

heap = BinaryHeap(100)
for key in (10, 4, 15, 20, 0):
    heap.insert(key)

heap.find_min()     # 0
heap.delete_min()   # 0
heap.find_min()     # 4
len(heap)           # 4

heap.decrease_key(3, 10)
heap.merge([7, 3, 9])
```

Reading from or removing from an empty heap raises `HeapEmptyError`;
inserting or merging past the capacity raises `HeapOverflowError`; a
position outside the heap raises `IndexError`.

The greedy module offers:

- `schedule_jobs(jobs)` over `Job(id, time)` records, returning a
  `Schedule` with the jobs in shortest-first `order` and their
  `average_completion_time`;
- `select_activities(activities)` over `Activity(id, start, finish)`
  records, returning a largest compatible set chosen by earliest finish;
- `huffman_codes(frequencies)`, which turns a mapping of symbols to
  frequencies into a mapping of symbols to bit-string codes, ordered by
  symbol.

## Demonstrations

Each of these topics has a command that runs a short demonstration and
prints its results:

```
algolab-recursion
algolab-searching
algolab-heap
algolab-sorting
algolab-greedy
algolab-dp
```

`algolab-sorting` prints how many microseconds each sort took on a small
sample.

## What it does not do

There is no command for the maximum subsequence functions and no
benchmark comparing their running times on large generated inputs; they
are available only as library functions.