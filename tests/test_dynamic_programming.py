import pytest
from hypothesis import given
from hypothesis import strategies as st

from algolab.dynamic_programming import (
    fibonacci_bottom_up,
    knapsack,
    main,
    min_cost_path,
)
from algolab.recursion import fibonacci

SOURCE_GRID = [[1, 5, 1], [2, 4, 2], [1, 3, 6]]


@pytest.mark.parametrize("n", range(20))
def test_fibonacci_agrees_with_recursive(n):
    assert fibonacci_bottom_up(n) == fibonacci(n)


def test_fibonacci_recurrence_holds_for_large_n():
    assert fibonacci_bottom_up(90) == fibonacci_bottom_up(89) + fibonacci_bottom_up(88)


def test_fibonacci_negative_raises():
    with pytest.raises(ValueError):
        fibonacci_bottom_up(-1)


def test_knapsack_source_example():
    assert knapsack(60, [5, 10, 20, 30, 40], [30, 20, 100, 90, 160]) == 260


def test_knapsack_zero_capacity():
    assert knapsack(0, [1, 2], [10, 20]) == 0


@given(st.lists(st.tuples(st.integers(1, 10), st.integers(0, 50)), max_size=8))
def test_knapsack_everything_fits(items):
    weights = [w for w, _ in items]
    values = [v for _, v in items]
    assert knapsack(sum(weights), weights, values) == sum(values)


@given(
    st.lists(st.tuples(st.integers(1, 10), st.integers(0, 50)), max_size=8),
    st.integers(0, 30),
)
def test_knapsack_monotone_in_capacity(items, capacity):
    weights = [w for w, _ in items]
    values = [v for _, v in items]
    assert knapsack(capacity, weights, values) <= knapsack(capacity + 1, weights, values)


def test_knapsack_length_mismatch():
    with pytest.raises(ValueError):
        knapsack(5, [1, 2], [3])


def test_min_cost_source_grid():
    assert min_cost_path(SOURCE_GRID) == 13


def test_min_cost_single_cell_and_row():
    assert min_cost_path([[7]]) == 7
    assert min_cost_path([[1, 2, 3]]) == sum([1, 2, 3])
    assert min_cost_path([[4], [5]]) == sum([4, 5])


@given(st.integers(1, 5), st.integers(1, 5), st.integers(0, 9))
def test_min_cost_uniform_grid(rows, cols, cell):
    grid = [[cell] * cols for _ in range(rows)]
    assert min_cost_path(grid) == cell * (rows + cols - 1)


@pytest.mark.parametrize("bad", [[], [[]], [[1, 2], [3]]])
def test_min_cost_bad_grid(bad):
    with pytest.raises(ValueError):
        min_cost_path(bad)


def test_main_output(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == f"F(6) = {fibonacci(6)}"
    assert lines[1].startswith("Maksimum deger: ")
    assert lines[2] == f"Minimum maliyet: {min_cost_path(SOURCE_GRID)}"