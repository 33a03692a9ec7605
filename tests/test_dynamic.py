import re
from itertools import combinations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.dynamic import knapsack_01, matrix_chain_order


def test_knapsack_classic():
    taken, profit = knapsack_01([(60, 10), (100, 20), (120, 30)], 50)
    assert taken == [0, 1, 1]
    assert profit == 220


def test_knapsack_nothing_fits():
    assert knapsack_01([(10, 5)], 4) == ([0], 0)


def test_knapsack_rejects_negative_capacity():
    with pytest.raises(ValueError):
        knapsack_01([(1, 1)], -1)


@given(
    st.lists(st.tuples(st.integers(0, 50), st.integers(1, 15)), max_size=7),
    st.integers(0, 40),
)
def test_knapsack_is_optimal_and_consistent(items, capacity):
    taken, profit = knapsack_01(items, capacity)
    chosen = [item for flag, item in zip(taken, items) if flag]
    assert sum(w for _, w in chosen) <= capacity
    assert sum(p for p, _ in chosen) == profit
    best = max(
        sum(p for p, _ in subset)
        for r in range(len(items) + 1)
        for subset in combinations(items, r)
        if sum(w for _, w in subset) <= capacity
    )
    assert profit == best


def test_matrix_chain_clrs_example():
    order = matrix_chain_order([30, 35, 15, 5, 10, 20, 25])
    assert order.minimum_cost == 15125
    assert order.parenthesize() == "((A1*(A2*A3))*((A4*A5)*A6))"


def test_single_matrix():
    order = matrix_chain_order([4, 7])
    assert order.minimum_cost == 0
    assert order.parenthesize() == "A1"


def test_two_matrices_cost():
    order = matrix_chain_order([2, 3, 4])
    assert order.minimum_cost == 2 * 3 * 4
    assert order.parenthesize() == "(A1*A2)"


def test_too_few_dimensions():
    with pytest.raises(ValueError):
        matrix_chain_order([5])


@given(st.lists(st.integers(1, 30), min_size=2, max_size=8))
def test_matrix_chain_bounds_and_shape(dims):
    order = matrix_chain_order(dims)
    n = len(dims) - 1
    left_to_right = sum(dims[0] * dims[k] * dims[k + 1] for k in range(1, n))
    right_to_left = sum(dims[k] * dims[k + 1] * dims[n] for k in range(n - 1))
    assert order.minimum_cost <= left_to_right
    assert order.minimum_cost <= right_to_left
    assert all(order.cost[i][i] == 0 for i in range(n))
    text = order.parenthesize()
    assert re.findall(r"A(\d+)", text) == [str(i) for i in range(1, n + 1)]
    assert text.count("(") == text.count(")") == n - 1