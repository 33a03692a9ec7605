"""Dynamic programming: 0/1 knapsack and matrix-chain ordering."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


def knapsack_01(
    items: Iterable[tuple[int, int]], capacity: int
) -> tuple[list[int], int]:
    """Solve the 0/1 knapsack for ``(profit, weight)`` items.

    Returns a list with 1 for each item taken and 0 otherwise, and the
    greatest profit.
    """
    stock = list(items)
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    if any(weight < 0 for _, weight in stock):
        raise ValueError("weights must be non-negative")

    table = [[0] * (capacity + 1)]
    for profit, weight in stock:
        previous = table[-1]
        table.append(
            [
                max(previous[j], profit + previous[j - weight]) if j >= weight else previous[j]
                for j in range(capacity + 1)
            ]
        )

    taken = [0] * len(stock)
    j = capacity
    for i in range(len(stock), 0, -1):
        if table[i][j] != table[i - 1][j]:
            taken[i - 1] = 1
            j -= stock[i - 1][1]
    return taken, table[-1][capacity]


@dataclass(frozen=True)
class ChainOrder:
    """Cost and split tables for multiplying a chain of matrices."""

    dims: tuple[int, ...]
    cost: list[list[int]]
    split: list[list[int]]

    @property
    def minimum_cost(self) -> int:
        """Fewest scalar multiplications for the whole chain."""
        return self.cost[0][-1]

    def parenthesize(self) -> str:
        """Return the optimal order, e.g. ``((A1*A2)*A3)``."""

        def render(i: int, j: int) -> str:
            if i == j:
                return f"A{i + 1}"
            k = self.split[i][j]
            return f"({render(i, k)}*{render(k + 1, j)})"

        return render(0, len(self.cost) - 1)


def matrix_chain_order(dims: Sequence[int]) -> ChainOrder:
    """Find the cheapest parenthesization; matrix i is ``dims[i] x dims[i+1]``."""
    dims = tuple(dims)
    n = len(dims) - 1
    if n < 1:
        raise ValueError("at least two dimensions are needed")
    cost = [[0] * n for _ in range(n)]
    split = [[0] * n for _ in range(n)]
    for length in range(2, n + 1):
        for i in range(n - length + 1):
            j = i + length - 1
            best = None
            for k in range(i, j):
                q = cost[i][k] + cost[k + 1][j] + dims[i] * dims[k + 1] * dims[j + 1]
                if best is None or q < best:
                    best = q
                    split[i][j] = k
            cost[i][j] = best
    return ChainOrder(dims, cost, split)