# algokit

Classic algorithms in plain Python, with no third-party dependencies:
sorting, searching, recursion, greedy methods, dynamic programming, graph
algorithms on adjacency matrices, and Strassen matrix multiplication.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algokit.sorting` | `bubble_sort`, `insertion_sort`, `selection_sort`, `heap_sort`, `merge_sort`, `quick_sort_hoare` (first element as pivot), `quick_sort_lomuto` (last element as pivot), `benchmark`, `main` |
| `algokit.searching` | `binary_search`, `linear_search`, `max_min` |
| `algokit.recursion` | `binomial`, `binomial_table`, `fibonacci`, `fibonacci_recursive`, `hanoi_moves` (yielding `Move` records), `n_queens` |
| `algokit.greedy` | `select_activities`, `coin_change`, `fractional_knapsack` (returning `KnapsackResult`), `job_sequencing` (returning `JobSchedule`) |
| `algokit.dynamic` | `knapsack_01`, `matrix_chain_order` (returning `ChainOrder`, with `minimum_cost` and `parenthesize()`) |
| `algokit.strassen` | `add`, `subtract`, `strassen_multiply`, `format_matrix` |
| `algokit.graphs` | `bfs` (`BFSResult`, with `path_to()`), `dfs` (`DFSResult`), `dijkstra`, `bellman_ford` (raises `NegativeCycleError`), `floyd_warshall`, `kruskal_mst`, `prim_mst` (both returning lists of `Edge`) |

Every sort takes any iterable and returns a new sorted list; the input is
left untouched.

`binary_search` and `linear_search` return an index, or `None` when the value
is absent. `max_min` returns `(maximum, minimum)` and raises `ValueError` on
an empty sequence.

`fibonacci(n)` counts `fibonacci(1) == fibonacci(2) == 1`;
`fibonacci_recursive(n)` counts `F(0) == F(1) == 1`. `hanoi_moves(n)` moves
disks from peg 1 to peg 3 via peg 2 unless other pegs are given, and each
`Move` prints as `Move disk 1 from 1 to 3 via 2`. `n_queens(n)` yields each
solution as a tuple of 1-based column numbers, one per row.

`select_activities` takes `(start, end)` pairs and returns, for each
activity, its position in the greedy selection or 0 if it was not chosen.
`coin_change` returns how many coins of each denomination are used, largest
first. `fractional_knapsack` and `knapsack_01` take `(profit, weight)` items;
`knapsack_01` returns a 0/1 list of taken items and the best profit.
`job_sequencing` takes `(profit, deadline)` jobs and returns the slots, each
holding a job index or `None`, and the total profit.

## Graphs

Graph functions take an adjacency matrix: a square list of rows of integers,
where a zero entry means there is no edge. Unreachable vertices have distance
`math.inf`. `floyd_warshall` returns every intermediate matrix D0..Dn, the
last holding all-pairs shortest distances. `kruskal_mst` reads only the upper
triangle of the matrix; `prim_mst` grows from vertex 0 and raises
`ValueError` when the graph is not connected.

```python
from algokit.graphs import NegativeCycleError, bellman_ford, bfs

graph = [
    [0, 1, 1, 0],
    [0, 0, 0, 1],
    [0, 0, 0, 1],
    [0, 0, 0, 0],
]
result = bfs(graph, 0)
result.order        # [0, 1, 2, 3]
result.path_to(3)   # [0, 1, 3]

try:
    distances = bellman_ford(graph, 0)
except NegativeCycleError:
    print("the graph holds a negative cycle")
```

## Other examples

```python
from algokit.dynamic import matrix_chain_order
from algokit.recursion import binomial
from algokit.searching import binary_search
from algokit.strassen import format_matrix, strassen_multiply

binary_search([1, 3, 5, 7, 9], 7)   # 3
binomial(5, 2)                      # 10

order = matrix_chain_order([10, 20, 30, 40])
order.minimum_cost                  # 18000
order.parenthesize()                # '((A1*A2)*A3)'

product = strassen_multiply([[1, 2], [3, 4]], [[5, 6], [7, 8]])
print(format_matrix(product, "Matrix 3"))
```

`strassen_multiply` accepts matrices of any compatible shape, padding them
with zeros to a power-of-two square and cropping the result; it raises
`ValueError` when the inner dimensions differ.

## Sorting benchmark

The `algokit-bench` command times one sorting algorithm on random data of
10, 100, ... up to 10**N elements, prints each timing and writes a table to
a file:

```
algokit-bench bubble
algokit-bench merge --max-exponent 4 --seed 1 --output merge.txt
```

The algorithm is one of `bubble`, `insertion`, `selection`, `heap`, `merge`,
`quick-hoare` and `quick-lomuto`. Options:

- `--max-exponent N`: largest input is 10**N elements (default 6)
- `--output FILE`: results file (default `<algorithm>_sort.txt`)
- `--seed SEED`: seed for the random data

The same measurement is available in code through
`algokit.sorting.benchmark(sort, sizes, rng)`, which yields
`(size, cpu_seconds)` pairs.

## What it does not do

Apart from `algokit-bench`, the package has no commands and does not prompt
for input: each algorithm is a function that takes its data as arguments and
returns its result rather than printing it.