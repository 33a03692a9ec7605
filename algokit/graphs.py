"""Graph algorithms on adjacency matrices.

A matrix entry of zero means "no edge"; any other value is the edge weight
(or, for the traversals, simply marks the edge as present). Distances to
vertices that cannot be reached are ``math.inf``.
"""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass, field

Distance = float


class NegativeCycleError(ValueError):
    """Raised when a negative-weight cycle is reachable from the source."""


@dataclass(frozen=True)
class Edge:
    """A weighted edge between two vertices."""

    source: int
    destination: int
    weight: int

    def __str__(self) -> str:
        return f"{self.source} -- {self.destination} == {self.weight}"


@dataclass(frozen=True)
class BFSResult:
    """Visit order, hop distances and BFS-tree parents from one source."""

    source: int
    order: list[int]
    distance: list[Distance]
    parent: list[int | None] = field(repr=False)

    def path_to(self, target: int) -> list[int] | None:
        """Return the shortest path from the source to ``target``, or None."""
        _check_vertex(target, len(self.parent))
        path = [target]
        while path[-1] != self.source:
            previous = self.parent[path[-1]]
            if previous is None:
                return None
            path.append(previous)
        path.reverse()
        return path


@dataclass(frozen=True)
class DFSResult:
    """Visit order, discovery and finish times, and DFS-forest parents."""

    order: list[int]
    discovery: list[int]
    finish: list[int]
    parent: list[int | None]


def _square(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("adjacency matrix must be square")
    return rows


def _check_vertex(vertex: int, count: int) -> None:
    if not 0 <= vertex < count:
        raise ValueError(f"vertex {vertex} is out of range for {count} vertices")


def bellman_ford(matrix: Sequence[Sequence[int]], source: int) -> list[Distance]:
    """Return shortest distances from ``source``; allows negative weights.

    Raises NegativeCycleError if a negative cycle is reachable.
    """
    rows = _square(matrix)
    n = len(rows)
    _check_vertex(source, n)
    edges = [
        (u, v, weight)
        for u, row in enumerate(rows)
        for v, weight in enumerate(row)
        if weight != 0
    ]
    dist: list[Distance] = [math.inf] * n
    dist[source] = 0
    for _ in range(n - 1):
        for u, v, weight in edges:
            if dist[u] != math.inf and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
    for u, v, weight in edges:
        if dist[u] != math.inf and dist[u] + weight < dist[v]:
            raise NegativeCycleError("negative cycle detected")
    return dist


def bfs(matrix: Sequence[Sequence[int]], source: int) -> BFSResult:
    """Breadth-first search from ``source``, exploring neighbours in index order."""
    rows = _square(matrix)
    n = len(rows)
    _check_vertex(source, n)
    distance: list[Distance] = [math.inf] * n
    parent: list[int | None] = [None] * n
    seen = [False] * n
    order: list[int] = []

    distance[source] = 0
    seen[source] = True
    queue = deque([source])
    while queue:
        u = queue.popleft()
        order.append(u)
        for v, weight in enumerate(rows[u]):
            if weight and not seen[v]:
                seen[v] = True
                distance[v] = distance[u] + 1
                parent[v] = u
                queue.append(v)
    return BFSResult(source, order, distance, parent)


def dfs(matrix: Sequence[Sequence[int]]) -> DFSResult:
    """Depth-first search over every vertex, timestamping discovery and finish."""
    rows = _square(matrix)
    n = len(rows)
    discovery = [0] * n
    finish = [0] * n
    parent: list[int | None] = [None] * n
    visited = [False] * n
    order: list[int] = []
    clock = 0

    for root in range(n):
        if visited[root]:
            continue
        clock += 1
        discovery[root] = clock
        visited[root] = True
        order.append(root)
        stack = [(root, iter(range(n)))]
        while stack:
            u, neighbours = stack[-1]
            for v in neighbours:
                if rows[u][v] and not visited[v]:
                    parent[v] = u
                    clock += 1
                    discovery[v] = clock
                    visited[v] = True
                    order.append(v)
                    stack.append((v, iter(range(n))))
                    break
            else:
                stack.pop()
                clock += 1
                finish[u] = clock
    return DFSResult(order, discovery, finish, parent)


def dijkstra(matrix: Sequence[Sequence[int]], source: int) -> list[Distance]:
    """Return shortest distances from ``source`` for non-negative weights."""
    rows = _square(matrix)
    n = len(rows)
    _check_vertex(source, n)
    dist: list[Distance] = [math.inf] * n
    visited = [False] * n
    dist[source] = 0
    for _ in range(n - 1):
        unvisited = [i for i in range(n) if not visited[i]]
        # Ties go to the highest index.
        u = min(reversed(unvisited), key=dist.__getitem__)
        visited[u] = True
        if dist[u] == math.inf:
            continue
        for v, weight in enumerate(rows[u]):
            if not visited[v] and weight and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
    return dist


def floyd_warshall(matrix: Sequence[Sequence[int]]) -> list[list[list[Distance]]]:
    """Return the distance matrices D0..Dn of the Floyd-Warshall algorithm.

    D0 is the input with missing off-diagonal edges set to infinity; the
    last matrix holds all-pairs shortest distances.
    """
    rows = _square(matrix)
    n = len(rows)
    d: list[list[Distance]] = [
        [math.inf if weight == 0 and i != j else weight for j, weight in enumerate(row)]
        for i, row in enumerate(rows)
    ]
    stages = [[row[:] for row in d]]
    for k in range(n):
        for i in range(n):
            for j in range(n):
                if d[i][k] != math.inf and d[k][j] != math.inf and d[i][k] + d[k][j] < d[i][j]:
                    d[i][j] = d[i][k] + d[k][j]
        stages.append([row[:] for row in d])
    return stages


def _find(parent: list[int], i: int) -> int:
    root = i
    while parent[root] != root:
        root = parent[root]
    while parent[i] != root:
        parent[i], i = root, parent[i]
    return root


def kruskal_mst(matrix: Sequence[Sequence[int]]) -> list[Edge]:
    """Return the edges of a minimum spanning forest of an undirected graph.

    Only the upper triangle of the matrix is read.
    """
    rows = _square(matrix)
    n = len(rows)
    edges = sorted(
        (Edge(i, j, rows[i][j]) for i in range(n) for j in range(i + 1, n) if rows[i][j]),
        key=lambda edge: edge.weight,
    )
    parent = list(range(n))
    rank = [0] * n
    result: list[Edge] = []
    for edge in edges:
        if len(result) >= n - 1:
            break
        x = _find(parent, edge.source)
        y = _find(parent, edge.destination)
        if x == y:
            continue
        result.append(edge)
        if rank[x] < rank[y]:
            parent[x] = y
        elif rank[x] > rank[y]:
            parent[y] = x
        else:
            parent[y] = x
            rank[x] += 1
    return result


def prim_mst(matrix: Sequence[Sequence[int]]) -> list[Edge]:
    """Return the edges of a minimum spanning tree grown from vertex 0.

    Edge i-1 of the result joins vertex i to its tree parent. Raises
    ValueError when the graph is not connected.
    """
    rows = _square(matrix)
    n = len(rows)
    parent: list[int | None] = [None] * n
    weight: list[Distance] = [math.inf] * n
    visited = [False] * n
    if n:
        weight[0] = 0
    for _ in range(n - 1):
        candidates = [i for i in range(n) if not visited[i] and weight[i] != math.inf]
        if not candidates:
            raise ValueError("graph is not connected")
        u = min(candidates, key=weight.__getitem__)
        visited[u] = True
        for v, w in enumerate(rows[u]):
            if w and not visited[v] and w < weight[v]:
                weight[v] = w
                parent[v] = u
    result: list[Edge] = []
    for i in range(1, n):
        p = parent[i]
        if p is None:
            raise ValueError("graph is not connected")
        result.append(Edge(p, i, int(weight[i])))
    return result