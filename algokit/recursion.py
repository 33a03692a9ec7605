"""Recursive classics: binomials, Fibonacci, Towers of Hanoi, N-Queens."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from functools import lru_cache


@lru_cache(maxsize=None)
def _binomial(n: int, k: int) -> int:
    if k > n:
        return 0
    if k == n or k == 0:
        return 1
    return _binomial(n - 1, k - 1) + _binomial(n - 1, k)


def binomial(n: int, k: int) -> int:
    """Return C(n, k) via Pascal's rule; 0 when ``k > n``."""
    if n < 0 or k < 0:
        raise ValueError("n and k must be non-negative")
    return _binomial(n, k)


def binomial_table(n: int) -> list[list[int]]:
    """Return Pascal's triangle rows 0..n, row i holding C(i, 0)..C(i, i)."""
    if n < 0:
        raise ValueError("n must be non-negative")
    rows: list[list[int]] = []
    for i in range(n + 1):
        if i == 0:
            rows.append([1])
        else:
            previous = rows[-1]
            rows.append([1, *(a + b for a, b in zip(previous, previous[1:])), 1])
    return rows


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, counting fibonacci(1) == fibonacci(2) == 1."""
    if n < 1:
        raise ValueError("n must be at least 1")
    current, following = 1, 1
    for _ in range(n - 1):
        current, following = following, current + following
    return current


@lru_cache(maxsize=None)
def _fib_rec(n: int) -> int:
    if n <= 1:
        return 1
    return _fib_rec(n - 1) + _fib_rec(n - 2)


def fibonacci_recursive(n: int) -> int:
    """Return F(n) with F(0) == F(1) == 1 and F(n) = F(n-1) + F(n-2)."""
    return _fib_rec(n)


@dataclass(frozen=True)
class Move:
    """Moving one disk between pegs."""

    disk: int
    source: int
    target: int
    via: int

    def __str__(self) -> str:
        return f"Move disk {self.disk} from {self.source} to {self.target} via {self.via}"


def _hanoi(n: int, start: int, end: int, via: int) -> Iterator[Move]:
    if n == 1:
        yield Move(1, start, end, via)
        return
    yield from _hanoi(n - 1, start, via, end)
    yield Move(n, start, end, via)
    yield from _hanoi(n - 1, via, end, start)


def hanoi_moves(n: int, start: int = 1, end: int = 3, via: int = 2) -> Iterator[Move]:
    """Yield the moves that carry ``n`` disks from ``start`` to ``end``."""
    if n < 1:
        raise ValueError("number of disks must be at least 1")
    return _hanoi(n, start, end, via)


def n_queens(n: int) -> Iterator[tuple[int, ...]]:
    """Yield every N-Queens solution as 1-based column numbers, row by row."""
    if n < 0:
        raise ValueError("n must be non-negative")
    board: list[int] = []

    def safe(col: int) -> bool:
        row = len(board)
        return all(
            placed != col and placed - r != col - row and placed + r != col + row
            for r, placed in enumerate(board)
        )

    def place() -> Iterator[tuple[int, ...]]:
        if len(board) == n:
            yield tuple(col + 1 for col in board)
            return
        for col in range(n):
            if safe(col):
                board.append(col)
                yield from place()
                board.pop()

    return place()