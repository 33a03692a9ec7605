"""Matrix arithmetic with Strassen's multiplication."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = list[list[int]]


def _shape(matrix: Sequence[Sequence[int]]) -> tuple[int, int]:
    if not matrix or not matrix[0]:
        raise ValueError("matrix must not be empty")
    cols = len(matrix[0])
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows must have equal length")
    return len(matrix), cols


def add(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Return the elementwise sum of two matrices of equal shape."""
    if _shape(a) != _shape(b):
        raise ValueError("matrices must have the same shape")
    return [[x + y for x, y in zip(ra, rb)] for ra, rb in zip(a, b)]


def subtract(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Return the elementwise difference of two matrices of equal shape."""
    if _shape(a) != _shape(b):
        raise ValueError("matrices must have the same shape")
    return [[x - y for x, y in zip(ra, rb)] for ra, rb in zip(a, b)]


def _quarters(m: Matrix) -> tuple[Matrix, Matrix, Matrix, Matrix]:
    h = len(m) // 2
    return (
        [row[:h] for row in m[:h]],
        [row[h:] for row in m[:h]],
        [row[:h] for row in m[h:]],
        [row[h:] for row in m[h:]],
    )


def _strassen(a: Matrix, b: Matrix) -> Matrix:
    if len(a) == 1:
        return [[a[0][0] * b[0][0]]]
    a11, a12, a21, a22 = _quarters(a)
    b11, b12, b21, b22 = _quarters(b)

    p1 = _strassen(a11, subtract(b12, b22))
    p2 = _strassen(add(a11, a12), b22)
    p3 = _strassen(add(a21, a22), b11)
    p4 = _strassen(a22, subtract(b21, b11))
    p5 = _strassen(add(a11, a22), add(b11, b22))
    p6 = _strassen(subtract(a12, a22), add(b21, b22))
    p7 = _strassen(subtract(a11, a21), add(b11, b12))

    c11 = add(subtract(add(p5, p4), p2), p6)
    c12 = add(p1, p2)
    c21 = add(p3, p4)
    c22 = subtract(subtract(add(p5, p1), p3), p7)

    top = [left + right for left, right in zip(c11, c12)]
    bottom = [left + right for left, right in zip(c21, c22)]
    return top + bottom


def _pad(m: Sequence[Sequence[int]], size: int) -> Matrix:
    padded = [list(row) + [0] * (size - len(row)) for row in m]
    padded.extend([0] * size for _ in range(size - len(m)))
    return padded


def strassen_multiply(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Multiply two matrices with Strassen's method.

    Operands are padded with zeros to a common power-of-two square size and
    the product is cropped back to ``rows(a) x cols(b)``.
    """
    rows, inner = _shape(a)
    inner_b, cols = _shape(b)
    if inner != inner_b:
        raise ValueError("invalid matrix size: multiplication not possible")
    size = 1
    while size < max(rows, inner, cols):
        size *= 2
    product = _strassen(_pad(a, size), _pad(b, size))
    return [row[:cols] for row in product[:rows]]


def format_matrix(matrix: Sequence[Sequence[int]], name: str) -> str:
    """Render a matrix under its name, each entry followed by a tab."""
    lines = [name]
    lines.extend("".join(f"{value}\t" for value in row) for row in matrix)
    return "\n".join(lines) + "\n"