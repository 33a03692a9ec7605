import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.strassen import add, format_matrix, strassen_multiply, subtract


def matrices(rows, cols):
    return st.lists(
        st.lists(st.integers(-20, 20), min_size=cols, max_size=cols),
        min_size=rows,
        max_size=rows,
    )


def identity(n):
    return [[int(i == j) for j in range(n)] for i in range(n)]


dims = st.integers(1, 6)


def test_two_by_two_product():
    assert strassen_multiply([[1, 2], [3, 4]], [[5, 6], [7, 8]]) == [[19, 22], [43, 50]]


def test_one_by_one():
    assert strassen_multiply([[3]], [[4]]) == [[12]]


def test_mismatched_sizes_rejected():
    with pytest.raises(ValueError):
        strassen_multiply([[1, 2]], [[1, 2]])


def test_ragged_matrix_rejected():
    with pytest.raises(ValueError):
        strassen_multiply([[1, 2], [3]], [[1], [2]])


def test_add_shape_mismatch_rejected():
    with pytest.raises(ValueError):
        add([[1]], [[1, 2]])


@given(dims.flatmap(lambda n: st.tuples(matrices(n, n), matrices(n, n))))
def test_add_subtract_round_trip(pair):
    a, b = pair
    assert subtract(add(a, b), b) == a


@given(st.tuples(dims, dims).flatmap(lambda rc: matrices(*rc)))
def test_identity_is_neutral(a):
    rows, cols = len(a), len(a[0])
    assert strassen_multiply(a, identity(cols)) == a
    assert strassen_multiply(identity(rows), a) == a


@given(
    st.tuples(dims, dims, dims).flatmap(
        lambda d: st.tuples(
            matrices(d[0], d[1]), matrices(d[1], d[2]), matrices(d[1], d[2])
        )
    )
)
def test_distributes_over_addition(triple):
    a, b, c = triple
    assert strassen_multiply(a, add(b, c)) == add(
        strassen_multiply(a, b), strassen_multiply(a, c)
    )


@given(
    st.tuples(dims, dims, dims, dims).flatmap(
        lambda d: st.tuples(
            matrices(d[0], d[1]), matrices(d[1], d[2]), matrices(d[2], d[3])
        )
    )
)
def test_associative_and_shaped(triple):
    a, b, c = triple
    ab = strassen_multiply(a, b)
    assert len(ab) == len(a) and len(ab[0]) == len(b[0])
    assert strassen_multiply(ab, c) == strassen_multiply(a, strassen_multiply(b, c))


def test_format_matrix():
    assert format_matrix([[1, 2], [3, 4]], "Matrix 1") == "Matrix 1\n1\t2\t\n3\t4\t\n"