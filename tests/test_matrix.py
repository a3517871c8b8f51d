import pytest

from learnkit.matrix import invert, multiply, transpose


def _identity(n):
    return [[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)]


def _assert_close(a, b, tol=1e-9):
    assert len(a) == len(b)
    for ra, rb in zip(a, b):
        assert ra == pytest.approx(rb, abs=tol)


def test_transpose_row_to_column():
    assert transpose([[1.0, 2.0, 3.0]]) == [[1.0], [2.0], [3.0]]


def test_transpose_is_involution():
    m = [[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]]
    assert transpose(transpose(m)) == m


def test_transpose_empty_raises():
    with pytest.raises(ValueError):
        transpose([])


def test_multiply_by_identity_is_unchanged():
    m = [[1.5, -2.0, 3.0], [4.0, 0.5, -6.0]]
    assert multiply(m, _identity(3)) == m
    assert multiply(_identity(2), m) == m


def test_multiply_shape():
    a = [[1.0, 2.0, 3.0]]
    b = [[1.0], [2.0], [3.0]]
    assert len(multiply(b, a)) == 3
    assert all(len(row) == 3 for row in multiply(b, a))
    assert len(multiply(a, b)) == 1 and len(multiply(a, b)[0]) == 1


def test_multiply_transpose_product_rule():
    a = [[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]]
    b = [[7.0, 8.0, 9.0], [1.0, 0.0, 2.0]]
    assert transpose(multiply(a, b)) == multiply(transpose(b), transpose(a))


def test_multiply_incompatible_raises():
    with pytest.raises(ValueError):
        multiply([[1.0, 2.0]], [[1.0, 2.0]])


def test_invert_times_original_is_identity():
    m = [[4.0, 7.0, 2.0], [3.0, 6.0, 1.0], [2.0, 5.0, 3.0]]
    inv = invert(m)
    _assert_close(multiply(m, inv), _identity(3))
    _assert_close(multiply(inv, m), _identity(3))


def test_invert_diagonal():
    inv = invert([[2.0, 0.0], [0.0, 4.0]])
    _assert_close(inv, [[0.5, 0.0], [0.0, 0.25]])


def test_invert_does_not_modify_input():
    m = [[2.0, 1.0], [1.0, 3.0]]
    invert(m)
    assert m == [[2.0, 1.0], [1.0, 3.0]]


def test_invert_singular_raises():
    with pytest.raises(ValueError):
        invert([[1.0, 2.0], [2.0, 4.0]])


def test_invert_non_square_raises():
    with pytest.raises(ValueError):
        invert([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])