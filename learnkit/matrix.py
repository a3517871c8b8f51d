"""Dense matrix helpers on lists of rows."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = list[list[float]]


def _require_rows(m: Sequence[Sequence[float]], name: str) -> None:
    if not m or not m[0]:
        raise ValueError(f"{name} must have at least one row and one column")


def transpose(m: Sequence[Sequence[float]]) -> Matrix:
    """Return the transpose of ``m``."""
    _require_rows(m, "matrix")
    width = len(m[0])
    if any(len(row) != width for row in m):
        raise ValueError("matrix rows must all have the same length")
    return [list(column) for column in zip(*m)]


def multiply(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Return the matrix product ``a`` times ``b``."""
    _require_rows(a, "left operand")
    _require_rows(b, "right operand")
    inner = len(a[0])
    if inner != len(b):
        raise ValueError(
            "matrix dimensions are incompatible for multiplication: "
            f"{len(a)}x{inner} and {len(b)}x{len(b[0])}"
        )
    if any(len(row) != inner for row in a):
        raise ValueError("left operand rows must all have the same length")
    columns = transpose(b)
    return [
        [sum(x * y for x, y in zip(row, column)) for column in columns]
        for row in a
    ]


def invert(m: Sequence[Sequence[float]]) -> Matrix:
    """Invert a square matrix by Gauss-Jordan elimination without pivoting.

    Raises ``ValueError`` if the matrix is not square or a zero appears on
    the diagonal during elimination.
    """
    n = len(m)
    if any(len(row) != n for row in m):
        raise ValueError("matrix is not square")

    aug = [
        [float(v) for v in row] + [1.0 if j == i else 0.0 for j in range(n)]
        for i, row in enumerate(m)
    ]

    for i, pivot_row in enumerate(aug):
        pivot = pivot_row[i]
        if pivot == 0.0:
            raise ValueError("matrix is singular and cannot be inverted")
        pivot_row[:] = [v / pivot for v in pivot_row]
        for k, row in enumerate(aug):
            if k != i:
                factor = row[i]
                row[:] = [a - factor * b for a, b in zip(row, pivot_row)]

    return [row[n:] for row in aug]