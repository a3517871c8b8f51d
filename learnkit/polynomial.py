"""Polynomial feature expansion and ridge-regularised polynomial regression."""

from __future__ import annotations

from collections.abc import Sequence

from learnkit.matrix import Matrix, invert, multiply, transpose


def poly_features(x: Sequence[Sequence[float]], degree: int) -> Matrix:
    """Bias column followed by every feature raised to powers 1..degree.

    Columns are grouped by power: all features to the first power, then all
    to the second, and so on.
    """
    if not x:
        raise ValueError("input matrix must have at least one row")
    return [
        [1.0] + [float(v) ** d for d in range(1, degree + 1) for v in row]
        for row in x
    ]


def multivar_poly_features(x: Sequence[Sequence[float]], degree: int) -> Matrix:
    """Polynomial features for multivariate data; same layout as ``poly_features``."""
    return poly_features(x, degree)


def _ridge_solve(
    phi: Matrix, t: Sequence[Sequence[float]], lam: float
) -> Matrix:
    phi_t = transpose(phi)
    gram = multiply(phi_t, phi)
    for i, row in enumerate(gram):
        row[i] += lam
    return multiply(invert(gram), multiply(phi_t, t))


def poly_regression(
    x: Sequence[Sequence[float]],
    y: Sequence[float],
    degree: int,
    lam: float = 1e-5,
) -> list[float]:
    """Polynomial regression weights with L2 regularisation ``lam``."""
    weights = _ridge_solve(poly_features(x, degree), [[v] for v in y], lam)
    return [row[0] for row in weights]


def multivar_poly_regression(
    x: Sequence[Sequence[float]],
    t: Sequence[Sequence[float]],
    degree: int,
    lam: float = 1e-5,
) -> Matrix:
    """Polynomial regression weight matrix, one column per target."""
    return _ridge_solve(multivar_poly_features(x, degree), t, lam)