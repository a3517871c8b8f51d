"""Least-squares linear regression by the normal equations."""

from __future__ import annotations

from collections.abc import Sequence

from learnkit.matrix import Matrix, invert, multiply, transpose


def closed_form_multi_var(
    x: Sequence[Sequence[float]], t: Sequence[Sequence[float]]
) -> Matrix:
    """Weights W = (X^T X)^-1 X^T T, one column per target."""
    xt = transpose(x)
    return multiply(invert(multiply(xt, x)), multiply(xt, t))


def closed_form_single_var(
    x: Sequence[Sequence[float]], y: Sequence[float]
) -> list[float]:
    """Weights w = (X^T X)^-1 X^T y for a single target."""
    weights = closed_form_multi_var(x, [[v] for v in y])
    return [row[0] for row in weights]