"""Selecting and applying a basis-function feature transform."""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum

from learnkit.gaussian_basis import gaussian_centers, gaussian_feature_matrix
from learnkit.matrix import Matrix
from learnkit.polynomial import poly_features
from learnkit.sigmoidal_basis import sigmoidal_centers, sigmoidal_feature_matrix


class BasisFunction(IntEnum):
    """Kinds of basis function available to ``transform_features``."""

    POLYNOMIAL = 1
    GAUSSIAN = 2
    SIGMOIDAL = 3


def extract_column(x: Sequence[Sequence[float]], index: int = 0) -> list[float]:
    """Values in column ``index``, skipping rows too short to have one."""
    return [row[index] for row in x if index < len(row)]


def transform_features(
    x: Sequence[Sequence[float]],
    choice: BasisFunction | int,
    p1: float,
    p2: float = 0.0,
) -> Matrix:
    """Apply the chosen basis to ``x``.

    For polynomials ``p1`` is the degree. For Gaussian and sigmoidal bases
    ``p1`` is the number of centres, spread over the range of the first
    column, and ``p2`` is the scale or slope. Raises ``ValueError`` for an
    unknown choice.
    """
    kind = BasisFunction(choice)
    count = int(p1)
    if kind is BasisFunction.POLYNOMIAL:
        return poly_features(x, count)
    column = extract_column(x, 0)
    if kind is BasisFunction.GAUSSIAN:
        return gaussian_feature_matrix(x, gaussian_centers(column, count), p2)
    return sigmoidal_feature_matrix(x, sigmoidal_centers(column, count), p2)