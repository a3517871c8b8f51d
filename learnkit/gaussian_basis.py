"""Gaussian radial basis functions over univariate inputs."""

from __future__ import annotations

import math
from collections.abc import Sequence

from learnkit.matrix import Matrix


def gaussian_basis(x: float, mu: float, s: float) -> float:
    """Value of the Gaussian bump centred on ``mu`` with width ``s`` at ``x``."""
    return math.exp(-((x - mu) ** 2) / (2 * s * s))


def gaussian_features(x: float, centers: Sequence[float], s: float) -> list[float]:
    """Gaussian basis values of ``x`` for every centre."""
    return [gaussian_basis(x, mu, s) for mu in centers]


def gaussian_feature_matrix(
    x: Sequence[Sequence[float]], centers: Sequence[float], s: float
) -> Matrix:
    """Transform each row's first value into Gaussian features.

    Empty rows give a row of zeros.
    """
    return [
        gaussian_features(row[0], centers, s) if row else [0.0] * len(centers)
        for row in x
    ]


def gaussian_centers(data: Sequence[float], num_centers: int) -> list[float]:
    """Evenly spaced centres spanning the range of ``data``.

    A single centre sits at the midpoint; empty data or a non-positive
    count gives no centres.
    """
    if not data or num_centers <= 0:
        return []
    low, high = min(data), max(data)
    if num_centers == 1:
        return [(low + high) / 2.0]
    step = (high - low) / (num_centers - 1)
    return [low + i * step for i in range(num_centers)]