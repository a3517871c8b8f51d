"""Logistic sigmoid basis functions over univariate inputs."""

from __future__ import annotations

import math
from collections.abc import Sequence

from learnkit.matrix import Matrix


def sigmoidal_basis(x: float, mu: float, s: float) -> float:
    """Logistic sigmoid with slope ``s`` centred on ``mu``, evaluated at ``x``."""
    t = s * (x - mu)
    if t >= 0:
        return 1.0 / (1.0 + math.exp(-t))
    e = math.exp(t)
    return e / (1.0 + e)


def sigmoidal_features(x: float, centers: Sequence[float], s: float) -> list[float]:
    """Sigmoid basis values of ``x`` for every centre."""
    return [sigmoidal_basis(x, mu, s) for mu in centers]


def sigmoidal_feature_matrix(
    x: Sequence[Sequence[float]], centers: Sequence[float], s: float
) -> Matrix:
    """Transform each row's first value into sigmoid features.

    Empty rows give a row of zeros.
    """
    return [
        sigmoidal_features(row[0], centers, s) if row else [0.0] * len(centers)
        for row in x
    ]


def sigmoidal_centers(data: Sequence[float], num_centers: int) -> list[float]:
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