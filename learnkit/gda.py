"""Gaussian discriminant analysis with a shared covariance matrix."""

from __future__ import annotations

import math
from collections.abc import Sequence

from learnkit.matrix import Matrix, invert

_RIDGE = 1e-6


def _column_means(rows: Sequence[Sequence[float]]) -> list[float]:
    if not rows:
        return []
    return [sum(column) / len(rows) for column in zip(*rows)]


class GaussianDiscriminantAnalysis:
    """Linear discriminant classifier with one Gaussian per class."""

    def __init__(self) -> None:
        self._means: Matrix = []
        self._covariance: Matrix = []
        self._priors: list[float] = []
        self._classes: list[int] = []

    def fit(self, x: Sequence[Sequence[float]], y: Sequence[int]) -> None:
        """Estimate class means, priors and the pooled covariance.

        Does nothing when ``x`` is empty.
        """
        m = len(x)
        if m == 0:
            return
        if len(y) != m:
            raise ValueError("x and y must have the same number of rows")
        d = len(x[0])

        classes = sorted(set(y))
        groups: dict[int, list[Sequence[float]]] = {label: [] for label in classes}
        for row, label in zip(x, y):
            groups[label].append(row)

        means = {label: _column_means(rows) for label, rows in groups.items()}

        cov = [[0.0] * d for _ in range(d)]
        for row, label in zip(x, y):
            diff = [v - mu for v, mu in zip(row, means[label])]
            for i, di in enumerate(diff):
                cov_row = cov[i]
                for j, dj in enumerate(diff):
                    cov_row[j] += di * dj
        covariance = [[v / m for v in row] for row in cov]
        for i, row in enumerate(covariance):
            row[i] += _RIDGE

        self._classes = classes
        self._means = [means[label] for label in classes]
        self._priors = [len(groups[label]) / m for label in classes]
        self._covariance = covariance

    def predict(self, x: Sequence[Sequence[float]]) -> list[int]:
        """Most probable class label for each row of ``x``."""
        if not self._classes:
            raise RuntimeError("model has not been fitted")
        cov_inv = invert(self._covariance)

        # Per class: Sigma^-1 mu and the constant term of the discriminant.
        weights = []
        for mu, prior in zip(self._means, self._priors):
            w = [sum(c * m for c, m in zip(inv_row, mu)) for inv_row in cov_inv]
            quad = sum(m * wi for m, wi in zip(mu, w))
            weights.append((w, -0.5 * quad + math.log(prior)))

        predictions = []
        for row in x:
            best_score = -1e12
            best_class = self._classes[0]
            for label, (w, bias) in zip(self._classes, weights):
                score = sum(v * wi for v, wi in zip(row, w)) + bias
                if score > best_score:
                    best_score = score
                    best_class = label
            predictions.append(best_class)
        return predictions

    def class_means(self) -> Matrix:
        """Mean vector of each class, in the order of ``classes()``."""
        return [list(row) for row in self._means]

    def covariance(self) -> Matrix:
        """Shared covariance matrix, with a small ridge on the diagonal."""
        return [list(row) for row in self._covariance]

    def class_priors(self) -> list[float]:
        """Fraction of training rows in each class."""
        return list(self._priors)

    def classes(self) -> list[int]:
        """Distinct class labels in ascending order."""
        return list(self._classes)