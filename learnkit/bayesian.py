"""Bayesian linear regression with a Gaussian prior over the weights."""

from __future__ import annotations

from collections.abc import Sequence

from learnkit.matrix import Matrix, invert, multiply, transpose


class BayesianLinearRegression:
    """Conjugate Bayesian linear regression on a fixed design matrix.

    ``alpha`` is the precision of the isotropic prior over the weights and
    ``beta`` the precision of the observation noise.
    """

    def __init__(self, alpha: float, beta: float) -> None:
        self.alpha = alpha
        self.beta = beta
        self._covariance: Matrix = []
        self._mean: list[float] = []

    def fit(self, phi: Sequence[Sequence[float]], t: Sequence[float]) -> None:
        """Compute the posterior over weights from design matrix ``phi`` and targets ``t``."""
        phi_t = transpose(phi)
        gram = multiply(phi_t, phi)
        precision = [
            [self.beta * g + (self.alpha if i == j else 0.0) for j, g in enumerate(row)]
            for i, row in enumerate(gram)
        ]
        self._covariance = invert(precision)
        projected = multiply(phi_t, [[v] for v in t])
        self._mean = [
            self.beta * row[0] for row in multiply(self._covariance, projected)
        ]

    def predict(self, phi_new: Sequence[Sequence[float]]) -> list[float]:
        """Posterior predictive mean for each row of ``phi_new``."""
        return [
            sum(w * v for w, v in zip(self._mean, row)) for row in phi_new
        ]

    def predictive_variance(self, phi_new: Sequence[Sequence[float]]) -> list[float]:
        """Posterior predictive variance 1/beta + phi^T S_N phi for each row."""
        if not self._covariance:
            raise RuntimeError("model has not been fitted")
        variances = []
        for row in phi_new:
            s_phi = [sum(c * v for c, v in zip(cov_row, row)) for cov_row in self._covariance]
            variances.append(1.0 / self.beta + sum(v * s for v, s in zip(row, s_phi)))
        return variances

    def weights(self) -> list[float]:
        """Posterior mean of the weights."""
        return list(self._mean)