"""Binary logistic regression trained by batch gradient descent."""

from __future__ import annotations

import math
from collections.abc import Sequence

_EPSILON = 1e-10


def _sigmoid(z: float) -> float:
    if z >= 0:
        return 1.0 / (1.0 + math.exp(-z))
    e = math.exp(z)
    return e / (1.0 + e)


def _dot(row: Sequence[float], weights: Sequence[float]) -> float:
    return sum(v * w for v, w in zip(row, weights))


class LogisticRegression:
    """Logistic regression for labels 0 and 1, without an implicit bias term."""

    def __init__(
        self, learning_rate: float = 0.01, max_iter: int = 10000, tol: float = 1e-6
    ) -> None:
        self.learning_rate = learning_rate
        self.max_iter = max_iter
        self.tol = tol
        self._weights: list[float] = []
        self._cost_history: list[float] = []

    def _cost(self, x: Sequence[Sequence[float]], y: Sequence[int]) -> float:
        total = 0.0
        for row, label in zip(x, y):
            p = _sigmoid(_dot(row, self._weights))
            total += label * math.log(p + _EPSILON) + (1 - label) * math.log(
                1 - p + _EPSILON
            )
        return -total / len(x)

    def fit(self, x: Sequence[Sequence[float]], y: Sequence[int]) -> None:
        """Train on rows ``x`` and 0/1 labels ``y``.

        Stops after ``max_iter`` steps or once the cost changes by less
        than ``tol``. Does nothing when ``x`` is empty.
        """
        m = len(x)
        if m == 0:
            return
        if len(y) != m:
            raise ValueError("x and y must have the same number of rows")
        d = len(x[0])
        self._weights = [0.0] * d
        self._cost_history = []

        prev_cost = 1e12
        for _ in range(self.max_iter):
            gradients = [0.0] * d
            for row, label in zip(x, y):
                error = _sigmoid(_dot(row, self._weights)) - label
                for j, v in enumerate(row[:d]):
                    gradients[j] += error * v
            self._weights = [
                w - self.learning_rate * g / m for w, g in zip(self._weights, gradients)
            ]
            cost = self._cost(x, y)
            self._cost_history.append(cost)
            if abs(prev_cost - cost) < self.tol:
                break
            prev_cost = cost

    def predict_proba(self, x: Sequence[Sequence[float]]) -> list[float]:
        """Probability of class 1 for each row of ``x``."""
        if x and not self._weights:
            raise RuntimeError("model has not been fitted")
        return [_sigmoid(_dot(row, self._weights)) for row in x]

    def predict(self, x: Sequence[Sequence[float]]) -> list[int]:
        """Class label for each row: 1 when the probability is at least 0.5."""
        return [1 if p >= 0.5 else 0 for p in self.predict_proba(x)]

    def weights(self) -> list[float]:
        """Learned weight vector."""
        return list(self._weights)

    def cost_history(self) -> list[float]:
        """Cross-entropy cost after each training step."""
        return list(self._cost_history)