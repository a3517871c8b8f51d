"""Descriptive statistics over sequences of numbers."""

from __future__ import annotations

import math
from collections.abc import Sequence


def mean(data: Sequence[float]) -> float:
    """Arithmetic mean; 0.0 for empty data."""
    if not data:
        return 0.0
    return sum(data) / len(data)


def variance(data: Sequence[float]) -> float:
    """Population variance; 0.0 for empty data."""
    if not data:
        return 0.0
    centre = mean(data)
    return sum((v - centre) ** 2 for v in data) / len(data)


def std_dev(data: Sequence[float]) -> float:
    """Population standard deviation; 0.0 for empty data."""
    return math.sqrt(variance(data))