import pytest

from learnkit.stats import mean, std_dev, variance


def test_empty_data_gives_zero():
    assert mean([]) == 0.0
    assert variance([]) == 0.0
    assert std_dev([]) == 0.0


def test_mean_of_constant_is_constant():
    assert mean([3.5, 3.5, 3.5]) == 3.5


def test_mean_is_shift_equivariant():
    data = [1.0, 4.0, 9.0, 16.0]
    shifted = [v + 10.0 for v in data]
    assert mean(shifted) == pytest.approx(mean(data) + 10.0)


def test_variance_of_constant_is_zero():
    assert variance([7.0] * 5) == 0.0


def test_variance_is_shift_invariant():
    data = [1.0, 4.0, 9.0, 16.0]
    shifted = [v - 100.0 for v in data]
    assert variance(shifted) == pytest.approx(variance(data))


def test_population_variance_worked_example():
    data = [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]
    assert variance(data) == pytest.approx(4.0)
    assert std_dev(data) == pytest.approx(2.0)


def test_std_dev_squared_is_variance():
    data = [0.3, -1.2, 5.5, 2.25]
    assert std_dev(data) ** 2 == pytest.approx(variance(data))