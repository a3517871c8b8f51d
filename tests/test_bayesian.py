import pytest

from learnkit.bayesian import BayesianLinearRegression


def _line_data():
    xs = [0.0, 1.0, 2.0, 3.0, 4.0]
    phi = [[1.0, x] for x in xs]
    t = [1.0 + 2.0 * x for x in xs]
    return phi, t


def test_recovers_line_with_weak_prior():
    phi, t = _line_data()
    model = BayesianLinearRegression(1e-8, 1e4)
    model.fit(phi, t)
    w = model.weights()
    assert w[0] == pytest.approx(1.0, abs=1e-4)
    assert w[1] == pytest.approx(2.0, abs=1e-4)


def test_single_feature_worked_example():
    model = BayesianLinearRegression(1.0, 1.0)
    model.fit([[1.0]], [3.0])
    assert model.weights() == pytest.approx([1.5])
    assert model.predictive_variance([[1.0]]) == pytest.approx([1.5])


def test_predict_is_dot_product_with_weights():
    phi, t = _line_data()
    model = BayesianLinearRegression(0.5, 2.0)
    model.fit(phi, t)
    w = model.weights()
    new = [[1.0, 10.0], [1.0, -3.0]]
    expected = [w[0] * r[0] + w[1] * r[1] for r in new]
    assert model.predict(new) == pytest.approx(expected)


def test_strong_prior_shrinks_weights():
    phi, t = _line_data()
    weak = BayesianLinearRegression(1e-3, 1.0)
    strong = BayesianLinearRegression(1e6, 1.0)
    weak.fit(phi, t)
    strong.fit(phi, t)
    assert sum(abs(v) for v in strong.weights()) < sum(abs(v) for v in weak.weights())
    assert all(abs(v) < 1e-3 for v in strong.weights())


def test_predictive_variance_at_least_noise():
    phi, t = _line_data()
    beta = 4.0
    model = BayesianLinearRegression(1.0, beta)
    model.fit(phi, t)
    variances = model.predictive_variance([[1.0, 0.0], [1.0, 100.0]])
    assert all(v >= 1.0 / beta for v in variances)
    assert variances[1] > variances[0]


def test_unfitted_predict_gives_zeros():
    model = BayesianLinearRegression(1.0, 1.0)
    assert model.predict([[1.0, 2.0], [3.0, 4.0]]) == [0.0, 0.0]
    assert model.weights() == []


def test_unfitted_variance_raises():
    with pytest.raises(RuntimeError):
        BayesianLinearRegression(1.0, 1.0).predictive_variance([[1.0]])


def test_singular_precision_raises():
    model = BayesianLinearRegression(0.0, 1.0)
    with pytest.raises(ValueError):
        model.fit([[0.0, 0.0], [0.0, 0.0]], [1.0, 2.0])