# learnkit

A small, dependency-free Python toolkit of classic machine learning models.
Matrices are plain lists of lists of floats, so every step is easy to inspect.

## What is inside

- `learnkit.matrix` — `transpose`, `multiply` and `invert`. `invert` uses
  Gauss–Jordan elimination without pivoting and raises `ValueError` for a
  non-square matrix or when a zero turns up on the diagonal; `multiply`
  raises `ValueError` for incompatible shapes.
- `learnkit.stats` — `mean`, `variance`, `std_dev` (population statistics;
  each returns `0.0` for empty data).
- `learnkit.csvdata` — `parse_csv(filename, skip_header=True)` reads a
  comma-separated file of numbers into a matrix. Empty lines are skipped,
  fields that do not start with a number become `0.0`, and a missing file
  raises `FileNotFoundError`.
- `learnkit.closed_form` — least-squares weights by the normal equations:
  `closed_form_single_var` (one target) and `closed_form_multi_var`
  (one weight column per target).
- `learnkit.polynomial` — `poly_features` / `multivar_poly_features`
  (a bias column, then every feature to powers 1..degree, grouped by power)
  and ridge-regularised `poly_regression` / `multivar_poly_regression`
  (`lam` defaults to `1e-5`).
- `learnkit.gaussian_basis`, `learnkit.sigmoidal_basis` — Gaussian and
  logistic-sigmoid basis functions on the first column of each row, with
  `gaussian_centers` / `sigmoidal_centers` spreading centres evenly over
  the data range.
- `learnkit.basis` — `transform_features(x, choice, p1, p2)` with a
  `BasisFunction` choice (`POLYNOMIAL`, `GAUSSIAN`, `SIGMOIDAL`); `p1` is the
  degree or the number of centres, `p2` the Gaussian width or sigmoid slope.
  `extract_column` returns one column, skipping rows too short to have it.
- `learnkit.bayesian` — `BayesianLinearRegression(alpha, beta)` with `fit`,
  `predict`, `predictive_variance` and `weights`.
- `learnkit.gda` — `GaussianDiscriminantAnalysis` with a shared covariance
  (plus a `1e-6` ridge on its diagonal): `fit`, `predict`, `class_means`,
  `covariance`, `class_priors`, `classes`.
- `learnkit.logistic` — `LogisticRegression(learning_rate=0.01,
  max_iter=10000, tol=1e-6)` trained by batch gradient descent on 0/1
  labels: `fit`, `predict_proba`, `predict`, `weights`, `cost_history`.
  No bias term is added; include a column of ones yourself.

Predicting with `GaussianDiscriminantAnalysis` or `LogisticRegression`
before fitting, or asking `BayesianLinearRegression` for a predictive
variance before fitting, raises `RuntimeError`.

## Installation

```
pip install .
```

## Examples

Fit a quadratic:

```python
from learnkit.polynomial import poly_regression

x = [[0.0], [1.0], [2.0], [3.0]]
y = [1.0, 2.0, 5.0, 10.0]
weights = poly_regression(x, y, 2, 1e-5)   # approximately [1, 0, 1]
```

Bayesian regression on Gaussian basis features:

```python
from learnkit.basis import BasisFunction, transform_features
from learnkit.bayesian import BayesianLinearRegression

x = [[0.0], [0.5], [1.0], [1.5], [2.0]]
t = [0.0, 0.48, 0.84, 1.0, 0.91]
phi = transform_features(x, BasisFunction.GAUSSIAN, 5, 0.5)

model = BayesianLinearRegression(alpha=2.0, beta=25.0)
model.fit(phi, t)
means = model.predict(phi)
spread = model.predictive_variance(phi)
```

Classification:

```python
from learnkit.logistic import LogisticRegression
from learnkit.gda import GaussianDiscriminantAnalysis

x = [[1.0, 0.0], [1.0, 1.0], [1.0, 3.0], [1.0, 4.0]]
y = [0, 0, 1, 1]

clf = LogisticRegression(learning_rate=0.1, max_iter=5000, tol=1e-6)
clf.fit(x, y)
print(clf.predict(x), clf.weights())

gda = GaussianDiscriminantAnalysis()
gda.fit([[0.0], [1.0], [3.0], [4.0]], y)
print(gda.predict([[0.5], [3.5]]), gda.classes())
```

Loading data:

```python
from learnkit.csvdata import parse_csv

rows = parse_csv("data.csv", True)  # skip the header line
```

## What it does not do

learnkit is a library only: it has no command-line program, no plotting
and no way to save or load fitted models. Matrix inversion does no pivoting,
so a matrix with a zero on the diagonal during elimination is reported as
singular even when it is invertible.

## Running the tests

```
pip install .[test]
pytest
```