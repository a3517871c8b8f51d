[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "learnkit"
version = "0.1.0"
description = "Small pure-Python toolkit of classic machine learning models: linear, polynomial, Bayesian and logistic regression, basis functions and Gaussian discriminant analysis."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "machine-learning",
    "regression",
    "bayesian",
    "logistic-regression",
    "discriminant-analysis",
    "basis-functions",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["learnkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
