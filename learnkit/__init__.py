"""Pure-Python regression, basis-function and classification models."""

__version__ = "0.1.0"