"""Dense vectors, matrices, linear solvers and ridge regression in pure Python."""

__version__ = "0.1.0"