"""Demonstrations of the vector, matrix and linear-system types."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from .linear import LinearSystem, PosSymLinSystem
from .matrix import Matrix
from .vector import Vector


def _solution_lines(x: Vector) -> str:
    return "".join(f"x({i}) = {value:g}\n" for i, value in enumerate(x, start=1))


def vector_demo() -> str:
    """Exercise vector addition, scaling and the dot product."""
    v1 = Vector.from_values([1.0, 2.0, 3.0])
    v2 = +v1
    v3 = v1 + v2
    v4 = v1 * 2.0
    lines = ["Testing Vector operations:\n"]
    lines.extend(
        f"v3({i}) = {a:g}, v4({i}) = {b:g}\n"
        for i, (a, b) in enumerate(zip(v3, v4), start=1)
    )
    lines.append(f"Dot product: {v1 * v2:g}\n\n")
    return "".join(lines)


def matrix_demo() -> str:
    """Exercise matrix arithmetic, determinant, inverse and pseudo-inverse."""
    a = Matrix.from_rows([[1, 2], [3, 4]])
    b = +a
    c = a + b
    d = a * 2.0
    e = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
    return (
        "Testing Matrix operations:\n"
        f"C(1,1) = {c[0, 0]:g}, D(2,2) = {d[1, 1]:g}\n"
        f"Determinant: {a.determinant():g}\n"
        f"Inverse: \n{a.inverse()}\n"
        f"Pseudo-inverse of 2x3 matrix:\n{e.pseudo_inverse()}\n\n"
    )


def gaussian_demo() -> str:
    """Solve a tridiagonal system by Gaussian elimination."""
    a = Matrix.from_rows([[2, -1, 0], [-1, 2, -1], [0, -1, 2]])
    b = Vector.from_values([1, 0, 1])
    x = LinearSystem(a, b).solve()
    return (
        "Testing LinearSystem (Gaussian Elimination):\n"
        + _solution_lines(x)
        + "\n"
    )


def conjugate_gradient_demo() -> str:
    """Solve a symmetric system by conjugate gradients."""
    a = Matrix.from_rows([[4, 1, 2], [1, 3, 0], [2, 0, 1]])
    b = Vector.from_values([4, 5, 6])
    x = PosSymLinSystem(a, b).solve()
    return (
        "Testing PosSymLinSystem (Conjugate Gradient):\n"
        + _solution_lines(x)
        + "\n"
    )


def least_squares_demo() -> str:
    """Fit an over-determined system with the pseudo-inverse."""
    a = Matrix.from_rows([[1, 1], [1, 2], [1, 3], [1, 4]])
    b = Vector.from_values([6, 5, 7, 10])
    x = a.pseudo_inverse() * b
    return (
        "Testing over-determined system with pseudo-inverse:\n"
        "Estimated solution (least-squares):\n"
        + _solution_lines(x)
        + "\n"
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Run the linear algebra demonstrations."
    )
    parser.parse_args(argv)
    for demo in (
        vector_demo,
        matrix_demo,
        gaussian_demo,
        conjugate_gradient_demo,
        least_squares_demo,
    ):
        print(demo(), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())