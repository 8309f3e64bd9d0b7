"""Square linear systems solved by Gaussian elimination or conjugate gradients."""

from __future__ import annotations

import math

from .matrix import Matrix
from .vector import Vector


class LinearSystem:
    """The system ``A x = b`` for a square matrix ``A``."""

    def __init__(self, a: Matrix, b: Vector) -> None:
        if a.num_rows != a.num_cols:
            raise ValueError("Matrix must be square.")
        if a.num_rows != len(b):
            raise ValueError("Matrix and vector size mismatch.")
        self._a = +a
        self._b = +b

    @property
    def size(self) -> int:
        """Number of unknowns."""
        return self._a.num_rows

    def solve(self) -> Vector:
        """Solve by Gaussian elimination with partial pivoting."""
        n = self.size
        rows = self._a.to_rows()
        rhs = self._b.to_list()

        for i in range(n):
            pivot_row = max(range(i, n), key=lambda k: abs(rows[k][i]))
            rows[i], rows[pivot_row] = rows[pivot_row], rows[i]
            rhs[i], rhs[pivot_row] = rhs[pivot_row], rhs[i]
            pivot = rows[i][i]
            if pivot == 0:
                raise ValueError("Matrix is singular.")
            for k in range(i + 1, n):
                factor = rows[k][i] / pivot
                rows[k] = [a - factor * b for a, b in zip(rows[k], rows[i])]
                rhs[k] -= factor * rhs[i]

        x = [0.0] * n
        for i in reversed(range(n)):
            tail = sum(a * b for a, b in zip(rows[i][i + 1:], x[i + 1:]))
            x[i] = (rhs[i] - tail) / rows[i][i]
        return Vector.from_values(x)


class PosSymLinSystem(LinearSystem):
    """A linear system whose matrix is symmetric, solved by conjugate gradients."""

    def __init__(self, a: Matrix, b: Vector) -> None:
        super().__init__(a, b)
        if not self.is_symmetric():
            raise ValueError("Matrix is not symmetric.")

    def is_symmetric(self) -> bool:
        """Whether the system matrix equals its transpose."""
        return self._a == self._a.transpose()

    def solve(self) -> Vector:
        """Solve by the conjugate gradient method, at most one step per unknown."""
        n = self.size
        a = self._a
        x = Vector(n)
        r = self._b - a * x
        p = +r
        rs_old = r * r
        if rs_old == 0:
            return x

        for _ in range(n):
            ap = a * p
            curvature = p * ap
            if curvature == 0:
                raise ValueError("Conjugate gradient broke down: zero curvature.")
            alpha = rs_old / curvature
            x = x + alpha * p
            r = r - alpha * ap
            rs_new = r * r
            if math.sqrt(rs_new) < 1e-10:
                break
            p = r + (rs_new / rs_old) * p
            rs_old = rs_new

        return x