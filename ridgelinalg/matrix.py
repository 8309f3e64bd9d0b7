"""A dense matrix of floats with arithmetic, inversion and pseudo-inversion."""

from __future__ import annotations

from numbers import Real
from typing import Iterable, Sequence

from .vector import Vector


def _determinant(rows: list[list[float]]) -> float:
    n = len(rows)
    if n == 1:
        return rows[0][0]
    if n == 2:
        return rows[0][0] * rows[1][1] - rows[0][1] * rows[1][0]
    total = 0.0
    for p, head in enumerate(rows[0]):
        minor = [row[:p] + row[p + 1:] for row in rows[1:]]
        sign = 1 if p % 2 == 0 else -1
        total += sign * head * _determinant(minor)
    return total


class Matrix:
    """A dense matrix of floats indexed from zero by (row, column)."""

    __slots__ = ("_rows",)

    def __init__(self, num_rows: int, num_cols: int) -> None:
        if num_rows <= 0 or num_cols <= 0:
            raise ValueError("Matrix dimensions must be positive")
        self._rows = [[0.0] * num_cols for _ in range(num_rows)]

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[float]]) -> "Matrix":
        """Build a matrix from a sequence of equally long rows."""
        data = [[float(value) for value in row] for row in rows]
        if not data or not data[0]:
            raise ValueError("Matrix dimensions must be positive")
        width = len(data[0])
        if any(len(row) != width for row in data):
            raise ValueError("All rows must have the same length")
        return cls._wrap(data)

    @classmethod
    def _wrap(cls, data: list[list[float]]) -> "Matrix":
        matrix = cls.__new__(cls)
        matrix._rows = data
        return matrix

    @classmethod
    def _identity(cls, n: int) -> list[list[float]]:
        return [[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)]

    @property
    def num_rows(self) -> int:
        return len(self._rows)

    @property
    def num_cols(self) -> int:
        return len(self._rows[0])

    @property
    def shape(self) -> tuple[int, int]:
        return self.num_rows, self.num_cols

    def _locate(self, key) -> tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Matrix indices must be a (row, column) pair")
        i, j = key
        for index in (i, j):
            if not isinstance(index, int) or isinstance(index, bool):
                raise TypeError("Matrix indices must be integers")
        if not (0 <= i < self.num_rows and 0 <= j < self.num_cols):
            raise IndexError("Matrix index out of bounds")
        return i, j

    def __getitem__(self, key) -> float:
        i, j = self._locate(key)
        return self._rows[i][j]

    def __setitem__(self, key, value: float) -> None:
        i, j = self._locate(key)
        self._rows[i][j] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self._rows!r})"

    def __str__(self) -> str:
        return "".join(
            "[ " + "".join(f"{value:>8g} " for value in row) + "]\n"
            for row in self._rows
        )

    def __neg__(self) -> "Matrix":
        return Matrix._wrap([[-value for value in row] for row in self._rows])

    def __pos__(self) -> "Matrix":
        return Matrix._wrap([list(row) for row in self._rows])

    def _require_same_shape(self, other: "Matrix") -> None:
        if self.shape != other.shape:
            raise ValueError("Matrix dimensions must agree")

    def __add__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_shape(other)
        return Matrix._wrap(
            [[a + b for a, b in zip(r1, r2)] for r1, r2 in zip(self._rows, other._rows)]
        )

    def __sub__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_shape(other)
        return Matrix._wrap(
            [[a - b for a, b in zip(r1, r2)] for r1, r2 in zip(self._rows, other._rows)]
        )

    def __mul__(self, other: object):
        """Multiply by a matrix, a vector or a number."""
        if isinstance(other, Matrix):
            if self.num_cols != other.num_rows:
                raise ValueError("Inner matrix dimensions must agree")
            columns = list(zip(*other._rows))
            return Matrix._wrap(
                [
                    [sum(a * b for a, b in zip(row, col)) for col in columns]
                    for row in self._rows
                ]
            )
        if isinstance(other, Vector):
            if self.num_cols != len(other):
                raise ValueError("Matrix columns must match vector size")
            values = other.to_list()
            return Vector.from_values(
                sum(a * b for a, b in zip(row, values)) for row in self._rows
            )
        if isinstance(other, Real):
            return Matrix._wrap([[value * other for value in row] for row in self._rows])
        return NotImplemented

    def __rmul__(self, other: object):
        if isinstance(other, Real):
            return self * other
        return NotImplemented

    def _require_square(self) -> None:
        if self.num_rows != self.num_cols:
            raise ValueError("Matrix must be square")

    def determinant(self) -> float:
        """Determinant by cofactor expansion along the first row."""
        self._require_square()
        return _determinant(self._rows)

    def inverse(self) -> "Matrix":
        """Inverse by Gauss-Jordan elimination without row exchanges."""
        self._require_square()
        n = self.num_rows
        work = [list(row) for row in self._rows]
        result = self._identity(n)
        for i in range(n):
            pivot = work[i][i]
            if pivot == 0:
                raise ValueError("Zero pivot encountered; matrix cannot be inverted")
            work[i] = [value / pivot for value in work[i]]
            result[i] = [value / pivot for value in result[i]]
            for k in range(n):
                if k == i:
                    continue
                factor = work[k][i]
                work[k] = [a - factor * b for a, b in zip(work[k], work[i])]
                result[k] = [a - factor * b for a, b in zip(result[k], result[i])]
        return Matrix._wrap(result)

    def pseudo_inverse(self) -> "Matrix":
        """Moore-Penrose pseudo-inverse for full-rank matrices."""
        transposed = self.transpose()
        if self.num_rows >= self.num_cols:
            return (transposed * self).inverse() * transposed
        return transposed * (self * transposed).inverse()

    def transpose(self) -> "Matrix":
        return Matrix._wrap([list(col) for col in zip(*self._rows)])

    def to_rows(self) -> list[list[float]]:
        """Return the elements as a new list of row lists."""
        return [list(row) for row in self._rows]