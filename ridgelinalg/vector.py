"""A fixed-size vector of floats with arithmetic operators."""

from __future__ import annotations

from numbers import Real
from typing import Iterable, Iterator


class Vector:
    """A dense vector of floats indexed from zero."""

    __slots__ = ("_data",)

    def __init__(self, size: int = 0) -> None:
        if size < 0:
            raise ValueError("Size must be non-negative")
        self._data = [0.0] * size

    @classmethod
    def from_values(cls, values: Iterable[float]) -> "Vector":
        """Build a vector holding the given values in order."""
        vector = cls(0)
        vector._data = [float(value) for value in values]
        return vector

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[float]:
        return iter(self._data)

    def _check_index(self, index: int) -> None:
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError("Vector indices must be integers")
        if index < 0 or index >= len(self._data):
            raise IndexError("Index out of bounds")

    def __getitem__(self, index: int) -> float:
        self._check_index(index)
        return self._data[index]

    def __setitem__(self, index: int, value: float) -> None:
        self._check_index(index)
        self._data[index] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"Vector.from_values({self._data!r})"

    def __neg__(self) -> "Vector":
        return Vector.from_values(-value for value in self._data)

    def __pos__(self) -> "Vector":
        return Vector.from_values(self._data)

    def increment(self) -> "Vector":
        """Add one to every element in place and return a copy of the result."""
        self._data = [value + 1.0 for value in self._data]
        return +self

    def decrement(self) -> "Vector":
        """Subtract one from every element in place and return a copy of the result."""
        self._data = [value - 1.0 for value in self._data]
        return +self

    def _require_same_size(self, other: "Vector", message: str) -> None:
        if len(self._data) != len(other._data):
            raise ValueError(message)

    def __add__(self, other: object) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self._require_same_size(other, "Different size vectors")
        return Vector.from_values(a + b for a, b in zip(self._data, other._data))

    def __sub__(self, other: object) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self._require_same_size(other, "Different size vectors")
        return Vector.from_values(a - b for a, b in zip(self._data, other._data))

    def __mul__(self, other: object):
        """Dot product with a vector, or scaling by a number."""
        if isinstance(other, Vector):
            self._require_same_size(
                other, "Vectors must be of the same size for dot product"
            )
            return sum(a * b for a, b in zip(self._data, other._data))
        if isinstance(other, Real):
            return Vector.from_values(value * other for value in self._data)
        return NotImplemented

    def __rmul__(self, other: object):
        if isinstance(other, Real):
            return self * other
        return NotImplemented

    def to_list(self) -> list[float]:
        """Return the elements as a new list."""
        return list(self._data)