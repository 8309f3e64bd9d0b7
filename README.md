# ridgelinalg

A small, dependency-free dense linear algebra toolkit in pure Python,
together with a ridge regression model for the CPU performance data set
(`machine.data`).

## Modules

- `ridgelinalg.vector.Vector` – a fixed-size vector of floats, indexed from
  zero (`v[i]`). Supports `+`, `-`, unary `-` and `+` (a copy), scaling by a
  number (`v * 2.0`, `2.0 * v`), and the dot product (`v * w`).
  `increment()` and `decrement()` add or subtract one from every element in
  place and return a copy. `Vector.from_values(...)` builds a vector from an
  iterable; `to_list()` returns the elements.
- `ridgelinalg.matrix.Matrix` – a dense matrix indexed from zero by
  `(row, column)` pairs (`m[i, j]`), with `num_rows`, `num_cols` and `shape`
  properties. Supports `+`, `-`, negation, multiplication by a matrix, a
  `Vector` or a number, `transpose()`, `determinant()` (cofactor expansion),
  `inverse()` (Gauss–Jordan elimination without row exchanges) and
  `pseudo_inverse()` (Moore–Penrose, for full-rank matrices of any shape).
  `Matrix.from_rows(...)` builds a matrix; `to_rows()` returns the elements;
  `str(m)` prints one bracketed row per line.
- `ridgelinalg.linear.LinearSystem` – the square system `A x = b`, solved by
  `solve()` with Gaussian elimination and partial pivoting. `size` is the
  number of unknowns.
- `ridgelinalg.linear.PosSymLinSystem` – a system with a symmetric matrix,
  solved by `solve()` with the conjugate gradient method (at most one step
  per unknown, stopping once the residual norm drops below `1e-10`).
  `is_symmetric()` reports whether the matrix equals its transpose.
- `ridgelinalg.regression` – loading, normalising, fitting and scoring a
  ridge regression model.
- `ridgelinalg.demo` – a walk-through of the types above.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

```python
from ridgelinalg.vector import Vector
from ridgelinalg.matrix import Matrix
from ridgelinalg.linear import LinearSystem, PosSymLinSystem

a = Matrix.from_rows([[2, -1, 0], [-1, 2, -1], [0, -1, 2]])
b = Vector.from_values([1, 0, 1])

x = LinearSystem(a, b).solve()
print(x.to_list())          # approximately [1.0, 1.0, 1.0]

spd = Matrix.from_rows([[4, 1, 2], [1, 3, 0], [2, 0, 1]])
y = PosSymLinSystem(spd, Vector.from_values([4, 5, 6])).solve()

m = Matrix.from_rows([[1, 2], [3, 4]])
print(m.determinant())      # -2.0
print(m.inverse())
print(m.transpose())

tall = Matrix.from_rows([[1, 1], [1, 2], [1, 3], [1, 4]])
coeffs = tall.pseudo_inverse() * Vector.from_values([6, 5, 7, 10])
print(coeffs.to_list())     # least-squares fit, approximately [3.5, 1.4]
```

## Errors

- Mismatched sizes or shapes raise `ValueError`, as does a matrix with a
  non-positive dimension.
- Out-of-range indices raise `IndexError`; non-integer indices raise
  `TypeError`.
- `determinant()` and `inverse()` on a non-square matrix raise `ValueError`;
  `inverse()` also raises `ValueError` when it meets a zero pivot.
- `LinearSystem` raises `ValueError` for a non-square matrix, a size mismatch
  with `b`, or (from `solve()`) a singular matrix.
- `PosSymLinSystem` raises `ValueError` for a matrix that is not symmetric,
  and from `solve()` when the method breaks down on zero curvature.

## Ridge regression

The functions in `ridgelinalg.regression` work on the comma-separated lines of
the CPU performance data set. The third to ninth fields of each line are the
features (`MYCT, MMIN, MMAX, CACH, CHMIN, CHMAX, VENDOR` in the printed model)
and the tenth field is the target. Missing fields are read as 0.

- `load_inputs(lines)` and `load_outputs(lines)` build the feature and target
  matrices.
- `compute_mean_std(matrix)` returns per-column means and population standard
  deviations; a column with no spread is given a standard deviation of 1.
- `normalize_matrix(matrix, mean, std)` returns a standardised copy.
- `fit_ridge(inputs, targets, lam)` computes `theta = (XᵀX + λI)⁺ Xᵀy` as a
  one-column matrix.
- `rmse(targets, predictions)` scores a fit.
- `split_sizes(total)` gives the 80 % / 20 % training and testing sizes.
- `format_model(theta, feature_names)` renders the learned `PRP = ...`
  equation.
- `run(lines, lam)` splits the lines in order, normalises with the training
  statistics, fits, and returns a `RidgeResult` (`train_size`, `test_size`,
  `lam`, `theta`, `train_rmse`, `test_rmse`). It raises `ValueError` when
  either set would be empty.

## Commands

Fit the model from the command line, in a directory that holds
`machine.data`:

```
ridgelinalg-predict
```

The lines are shuffled, the shuffled copy is written to `shuffled.txt`, the
first 80 % are used for training with λ = 10, and the training and testing
RMSE are printed together with the learned linear model. Options:

- `--data PATH` – input file (default `machine.data`)
- `--shuffled PATH` – where to write the shuffled lines (default
  `shuffled.txt`)
- `--lambda VALUE` – regularisation strength (default 10)
- `--seed N` – seed for the shuffle, for repeatable runs

The command exits with status 1 if a file cannot be opened or there is too
little data.

Run a short walk-through of the vector, matrix and solver operations:

```
ridgelinalg-demo
```

## Limitations

The data set itself is not included; `ridgelinalg-predict` needs a
`machine.data` file supplied by the user. `pseudo_inverse()` works through
`inverse()`, so it requires a full-rank matrix and does not use a singular
value decomposition.