"""Ridge regression on the CPU performance data set."""

from __future__ import annotations

import argparse
import math
import random
import sys
from dataclasses import dataclass
from typing import Sequence

from .matrix import Matrix

FEATURE_NAMES = ("MYCT", "MMIN", "MMAX", "CACH", "CHMIN", "CHMAX", "VENDOR")
INPUT_COLUMNS = range(2, 9)
OUTPUT_COLUMN = 9
NUM_FEATURES = len(INPUT_COLUMNS)
TRAIN_FRACTION = 0.8
DEFAULT_LAMBDA = 10.0


@dataclass(frozen=True)
class RidgeResult:
    """Outcome of fitting and evaluating a ridge model."""

    train_size: int
    test_size: int
    lam: float
    theta: Matrix
    train_rmse: float
    test_rmse: float


def _fields(line: str) -> list[str]:
    fields = line.split(",")
    if fields and fields[-1] == "":
        fields.pop()
    return fields


def load_inputs(lines: Sequence[str]) -> Matrix:
    """Read columns 2 to 8 of each comma-separated line into a matrix."""
    matrix = Matrix(len(lines), NUM_FEATURES)
    for row, line in enumerate(lines):
        fields = _fields(line)
        for col, index in enumerate(INPUT_COLUMNS):
            if index < len(fields):
                matrix[row, col] = float(fields[index].strip())
    return matrix


def load_outputs(lines: Sequence[str]) -> Matrix:
    """Read column 9 of each comma-separated line into a one-column matrix."""
    matrix = Matrix(len(lines), 1)
    for row, line in enumerate(lines):
        fields = _fields(line)
        if OUTPUT_COLUMN < len(fields):
            matrix[row, 0] = float(fields[OUTPUT_COLUMN].strip())
    return matrix


def compute_mean_std(matrix: Matrix) -> tuple[list[float], list[float]]:
    """Per-column mean and population standard deviation (1.0 for constant columns)."""
    count = matrix.num_rows
    means: list[float] = []
    stds: list[float] = []
    for column in zip(*matrix.to_rows()):
        mean = sum(column) / count
        variance = sum(v * v for v in column) / count - mean * mean
        means.append(mean)
        stds.append(math.sqrt(variance) if variance > 1e-10 else 1.0)
    return means, stds


def normalize_matrix(
    matrix: Matrix, mean: Sequence[float], std: Sequence[float]
) -> Matrix:
    """Return a copy of the matrix with each column standardised."""
    return Matrix.from_rows(
        [(v - m) / s for v, m, s in zip(row, mean, std)] for row in matrix.to_rows()
    )


def fit_ridge(inputs: Matrix, targets: Matrix, lam: float) -> Matrix:
    """Coefficients ``(X^T X + lam I)^+ X^T y`` as a one-column matrix."""
    xt = inputs.transpose()
    gram = xt * inputs
    for i in range(gram.num_rows):
        gram[i, i] = gram[i, i] + lam
    return gram.pseudo_inverse() * (xt * targets)


def rmse(targets: Matrix, predictions: Matrix) -> float:
    """Root mean squared error between two one-column matrices."""
    if targets.num_rows != predictions.num_rows:
        raise ValueError("Targets and predictions must have the same number of rows")
    squared = sum(
        (t[0] - p[0]) ** 2 for t, p in zip(targets.to_rows(), predictions.to_rows())
    )
    return math.sqrt(squared / targets.num_rows)


def format_model(theta: Matrix, feature_names: Sequence[str] = FEATURE_NAMES) -> str:
    """Render the fitted model as a ``PRP = ...`` equation."""
    pieces = ["PRP = "]
    for i, (coef, *_rest) in enumerate(theta.to_rows()):
        if i > 0:
            pieces.append("+ " if coef >= 0 else "- ")
        pieces.append(f"{abs(coef):g}")
        if i < len(feature_names):
            pieces.append(f" * {feature_names[i]} ")
    return "".join(pieces)


def split_sizes(total: int) -> tuple[int, int]:
    """Sizes of the training and testing sets for ``total`` rows."""
    train = int(total * TRAIN_FRACTION)
    return train, total - train


def run(lines: Sequence[str], lam: float = DEFAULT_LAMBDA) -> RidgeResult:
    """Split the lines, fit on the first part and evaluate on both parts."""
    train_size, test_size = split_sizes(len(lines))
    if train_size == 0 or test_size == 0:
        raise ValueError("Not enough data to form training and testing sets")
    train_lines, test_lines = lines[:train_size], lines[train_size:]

    train_input = load_inputs(train_lines)
    train_target = load_outputs(train_lines)
    test_input = load_inputs(test_lines)
    test_target = load_outputs(test_lines)

    mean, std = compute_mean_std(train_input)
    train_input = normalize_matrix(train_input, mean, std)
    test_input = normalize_matrix(test_input, mean, std)

    theta = fit_ridge(train_input, train_target, lam)
    return RidgeResult(
        train_size=train_size,
        test_size=test_size,
        lam=lam,
        theta=theta,
        train_rmse=rmse(train_target, train_input * theta),
        test_rmse=rmse(test_target, test_input * theta),
    )


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Fit a ridge regression model to machine performance data."
    )
    parser.add_argument("--data", default="machine.data", help="input data file")
    parser.add_argument(
        "--shuffled", default="shuffled.txt", help="where to write the shuffled data"
    )
    parser.add_argument(
        "--lambda", dest="lam", type=float, default=DEFAULT_LAMBDA,
        help="regularisation strength",
    )
    parser.add_argument("--seed", type=int, default=None, help="shuffle seed")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        with open(args.data, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except OSError:
        print(f"Cannot open file {args.data}", file=sys.stderr)
        return 1

    random.Random(args.seed).shuffle(lines)

    try:
        with open(args.shuffled, "w", encoding="utf-8") as handle:
            handle.writelines(f"{line}\n" for line in lines)
    except OSError:
        print(f"Cannot open file {args.shuffled} for writing", file=sys.stderr)
        return 1

    train_size, test_size = split_sizes(len(lines))
    print(f"Number of data(lines): {len(lines)}")
    print(f"Training set size: {train_size}")
    print(f"Testing set size: {test_size}")

    try:
        result = run(lines, args.lam)
    except ValueError as error:
        print(str(error), file=sys.stderr)
        return 1

    print(f"Applied regularization with lambda = {result.lam:g}")
    print(f"Train RMSE: {result.train_rmse:g}")
    print(f"Test RMSE: {result.test_rmse:g}")
    print()
    print("Linear Regression Model:")
    print(format_model(result.theta))
    return 0


if __name__ == "__main__":
    sys.exit(main())