import re

import pytest

from ridgelinalg.demo import (
    conjugate_gradient_demo,
    gaussian_demo,
    least_squares_demo,
    main,
    matrix_demo,
    vector_demo,
)
from ridgelinalg.linear import PosSymLinSystem
from ridgelinalg.matrix import Matrix
from ridgelinalg.vector import Vector


def _solution(text):
    return Vector.from_values(
        float(value) for _, value in re.findall(r"x\((\d+)\) = (\S+)", text)
    )


def test_vector_demo_sum_equals_scaling():
    text = vector_demo()
    assert text.startswith("Testing Vector operations:\n")
    pairs = re.findall(r"v3\(\d\) = (\S+), v4\(\d\) = (\S+)", text)
    assert len(pairs) == 3
    assert all(float(a) == float(b) for a, b in pairs)
    dot = float(re.search(r"Dot product: (\S+)", text).group(1))
    assert dot == pytest.approx(sum((float(b) / 2) ** 2 for _, b in pairs))


def test_matrix_demo_reports_inverse_and_pseudo_inverse():
    text = matrix_demo()
    assert "Determinant: -2\n" in text
    a = Matrix.from_rows([[1, 2], [3, 4]])
    e = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
    assert "Inverse: \n" + str(a.inverse()) in text
    assert "Pseudo-inverse of 2x3 matrix:\n" + str(e.pseudo_inverse()) in text


def test_gaussian_demo_solution_satisfies_system():
    text = gaussian_demo()
    assert text.startswith("Testing LinearSystem (Gaussian Elimination):\n")
    x = _solution(text)
    a = Matrix.from_rows([[2, -1, 0], [-1, 2, -1], [0, -1, 2]])
    assert (a * x).to_list() == pytest.approx([1, 0, 1], abs=1e-4)


def test_conjugate_gradient_demo_matches_solver():
    text = conjugate_gradient_demo()
    a = Matrix.from_rows([[4, 1, 2], [1, 3, 0], [2, 0, 1]])
    b = Vector.from_values([4, 5, 6])
    expected = PosSymLinSystem(a, b).solve()
    assert _solution(text).to_list() == pytest.approx(
        expected.to_list(), rel=1e-4, abs=1e-4
    )


def test_least_squares_demo_satisfies_normal_equations():
    text = least_squares_demo()
    assert "Estimated solution (least-squares):\n" in text
    x = _solution(text)
    a = Matrix.from_rows([[1, 1], [1, 2], [1, 3], [1, 4]])
    b = Vector.from_values([6, 5, 7, 10])
    gradient = a.transpose() * (a * x - b)
    assert gradient.to_list() == pytest.approx([0, 0], abs=1e-3)


def test_main_prints_all_demos_in_order(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    headers = [
        "Testing Vector operations:",
        "Testing Matrix operations:",
        "Testing LinearSystem (Gaussian Elimination):",
        "Testing PosSymLinSystem (Conjugate Gradient):",
        "Testing over-determined system with pseudo-inverse:",
    ]
    positions = [out.index(header) for header in headers]
    assert positions == sorted(positions)