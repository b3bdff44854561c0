import numpy as np
import pytest
import scipy.linalg as la

from uncopt.blocks.aux import DimensionMismatch, SingularMatrix
from uncopt.blocks.linalg import gaussian_elimination, solve
from uncopt.blocks.objective import hessian


@pytest.mark.parametrize("n", [1, 2, 5, 12])
def test_random_well_conditioned_systems(rng, n):
    for _ in range(5):
        A = rng.normal(size=(n, n)) + n * np.eye(n)
        b = rng.normal(size=n)
        x = gaussian_elimination(A, b)
        assert np.linalg.norm(A @ x - b) < 1e-10
        np.testing.assert_allclose(x, la.solve(A, b), rtol=1e-10, atol=1e-12)


def test_zero_leading_entry_needs_pivoting():
    x = solve([[0.0, 1.0], [1.0, 0.0]], [2.0, 3.0])
    np.testing.assert_allclose(x, [3.0, 2.0])


def test_small_leading_pivot_is_swapped():
    A = np.array([[1e-8, 1.0], [1.0, 1.0]])
    b = np.array([1.0, 2.0])
    np.testing.assert_allclose(gaussian_elimination(A, b), la.solve(A, b), rtol=1e-12)


def test_rosenbrock_hessian_system():
    x = np.array([-1.2, 1.0, 0.3, -0.4])
    H = hessian(x)
    b = -np.arange(1.0, 5.0)
    d = gaussian_elimination(H, b)
    np.testing.assert_allclose(H @ d, b, atol=1e-10)


def test_zero_matrix_is_singular():
    with pytest.raises(SingularMatrix):
        gaussian_elimination(np.zeros((3, 3)), np.ones(3))


def test_rank_deficient_matrix_is_singular():
    with pytest.raises(SingularMatrix) as exc:
        gaussian_elimination([[1.0, 2.0], [2.0, 4.0]], [1.0, 2.0])
    assert isinstance(exc.value, np.linalg.LinAlgError)


def test_pivot_threshold_is_configurable():
    A = np.diag([1e-12, 1.0])
    with pytest.raises(SingularMatrix):
        gaussian_elimination(A, [1.0, 1.0])
    x = gaussian_elimination(A, [1.0, 1.0], pivot_tol=0.0)
    np.testing.assert_allclose(x, [1e12, 1.0])


@pytest.mark.parametrize(
    "A, b",
    [
        (np.ones((2, 3)), np.ones(2)),
        (np.eye(3), np.ones(2)),
        (np.eye(2), np.ones((2, 1))),
        (np.ones(3), np.ones(3)),
        (np.zeros((0, 0)), np.zeros(0)),
    ],
)
def test_dimension_mismatch(A, b):
    with pytest.raises(DimensionMismatch):
        gaussian_elimination(A, b)


def test_inputs_not_mutated(rng):
    A = rng.normal(size=(4, 4)) + 4 * np.eye(4)
    b = rng.normal(size=4)
    A0, b0 = A.copy(), b.copy()
    gaussian_elimination(A, b)
    np.testing.assert_array_equal(A, A0)
    np.testing.assert_array_equal(b, b0)
