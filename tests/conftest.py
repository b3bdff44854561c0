import numpy as np
import pytest


class Quadratic:
    """f(x) = 0.5 xᵀQx with constant Hessian Q."""

    def __init__(self, Q):
        self.Q = np.asarray(Q, dtype=float)

    def value(self, x):
        x = np.asarray(x, dtype=float)
        return float(0.5 * x @ self.Q @ x)

    def gradient(self, x):
        return self.Q @ np.asarray(x, dtype=float)

    def hessian(self, x):
        return self.Q.copy()


class FlatHessianQuadratic(Quadratic):
    """Correct value/gradient, but reports a zero Hessian."""

    def hessian(self, x):
        return np.zeros_like(self.Q)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def quadratic():
    return Quadratic(np.diag([1.0, 10.0]))


@pytest.fixture
def quadratic_cls():
    return Quadratic


@pytest.fixture
def flat_hessian_cls():
    return FlatHessianQuadratic
