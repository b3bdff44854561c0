# objective.py
# Block-separable Rosenbrock objective: each adjacent pair (x_2k, x_2k+1)
# contributes an independent 2-D Rosenbrock term.

from __future__ import annotations

from typing import Protocol

import numpy as np

from .aux import ArrayLike, as_point


class Objective(Protocol):
    """
    Anything the driver can minimize:
      - value(x): float
      - gradient(x): ndarray of shape (n,)
      - hessian(x): ndarray of shape (n, n)
    """

    def value(self, x: np.ndarray) -> float:
        ...

    def gradient(self, x: np.ndarray) -> np.ndarray:
        ...

    def hessian(self, x: np.ndarray) -> np.ndarray:
        ...


def _pairs(x: ArrayLike):
    x = as_point(x)
    return x, x[0::2], x[1::2]


def evaluate(x: ArrayLike) -> float:
    """f(x) = Σ_k 100 (x_2k² - x_2k+1)² + (x_2k - 1)²."""
    _, u, v = _pairs(x)
    t = u * u - v
    return float(np.sum(100.0 * t * t + (u - 1.0) ** 2))


def gradient(x: ArrayLike) -> np.ndarray:
    x, u, v = _pairs(x)
    t = u * u - v
    g = np.empty_like(x)
    g[0::2] = 400.0 * t * u + 2.0 * (u - 1.0)
    g[1::2] = -200.0 * t
    return g


def hessian(x: ArrayLike) -> np.ndarray:
    """Dense Hessian; only the 2x2 diagonal blocks are non-zero."""
    x, u, v = _pairs(x)
    n = x.size
    H = np.zeros((n, n), dtype=float)
    i = np.arange(0, n, 2)
    H[i, i] = 1200.0 * u * u - 400.0 * v + 2.0
    H[i + 1, i + 1] = 200.0
    H[i, i + 1] = -400.0 * u
    H[i + 1, i] = -400.0 * u
    return H


class BlockRosenbrock:
    """Object form of the block Rosenbrock family; the driver's default model."""

    __slots__ = ()

    def value(self, x: ArrayLike) -> float:
        return evaluate(x)

    def gradient(self, x: ArrayLike) -> np.ndarray:
        return gradient(x)

    def hessian(self, x: ArrayLike) -> np.ndarray:
        return hessian(x)

    @staticmethod
    def minimizer(n: int) -> np.ndarray:
        if n <= 0 or n % 2 != 0:
            raise ValueError(f"n must be a positive even integer, got {n}")
        return np.ones(n, dtype=float)

    def __repr__(self) -> str:
        return "BlockRosenbrock()"
