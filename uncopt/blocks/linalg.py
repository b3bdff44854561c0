# linalg.py
# Dense Gaussian elimination with partial pivoting. General purpose: the
# block structure of the Rosenbrock Hessian is not exploited.

from __future__ import annotations

import numpy as np

from .aux import ArrayLike, DimensionMismatch, SingularMatrix

PIVOT_TOL = 1e-10


def gaussian_elimination(A: ArrayLike, b: ArrayLike, pivot_tol: float = PIVOT_TOL) -> np.ndarray:
    """
    Solve A x = b on the augmented matrix [A | b].

    Raises
    ------
    DimensionMismatch
        A is empty or not square, or b does not match A's dimension.
    SingularMatrix
        The largest available pivot in some column is below `pivot_tol`.
    """
    A = np.asarray(A, dtype=float)
    b = np.asarray(b, dtype=float)
    if A.ndim != 2 or A.shape[0] == 0 or A.shape[0] != A.shape[1]:
        raise DimensionMismatch(f"matrix must be square and non-empty, got shape {A.shape}")
    n = A.shape[0]
    if b.shape != (n,):
        raise DimensionMismatch(f"right-hand side must have shape ({n},), got {b.shape}")

    aug = np.empty((n, n + 1), dtype=float)
    aug[:, :n] = A
    aug[:, n] = b

    for i in range(n):
        # first row with the largest |a_ji|, j >= i
        p = i + int(np.argmax(np.abs(aug[i:, i])))
        if abs(aug[p, i]) < pivot_tol:
            raise SingularMatrix(
                f"pivot {aug[p, i]:.3e} in column {i} is below {pivot_tol:.1e}; "
                "matrix is singular to working precision"
            )
        if p != i:
            aug[[i, p]] = aug[[p, i]]

        factors = aug[i + 1:, i] / aug[i, i]
        aug[i + 1:, i:] -= np.outer(factors, aug[i, i:])

    x = np.empty(n, dtype=float)
    for i in range(n - 1, -1, -1):
        x[i] = (aug[i, n] - aug[i, i + 1:n] @ x[i + 1:]) / aug[i, i]
    return x


solve = gaussian_elimination
