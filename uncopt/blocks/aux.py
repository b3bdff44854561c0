# aux.py
# Shared infrastructure for the unconstrained Newton / steepest-descent stack:
# configuration dataclasses, enums, error taxonomy, array helpers and
# finite-difference derivatives used to check analytic models.

from __future__ import annotations

# =========================
# Standard library
# =========================
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable, Optional, Tuple, Union

# =========================
# Third-party
# =========================
import numpy as np

ArrayLike = Union[np.ndarray, list, tuple]


# ======================================
# Errors
# ======================================
class OptimizationError(Exception):
    """Base class for errors raised by the optimizer core."""


class InvalidDimension(OptimizationError, ValueError):
    """Objective evaluated on an empty point or one whose length is not even."""


class DimensionMismatch(OptimizationError, ValueError):
    """Linear system with a non-square matrix or a right-hand side of the wrong size."""


class SingularMatrix(OptimizationError, np.linalg.LinAlgError):
    """Elimination hit a pivot below the singularity threshold."""


# ======================================
# Enums
# ======================================
class Strategy(Enum):
    """Direction strategies understood by the driver."""

    NEWTON = "newton"
    STEEPEST_DESCENT = "steepest_descent"

    @classmethod
    def coerce(cls, value: Union["Strategy", str]) -> "Strategy":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(
                f"unknown strategy '{value}', expected one of "
                f"{', '.join(s.value for s in cls)}"
            ) from None


class TerminalState(Enum):
    RUNNING = "running"
    CONVERGED = "converged"
    MAX_ITER_EXCEEDED = "max_iter_exceeded"


# ======================================
# Configuration
# ======================================
@dataclass
class LineSearchConfig:
    """
    Armijo backtracking parameters.

    Notes
    -----
    • `c` is the sufficient-decrease constant, `rho` the shrink factor.
    • `min_alpha` is the floor at which the search gives up and returns the
      current step; `nondescent_alpha` is returned when g·d >= 0.
    """

    c: float = 0.01
    alpha_init: float = 1.0
    rho: float = 0.5
    min_alpha: float = 1e-10
    nondescent_alpha: float = 1e-6

    def __post_init__(self):
        if not 0.0 < self.c < 1.0:
            raise ValueError(f"c must lie in (0, 1), got {self.c}")
        if not self.alpha_init > 0.0:
            raise ValueError(f"alpha_init must be positive, got {self.alpha_init}")
        if not 0.0 < self.rho < 1.0:
            raise ValueError(f"rho must lie in (0, 1), got {self.rho}")
        if not 0.0 < self.min_alpha <= self.alpha_init:
            raise ValueError(
                f"min_alpha must lie in (0, alpha_init], got {self.min_alpha}"
            )
        if not self.nondescent_alpha > 0.0:
            raise ValueError(
                f"nondescent_alpha must be positive, got {self.nondescent_alpha}"
            )


# per-strategy (tol, max_iter, report_every)
_STRATEGY_DEFAULTS = {
    Strategy.NEWTON: (1e-6, 1000, 10),
    Strategy.STEEPEST_DESCENT: (1e-7, 100000, 100),
}


@dataclass
class OptConfig:
    """
    Global configuration for one optimization run.

    Notes
    -----
    • Defaults match the Newton strategy; use `for_strategy` to get the
      steepest-descent defaults (tighter tol, larger budget, sparser reports).
    • `verbose=True` attaches a ConsoleReporter when no reporter is given.
    """

    strategy: Strategy = Strategy.NEWTON
    tol: float = 1e-6
    max_iter: int = 1000
    report_every: int = 10
    line_search: LineSearchConfig = field(default_factory=LineSearchConfig)
    pivot_tol: float = 1e-10
    verbose: bool = False

    def __post_init__(self):
        self.strategy = Strategy.coerce(self.strategy)
        self.tol = float(self.tol)
        for name in ("max_iter", "report_every"):
            value = getattr(self, name)
            if not np.isfinite(value):
                raise ValueError(f"{name} must be a finite integer, got {value}")
            setattr(self, name, int(value))
        if self.tol < 0.0 or not np.isfinite(self.tol):
            raise ValueError(f"tol must be a finite non-negative number, got {self.tol}")
        if self.max_iter < 0:
            raise ValueError(f"max_iter must be non-negative, got {self.max_iter}")
        if self.report_every <= 0:
            raise ValueError(f"report_every must be positive, got {self.report_every}")
        if self.pivot_tol < 0.0:
            raise ValueError(f"pivot_tol must be non-negative, got {self.pivot_tol}")

    @classmethod
    def for_strategy(cls, strategy: Union[Strategy, str], **overrides) -> "OptConfig":
        strategy = Strategy.coerce(strategy)
        tol, max_iter, report_every = _STRATEGY_DEFAULTS[strategy]
        base = cls(
            strategy=strategy, tol=tol, max_iter=max_iter, report_every=report_every
        )
        return replace(base, **overrides) if overrides else base


# ======================================
# Array helpers
# ======================================
def as_point(x: ArrayLike) -> np.ndarray:
    """Copy `x` into a fresh 1-D float array, rejecting empty, odd or non-vector input."""
    a = np.array(x, dtype=float)
    if a.ndim != 1:
        raise InvalidDimension(f"point must be one-dimensional, got shape {a.shape}")
    if a.size == 0 or a.size % 2 != 0:
        raise InvalidDimension(f"point dimension must be positive and even, got n={a.size}")
    return a


# ---------- finite differences ----------
_FD_SCHEMES = {
    # scheme -> (forward offset, backward offset) in units of the step
    "forward": (1.0, 0.0),
    "backward": (0.0, 1.0),
    "central": (1.0, 1.0),
}


def grad_fd(
    f: Callable[[np.ndarray], float],
    x: ArrayLike,
    eps: float = 1e-6,
    scheme: str = "central",
) -> np.ndarray:
    """
    Finite-difference gradient, one coordinate at a time.
    scheme in {"forward", "backward", "central"}; steps scale with max(1, |x_i|).
    """
    if scheme not in _FD_SCHEMES:
        raise ValueError("scheme must be forward|backward|central")
    up, down = _FD_SCHEMES[scheme]
    x = np.asarray(x, dtype=float).reshape(-1)
    steps = eps * np.maximum(1.0, np.abs(x))
    fx = float(f(x)) if scheme != "central" else 0.0

    g = np.empty_like(x)
    for i, e in enumerate(np.diag(steps)):
        hi = float(f(x + e)) if up else fx
        lo = float(f(x - e)) if down else fx
        g[i] = (hi - lo) / ((up + down) * steps[i])
    return g


def hess_fd(
    f: Callable[[np.ndarray], float],
    x: ArrayLike,
    eps: float = 1e-4,
) -> np.ndarray:
    """
    Symmetric finite-difference Hessian using central differences.
    O(n^2) evaluations; suitable for moderate n.
    """
    x = np.asarray(x, dtype=float).reshape(-1)
    n = x.size
    H = np.zeros((n, n), dtype=float)
    f0 = float(f(x))
    steps = eps * np.maximum(1.0, np.abs(x))

    for i in range(n):
        ei = np.zeros(n, dtype=float)
        ei[i] = steps[i]
        H[i, i] = (float(f(x + ei)) - 2.0 * f0 + float(f(x - ei))) / (steps[i] ** 2)

    # mixed partials
    for i in range(n):
        for j in range(i + 1, n):
            ei = np.zeros(n, dtype=float)
            ej = np.zeros(n, dtype=float)
            ei[i] = steps[i]
            ej[j] = steps[j]
            fpp = float(f(x + ei + ej))
            fpm = float(f(x + ei - ej))
            fmp = float(f(x - ei + ej))
            fmm = float(f(x - ei - ej))
            H[i, j] = H[j, i] = (fpp - fpm - fmp + fmm) / (4.0 * steps[i] * steps[j])
    return H


def check_derivatives(
    model, x: ArrayLike, eps_grad: float = 1e-6, eps_hess: float = 1e-4
) -> Tuple[float, Optional[float]]:
    """
    Max absolute error of model.gradient (and model.hessian, if present)
    against finite differences of model.value at x.
    """
    x = np.asarray(x, dtype=float)
    g_err = float(np.max(np.abs(model.gradient(x) - grad_fd(model.value, x, eps_grad)), initial=0.0))
    if not hasattr(model, "hessian"):
        return g_err, None
    H_err = float(np.max(np.abs(model.hessian(x) - hess_fd(model.value, x, eps_hess)), initial=0.0))
    return g_err, H_err
