# direction.py
# Interchangeable search-direction providers for the driver loop.
# - NewtonDirection: solve H d = -g, fall back to -g on a singular Hessian
# - SteepestDescentDirection: d = -g

from __future__ import annotations

import logging
from typing import NamedTuple, Optional, Protocol, Union

import numpy as np

from .aux import SingularMatrix, Strategy
from .linalg import PIVOT_TOL, gaussian_elimination


class Direction(NamedTuple):
    d: np.ndarray
    kind: str  # {"newton", "steepest", "fallback"}
    fallback_reason: Optional[str] = None

    @property
    def is_fallback(self) -> bool:
        return self.kind == "fallback"


class DirectionProvider(Protocol):
    name: str

    def propose(self, model, x: np.ndarray, g: np.ndarray) -> Direction:
        ...


class SteepestDescentDirection:
    name = "steepest_descent"

    def propose(self, model, x: np.ndarray, g: np.ndarray) -> Direction:
        return Direction(-g, "steepest")


class NewtonDirection:
    """
    Newton step from the exact Hessian.

    Only SingularMatrix degrades to -g; DimensionMismatch means the model
    returned a Hessian inconsistent with the gradient and is re-raised.
    """

    name = "newton"

    def __init__(self, pivot_tol: float = PIVOT_TOL):
        self.pivot_tol = pivot_tol

    def propose(self, model, x: np.ndarray, g: np.ndarray) -> Direction:
        H = model.hessian(x)
        try:
            d = gaussian_elimination(H, -g, pivot_tol=self.pivot_tol)
        except SingularMatrix as e:
            logging.warning(f"Newton direction unavailable ({e}); "
                            "falling back to steepest descent")
            return Direction(-g, "fallback", str(e))
        return Direction(d, "newton")


def make_direction_provider(
    strategy: Union[Strategy, str], pivot_tol: float = PIVOT_TOL
) -> DirectionProvider:
    strategy = Strategy.coerce(strategy)
    if strategy is Strategy.NEWTON:
        return NewtonDirection(pivot_tol)
    return SteepestDescentDirection()
