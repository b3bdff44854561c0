# solver.py
# Unconstrained line-search driver.
# - One iteration loop shared by Newton and steepest descent
# - Direction computation delegated to a DirectionProvider
# - Armijo backtracking on the objective
# - Progress reported through an optional (iteration, f, ||g||) callable
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, List, NamedTuple, Optional, Union

import numpy as np

from .blocks.aux import (
    ArrayLike,
    LineSearchConfig,
    OptConfig,
    Strategy,
    TerminalState,
)
from .blocks.direction import DirectionProvider, make_direction_provider
from .blocks.linesearch import LineSearcher
from .blocks.objective import BlockRosenbrock, Objective
from .report import ConsoleReporter

Reporter = Callable[[int, float, float], None]


class OptimizeResult(NamedTuple):
    x: np.ndarray
    f: float
    grad_norm: float
    iterations: int
    status: TerminalState
    fallback_iterations: List[int]

    @property
    def converged(self) -> bool:
        return self.status is TerminalState.CONVERGED


# =============================================================================
# Main Solver
# =============================================================================
class UnconstrainedSolver:
    def __init__(
        self,
        model: Optional[Objective] = None,
        config: Optional[OptConfig] = None,
        reporter: Optional[Reporter] = None,
        direction: Optional[DirectionProvider] = None,
    ):
        self.cfg = config if config is not None else OptConfig()
        self.model = model if model is not None else BlockRosenbrock()
        if reporter is None and self.cfg.verbose:
            reporter = ConsoleReporter()
        self.reporter = reporter
        self.direction = (
            direction
            if direction is not None
            else make_direction_provider(self.cfg.strategy, self.cfg.pivot_tol)
        )
        self.ls = LineSearcher(self.model, self.cfg.line_search)
        self.state = TerminalState.RUNNING

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------
    def solve(self, x0: ArrayLike) -> OptimizeResult:
        cfg = self.cfg
        model = self.model
        x = np.array(x0, dtype=float)
        fallbacks: List[int] = []
        k = 0
        self.state = TerminalState.RUNNING

        while self.state is TerminalState.RUNNING:
            g = np.asarray(model.gradient(x), dtype=float)
            gnorm = float(np.linalg.norm(g))
            if gnorm < cfg.tol:
                self.state = TerminalState.CONVERGED
                break
            if k >= cfg.max_iter:
                # only reachable with max_iter == 0
                self.state = TerminalState.MAX_ITER_EXCEEDED
                break

            step = self.direction.propose(model, x, g)
            if step.is_fallback:
                fallbacks.append(k)

            alpha = self.ls.search(x, g, step.d)
            x = x + alpha * step.d
            k += 1

            if self.reporter is not None and (k == 1 or k % cfg.report_every == 0):
                self.reporter(k, float(model.value(x)), gnorm)

            if k >= cfg.max_iter:
                self.state = TerminalState.MAX_ITER_EXCEEDED

        if self.state is TerminalState.CONVERGED:
            final_norm = gnorm
        else:
            final_norm = float(np.linalg.norm(model.gradient(x)))
        result = OptimizeResult(
            x=x,
            f=float(model.value(x)),
            grad_norm=final_norm,
            iterations=k,
            status=self.state,
            fallback_iterations=fallbacks,
        )
        logging.info(f"{self.direction.name}: {result.status.value} after {k} iterations "
                     f"(f={result.f:.3e}, ||g||={result.grad_norm:.3e})")
        if fallbacks:
            logging.warning(f"{len(fallbacks)} iteration(s) used the steepest-descent "
                            "fallback because the Hessian was singular")
        if isinstance(self.reporter, ConsoleReporter):
            self.reporter.summary(result)
        return result


def optimize(
    x0: ArrayLike,
    strategy: Union[Strategy, str] = Strategy.NEWTON,
    tol: Optional[float] = None,
    max_iter: Optional[int] = None,
    line_search: Optional[LineSearchConfig] = None,
    *,
    model: Optional[Objective] = None,
    reporter: Optional[Reporter] = None,
    config: Optional[OptConfig] = None,
) -> OptimizeResult:
    """
    Minimize `model` (block Rosenbrock by default) from x0.

    Unset tol / max_iter take the per-strategy defaults of
    OptConfig.for_strategy. An explicit `config` wins over `strategy` and
    is only overridden by arguments that are not None.
    """
    if config is None:
        config = OptConfig.for_strategy(strategy)
    overrides = {}
    if tol is not None:
        overrides["tol"] = tol
    if max_iter is not None:
        overrides["max_iter"] = max_iter
    if line_search is not None:
        overrides["line_search"] = line_search
    if overrides:
        config = replace(config, **overrides)
    return UnconstrainedSolver(model, config, reporter).solve(x0)
