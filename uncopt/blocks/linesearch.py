# linesearch.py
# Armijo backtracking along a fixed direction, with a non-descent guard step
# and a floor on the step length that guarantees termination.

import logging
from typing import Optional

import numpy as np

from .aux import LineSearchConfig


class LineSearcher:
    """Armijo backtracking line search on f along a fixed direction.

    - `search(x, g, d)`: returns the accepted step, the non-descent guard step
      when g·d >= 0, or the last (sub-floor) step when backtracking ran out.

    Only `value(x)` is required of the model.
    """

    def __init__(self, model, cfg: Optional[LineSearchConfig] = None):
        self.model = model
        self.cfg = cfg if cfg is not None else LineSearchConfig()
        # diagnostics of the most recent call
        self.last_evals = 0
        self.last_accepted = False

    def search(self, x: np.ndarray, g: np.ndarray, d: np.ndarray) -> float:
        cfg = self.cfg
        c, rho, min_alpha = cfg.c, cfg.rho, cfg.min_alpha
        self.last_evals = 0
        self.last_accepted = False

        dd = float(g @ d)
        if dd >= 0.0:
            logging.debug(f"Line search: non-descent direction (g·d={dd:.3e}); "
                          f"returning alpha={cfg.nondescent_alpha:.1e}")
            return cfg.nondescent_alpha

        f0 = float(self.model.value(x))
        alpha = float(cfg.alpha_init)
        while True:
            f_t = float(self.model.value(x + alpha * d))
            self.last_evals += 1
            # NaN/inf fails the comparison and backtracks
            if f_t <= f0 + c * alpha * dd:
                self.last_accepted = True
                return alpha

            alpha *= rho
            if alpha < min_alpha:
                logging.debug(f"Line search: step size below minimum (alpha={alpha:.2e}) "
                              f"after {self.last_evals} evals; negligible progress")
                return alpha


def armijo_search(model, x, g, d, cfg: Optional[LineSearchConfig] = None) -> float:
    """Functional form of LineSearcher.search."""
    return LineSearcher(model, cfg).search(
        np.asarray(x, dtype=float), np.asarray(g, dtype=float), np.asarray(d, dtype=float)
    )
