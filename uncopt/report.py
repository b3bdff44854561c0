# report.py
# Observational collaborators of the driver: console progress printer and a
# wall-clock timer. Neither feeds anything back into the iteration.

from __future__ import annotations

import contextlib
import logging
import sys
import time
from typing import Callable, Optional, TextIO


class ConsoleReporter:
    """Progress reporter printing one line per reported iteration."""

    def __init__(self, stream: Optional[TextIO] = None, precision: int = 10):
        self.stream = stream
        self.precision = int(precision)

    def _out(self) -> TextIO:
        # resolved lazily so pytest's capsys sees the output
        return self.stream if self.stream is not None else sys.stdout

    def __call__(self, iteration: int, objective_value: float, gradient_norm: float) -> None:
        p = self.precision
        print(
            f"Iter {iteration}: f(x) = {objective_value:.{p}g}, ||grad|| = {gradient_norm:.{p}g}",
            file=self._out(),
        )

    def summary(self, result) -> None:
        p = self.precision
        out = self._out()
        label = "Converged" if result.converged else "Stopped"
        print(f"\n{label} after {result.iterations} iterations.", file=out)
        print("Final x: " + " ".join(f"{v:.{p}g}" for v in result.x), file=out)
        print(f"Final f(x): {result.f:.{p}g}", file=out)
        print(f"Final gradient norm: {result.grad_norm:.{p}g}", file=out)
        if result.fallback_iterations:
            print(f"Newton fallbacks: {len(result.fallback_iterations)}", file=out)


class _Elapsed:
    __slots__ = ("label", "t0", "elapsed")

    def __init__(self, label: str):
        self.label = label
        self.t0 = time.perf_counter()
        self.elapsed: Optional[float] = None


@contextlib.contextmanager
def timer(label: str, sink: Optional[Callable[[str], None]] = None):
    """
    Bracket a block and report "<label> cost <seconds>s" on exit.
    The message goes to `sink` if given, else to logging at INFO.
    """
    h = _Elapsed(label)
    try:
        yield h
    finally:
        h.elapsed = time.perf_counter() - h.t0
        msg = f"{label} cost {h.elapsed:.6f}s"
        if sink is not None:
            sink(msg)
        else:
            logging.info(msg)
