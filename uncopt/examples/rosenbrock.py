# Minimize the 2-D Rosenbrock function from (-1.2, 1.0) with both strategies
# and report the wall-clock cost of each run.
import logging

import numpy as np

from uncopt.blocks.aux import OptConfig, Strategy
from uncopt.report import ConsoleReporter, timer
from uncopt.solver import UnconstrainedSolver

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

x0 = np.array([-1.2, 1.0])

for strategy in (Strategy.NEWTON, Strategy.STEEPEST_DESCENT):
    print(f"=== {strategy.value} ===")
    solver = UnconstrainedSolver(config=OptConfig.for_strategy(strategy),
                                 reporter=ConsoleReporter())
    with timer("optimize", sink=print):
        solver.solve(x0)
    print()
