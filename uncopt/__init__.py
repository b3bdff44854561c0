"""
Unconstrained Newton / steepest-descent optimizer with Armijo line search.

Public API:
- Driver: optimize, UnconstrainedSolver, OptimizeResult.
- Configuration: OptConfig, LineSearchConfig, Strategy, TerminalState.
- Objective: BlockRosenbrock, evaluate, gradient, hessian.
- Linear algebra: gaussian_elimination (alias solve).
- Errors: OptimizationError, InvalidDimension, DimensionMismatch, SingularMatrix.
- Reporting: ConsoleReporter, timer.
"""

from .blocks.aux import (
    DimensionMismatch,
    InvalidDimension,
    LineSearchConfig,
    OptConfig,
    OptimizationError,
    SingularMatrix,
    Strategy,
    TerminalState,
    check_derivatives,
)
from .blocks.direction import (
    Direction,
    NewtonDirection,
    SteepestDescentDirection,
    make_direction_provider,
)
from .blocks.linalg import gaussian_elimination, solve
from .blocks.linesearch import LineSearcher, armijo_search
from .blocks.objective import BlockRosenbrock, evaluate, gradient, hessian
from .report import ConsoleReporter, timer
from .solver import OptimizeResult, UnconstrainedSolver, optimize

__all__ = [
    "BlockRosenbrock",
    "ConsoleReporter",
    "DimensionMismatch",
    "Direction",
    "InvalidDimension",
    "LineSearchConfig",
    "LineSearcher",
    "NewtonDirection",
    "OptConfig",
    "OptimizationError",
    "OptimizeResult",
    "SingularMatrix",
    "SteepestDescentDirection",
    "Strategy",
    "TerminalState",
    "UnconstrainedSolver",
    "armijo_search",
    "check_derivatives",
    "evaluate",
    "gaussian_elimination",
    "gradient",
    "hessian",
    "make_direction_provider",
    "optimize",
    "solve",
    "timer",
]
