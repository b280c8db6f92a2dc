from .bisection import (
    DEFAULT_TOL,
    BadFunctionError,
    BracketSolver,
    BracketWarning,
    ConvergenceWarning,
    InvalidArgumentError,
    RootFindingError,
    SolveStatus,
    solve,
)
from .utils import interpolate_root, max_iterations

__all__ = [
    "DEFAULT_TOL",
    "BadFunctionError",
    "BracketSolver",
    "BracketWarning",
    "ConvergenceWarning",
    "InvalidArgumentError",
    "RootFindingError",
    "SolveStatus",
    "interpolate_root",
    "max_iterations",
    "solve",
]
