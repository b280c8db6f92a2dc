"""Bracketed root finding: bisection with a final linear-interpolation step."""

from __future__ import annotations

import logging
import warnings
from enum import Enum
from typing import Callable, Optional

from bisect_root.utils import (
    bracket_midpoint,
    interpolate_root,
    is_nan,
    max_iterations,
    opposite_signs,
)

logger = logging.getLogger(__name__)

Func = Callable[[float], float]

DEFAULT_TOL = 1e-10


class SolveStatus(Enum):
    SUCCESS = "success"
    CONTINUE = "continue"
    INVALID_ARGUMENT = "invalid_argument"
    BAD_FUNCTION = "bad_function"


class RootFindingError(ValueError):
    """Base class for problems detected while setting up a bracket."""

    status = SolveStatus.INVALID_ARGUMENT


class BadFunctionError(RootFindingError):
    """Raised when the function returns NaN at a bracket endpoint."""

    status = SolveStatus.BAD_FUNCTION


class InvalidArgumentError(RootFindingError):
    """Raised when f(lower) and f(upper) share the same strict sign."""

    status = SolveStatus.INVALID_ARGUMENT


class BracketWarning(RuntimeWarning):
    """solve() fell back to a midpoint because the bracket was unusable."""


class ConvergenceWarning(RuntimeWarning):
    """solve() ran out of iterations before reaching the tolerance."""


class BracketSolver:
    """
    Holds a bracket [lower, upper] around a sign change of `evaluate` and
    narrows it one bisection step at a time.

    f_lower and f_upper always equal evaluate(lower) and evaluate(upper).
    While iterating, f_lower * f_upper <= 0.

    Construction is the strict entry point: it raises BadFunctionError or
    InvalidArgumentError instead of degrading like solve() does.
    """

    def __init__(self, evaluate: Func, lower: float, upper: float) -> None:
        lower = float(lower)
        upper = float(upper)
        f_lower = float(evaluate(lower))
        f_upper = float(evaluate(upper))

        if is_nan(f_lower) or is_nan(f_upper):
            raise BadFunctionError(
                f"f({lower})={f_lower}, f({upper})={f_upper}: function returned NaN"
            )
        if not opposite_signs(f_lower, f_upper):
            raise InvalidArgumentError(
                f"f({lower})={f_lower} and f({upper})={f_upper} must have opposite signs"
            )

        if lower > upper:
            lower, upper = upper, lower
            f_lower, f_upper = f_upper, f_lower

        self.evaluate = evaluate
        self.lower = lower
        self.upper = upper
        self.f_lower = f_lower
        self.f_upper = f_upper
        self.iterations = 0

    def __repr__(self) -> str:
        return (
            f"BracketSolver(lower={self.lower!r}, upper={self.upper!r}, "
            f"f_lower={self.f_lower!r}, f_upper={self.f_upper!r})"
        )

    @property
    def width(self) -> float:
        return self.upper - self.lower

    @property
    def collapsed(self) -> bool:
        return self.lower == self.upper

    def within_tolerance(self, tol: float) -> bool:
        return abs(self.f_lower) <= tol or abs(self.f_upper) <= tol

    def midpoint(self) -> float:
        return bracket_midpoint(self.lower, self.upper)

    def estimate(self) -> float:
        """Secant estimate between the current endpoints."""
        return interpolate_root(self.lower, self.upper, self.f_lower, self.f_upper)

    def iterate(self) -> SolveStatus:
        """Halve the bracket once.

        Returns SUCCESS when an exact root was hit (the bracket collapses
        onto it), CONTINUE after a regular halving, and BAD_FUNCTION when
        the midpoint evaluates to NaN, in which case nothing changes.
        """
        if self.f_lower == 0:
            self.upper, self.f_upper = self.lower, self.f_lower
            self.iterations += 1
            return SolveStatus.SUCCESS
        if self.f_upper == 0:
            self.lower, self.f_lower = self.upper, self.f_upper
            self.iterations += 1
            return SolveStatus.SUCCESS

        mid = bracket_midpoint(self.lower, self.upper)
        f_mid = float(self.evaluate(mid))

        if is_nan(f_mid):
            return SolveStatus.BAD_FUNCTION

        self.iterations += 1
        if f_mid == 0:
            self.lower = self.upper = mid
            self.f_lower = self.f_upper = f_mid
            return SolveStatus.SUCCESS

        # Keep the half that still contains the sign change
        if self.f_lower * f_mid < 0:
            self.upper, self.f_upper = mid, f_mid
        else:
            self.lower, self.f_lower = mid, f_mid
        return SolveStatus.CONTINUE


def solve(
    evaluate: Func,
    a: float,
    b: float,
    tol: float = DEFAULT_TOL,
    max_iter: Optional[int] = None,
) -> float:
    """Find x in [a, b] with |f(x)| <= tol.

    Never raises for an ill-posed bracket: if f(a) and f(b) share a sign or
    either is NaN, a BracketWarning is issued and (a + b) / 2 is returned.
    A NaN hit while narrowing returns the midpoint of the bracket reached so
    far. Running out of iterations (max_iter <= 0 included) with neither
    endpoint within tol issues a ConvergenceWarning; either way the current
    estimate is returned.
    """
    try:
        solver = BracketSolver(evaluate, a, b)
    except RootFindingError as exc:
        warnings.warn(f"{exc}; returning interval midpoint", BracketWarning, stacklevel=2)
        return bracket_midpoint(a, b)

    if max_iter is None:
        max_iter = max_iterations(solver.width, tol)

    for _ in range(max_iter):
        status = solver.iterate()
        logger.debug(
            "Bisection iter %s: [%s, %s] f=[%s, %s] %s",
            solver.iterations,
            solver.lower,
            solver.upper,
            solver.f_lower,
            solver.f_upper,
            status.value,
        )
        if status is SolveStatus.BAD_FUNCTION:
            mid = solver.midpoint()
            warnings.warn(
                f"f({mid}) returned NaN; returning midpoint of [{solver.lower}, {solver.upper}]",
                BracketWarning,
                stacklevel=2,
            )
            return mid
        if status is SolveStatus.SUCCESS or solver.within_tolerance(tol):
            root = solver.estimate()
            logger.debug("Bisection converged after %s iterations: %s", solver.iterations, root)
            return root

    root = solver.estimate()
    if solver.within_tolerance(tol):
        return root
    warnings.warn(
        f"Bisection did not reach tol={tol} within {max_iter} iterations; "
        f"returning estimate {root}",
        ConvergenceWarning,
        stacklevel=2,
    )
    return root
