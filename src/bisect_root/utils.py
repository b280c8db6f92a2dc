from math import fabs

import numpy as np

ITERATION_MARGIN = 64

# Halvings needed to go from the full double range down to adjacent floats.
MAX_HALVINGS = 2100

_TINY = float(np.finfo(float).tiny)


def is_nan(value) -> bool:
    return bool(np.isnan(value))


def opposite_signs(fa: float, fb: float) -> bool:
    """True when fa and fb bracket a zero (one of them may be exactly 0).

    Written as `not fa * fb > 0` so that 0 * inf (NaN) still counts as a
    bracket. NaN inputs must be rejected by the caller.
    """
    return not fa * fb > 0


def max_iterations(width: float, tol: float, margin: int = ITERATION_MARGIN) -> int:
    """Upper bound on the number of bisection steps for a bracket of `width`.

    Halving `width` until it drops under `tol` takes ceil(log2(width / tol))
    steps. tol bounds |f|, not the bracket, so `margin` extra steps are
    allowed for functions steeper than 1. Non-positive tol is floored at
    the smallest positive float, and the count never exceeds MAX_HALVINGS
    plus the margin, even for an infinite width.
    """
    width = fabs(width)
    tol = max(float(tol), _TINY) if not is_nan(tol) else _TINY
    if not np.isfinite(width):
        return MAX_HALVINGS + margin
    if width <= tol:
        return margin
    steps = int(np.ceil(np.log2(width) - np.log2(tol)))
    return min(steps, MAX_HALVINGS) + margin


def bracket_midpoint(lower: float, upper: float) -> float:
    return 0.5 * lower + 0.5 * upper


def interpolate_root(lower: float, upper: float, f_lower: float, f_upper: float) -> float:
    """Zero crossing of the line through (lower, f_lower) and (upper, f_upper).

    Same value as (upper * f_lower - lower * f_upper) / (f_lower - f_upper),
    written as a weighted mean of the endpoints so it stays finite for
    brackets near the float limit. A collapsed bracket returns its single
    point directly.
    """
    if lower == upper:
        return float(lower)
    if f_lower == f_upper:
        return bracket_midpoint(lower, upper)
    t = f_lower / (f_lower - f_upper)
    return (1.0 - t) * lower + t * upper
