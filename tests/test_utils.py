import math

import numpy as np

from bisect_root.utils import (
    ITERATION_MARGIN,
    MAX_HALVINGS,
    bracket_midpoint,
    interpolate_root,
    is_nan,
    max_iterations,
    opposite_signs,
)


def test_is_nan_accepts_python_and_numpy_floats() -> None:
    assert is_nan(float("nan"))
    assert is_nan(np.float64("nan"))
    assert not is_nan(0.0)
    assert not is_nan(math.inf)


def test_opposite_signs_accepts_exact_zero() -> None:
    assert opposite_signs(-1.0, 2.0)
    assert opposite_signs(0.0, 2.0)
    assert not opposite_signs(1.0, 2.0)
    assert not opposite_signs(-1.0, -2.0)


def test_opposite_signs_accepts_zero_next_to_infinity() -> None:
    # 0 * inf is NaN, which must not read as "same sign".
    assert opposite_signs(0.0, -math.inf)
    assert opposite_signs(math.inf, 0.0)
    assert not opposite_signs(math.inf, 1.0)


def test_max_iterations_covers_halving_to_tolerance() -> None:
    # 2**17 > 1e5, so 17 halvings bring a unit bracket under 1e-5.
    assert max_iterations(1.0, 1e-5) == 17 + ITERATION_MARGIN


def test_max_iterations_ignores_sign_of_width() -> None:
    assert max_iterations(-8.0, 1.0) == max_iterations(8.0, 1.0) == 3 + ITERATION_MARGIN


def test_max_iterations_for_bracket_already_below_tolerance() -> None:
    assert max_iterations(1e-9, 1e-3) == ITERATION_MARGIN


def test_max_iterations_is_finite_for_zero_tolerance() -> None:
    bound = max_iterations(1.0, 0.0)
    assert 1000 < bound < 1200


def test_interpolate_root_returns_line_crossing() -> None:
    assert interpolate_root(0.0, 2.0, -1.0, 1.0) == 1.0
    # Line through (1, -1) and (4, 2) crosses zero at x=2.
    assert math.isclose(interpolate_root(1.0, 4.0, -1.0, 2.0), 2.0)


def test_interpolate_root_returns_point_of_collapsed_bracket() -> None:
    assert interpolate_root(2.5, 2.5, 0.0, 0.0) == 2.5


def test_interpolate_root_avoids_division_by_zero_on_equal_values() -> None:
    assert interpolate_root(1.0, 3.0, 0.0, 0.0) == 2.0


def test_max_iterations_does_not_overflow_for_tiny_tolerance() -> None:
    # 1e10 / 1e-300 overflows to inf; the bound must stay a finite int.
    bound = max_iterations(1e10, 1e-300)
    assert isinstance(bound, int)
    assert 1000 < bound <= MAX_HALVINGS + ITERATION_MARGIN


def test_max_iterations_caps_infinite_width() -> None:
    # 1e308 - (-1e308) overflows to inf.
    assert max_iterations(1e308 - -1e308, 1e-5) == MAX_HALVINGS + ITERATION_MARGIN
    assert max_iterations(math.inf, 1.0) == MAX_HALVINGS + ITERATION_MARGIN


def test_bracket_midpoint_stays_finite_near_float_limit() -> None:
    assert math.isclose(bracket_midpoint(1e308, 1.5e308), 1.25e308)
    assert bracket_midpoint(-1e308, 1e308) == 0.0
    assert bracket_midpoint(3, 4) == 3.5


def test_interpolate_root_stays_finite_near_float_limit() -> None:
    root = interpolate_root(1e308, 1.7e308, -1.0, 1.0)
    assert math.isfinite(root)
    assert math.isclose(root, 1.35e308)
