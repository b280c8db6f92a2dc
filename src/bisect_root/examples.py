from typing import List, Tuple

import numpy as np

from bisect_root.bisection import BracketSolver, SolveStatus, solve

TOL = 1e-5

# -----------------------------
# Reference trig brackets
# -----------------------------
CASES = [
    ("sin", np.sin, 3.0, 4.0, np.pi),
    ("sin", np.sin, -4.0, -3.0, -np.pi),
    ("sin", np.sin, -1.0 / 3.0, 1.0, 0.0),
    ("cos", np.cos, 0.0, 3.0, np.pi / 2),
    ("cos", np.cos, -3.0, 0.0, -np.pi / 2),
]


def run_cases(tol: float = TOL) -> List[Tuple[str, float, float, float, float]]:
    rows = []
    for name, f, a, b, expected in CASES:
        root = solve(f, a, b, tol)
        rows.append((name, a, b, root, abs(root - expected)))
    return rows


def trace(f=np.sin, a: float = 3.0, b: float = 4.0, tol: float = TOL):
    """Bracket after each narrowing step, until |f| at an endpoint <= tol."""
    solver = BracketSolver(f, a, b)
    steps = [(solver.lower, solver.upper)]
    while not solver.within_tolerance(tol):
        status = solver.iterate()
        steps.append((solver.lower, solver.upper))
        if status is not SolveStatus.CONTINUE:
            break
    return steps, solver.estimate()


def main() -> None:
    print(f"Bisection with linear-interpolation refinement, tol={TOL:g}")
    for name, a, b, root, err in run_cases():
        print(f"  {name} on [{a:+.4f}, {b:+.4f}] -> {root:+.10f}  (error {err:.2e})")

    steps, root = trace()
    print(f"\nsin on [3, 4]: {len(steps) - 1} narrowing steps")
    for i, (lo, hi) in enumerate(steps):
        print(f"  {i:2d}: [{lo:.8f}, {hi:.8f}]  width={hi - lo:.2e}")
    print(f"  interpolated root: {root:.12f}")


if __name__ == "__main__":
    main()
