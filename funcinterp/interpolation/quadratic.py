import logging

import numpy as np

from funcinterp._errors import SingularSystemError
from funcinterp.basetypes import Method
from funcinterp.interpolation._base import BaseInterpolator
from funcinterp.neighbors import closest_three_points

log = logging.getLogger(__name__)


def solve_quadratic(xs, ys) -> np.ndarray:
    """
    Coefficients ``(a, b, c)`` of the parabola through three points.

    Solves the Vandermonde system $[x_i^2, x_i, 1] \\cdot [a, b, c]^T = y_i$.

    :raises SingularSystemError: If the system has no unique finite solution.
    """
    xs = np.asarray(xs, dtype=float)
    ys = np.asarray(ys, dtype=float)
    abc = np.column_stack([xs**2, xs, np.ones_like(xs)])
    try:
        solution = np.linalg.solve(abc, ys)
    except np.linalg.LinAlgError as e:
        log.debug(f"Quadratic system through {xs.tolist()} is singular: {e}")
        msg = f"Insoluble matrix for points {xs.tolist()}: {e}"
        raise SingularSystemError(msg) from e
    if not np.all(np.isfinite(solution)):
        msg = f"Insoluble matrix for points {xs.tolist()}: non-finite coefficients"
        raise SingularSystemError(msg)
    return solution


class QuadraticInterpolator(BaseInterpolator):
    """Exact quadratic through three contiguous sample points around the query."""

    method = Method.QUADRATIC

    def _estimate(self, x):
        xs = closest_three_points(x, self.points.abscissas)
        ys = [self.points[p] for p in xs]

        a, b, c = solve_quadratic(xs, ys)
        return a * x**2 + b * x + c
