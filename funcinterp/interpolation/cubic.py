import logging
import threading
from types import MappingProxyType

import numpy as np

from funcinterp.basetypes import Method, Point
from funcinterp.interpolation._base import BaseInterpolator
from funcinterp.neighbors import bracket

log = logging.getLogger(__name__)


def natural_spline_second_derivatives(xs, ys) -> np.ndarray:
    """
    Second derivatives of the natural cubic spline through ``(xs, ys)``.

    The tridiagonal system is solved in one forward elimination sweep and one
    back substitution sweep, without storing the matrix. Both end values are
    zero (natural boundary).

    Args:
        xs: Strictly increasing abscissas, at least three of them.
        ys: Ordinates aligned with ``xs``.

    Returns:
        np.ndarray: Second derivative at each abscissa.
    """
    xs = np.asarray(xs, dtype=float)
    ys = np.asarray(ys, dtype=float)
    n = len(xs)

    d2 = np.zeros(n)
    u = np.zeros(n)

    # Forward elimination
    for i in range(1, n - 1):
        sig = (xs[i] - xs[i - 1]) / (xs[i + 1] - xs[i - 1])
        p = sig * d2[i - 1] + 2
        d2[i] = (sig - 1) / p
        u[i] = (ys[i + 1] - ys[i]) / (xs[i + 1] - xs[i]) - (ys[i] - ys[i - 1]) / (
            xs[i] - xs[i - 1]
        )
        u[i] = (6 * u[i] / (xs[i + 1] - xs[i - 1]) - sig * u[i - 1]) / p

    # d2[n - 1] stays 0; back substitution
    for i in range(n - 2, 0, -1):
        d2[i] = d2[i] * d2[i + 1] + u[i]

    return d2


def extrapolate_spline(x: float, first: Point, second: Point, derivative2: float):
    """
    Linear continuation of a boundary spline segment.

    The slope is the spline's first derivative estimated from the segment
    chord corrected by the second derivative term.
    """
    width = second.x - first.x
    derivative1 = (second.y - first.y) / width - width * derivative2 / 6
    return first.y - (first.x - x) * derivative1


class CubicSplineInterpolator(BaseInterpolator):
    """
    Natural cubic spline through all sample points.

    The second derivative table is built on the first query that needs it and
    is shared read-only afterwards. Queries outside the sample range are
    extrapolated linearly from the boundary segment.
    """

    method = Method.CUBIC

    def __init__(self, points):
        super().__init__(points)
        self._d2 = None
        self._lock = threading.Lock()

    @property
    def second_derivatives(self) -> np.ndarray:
        """Read-only second derivatives aligned with ``points.abscissas``."""
        if self._d2 is None:
            with self._lock:
                if self._d2 is None:
                    log.debug(f"Building spline table for {len(self.points)} points.")
                    d2 = natural_spline_second_derivatives(
                        self.points.abscissas, self.points.ordinates
                    )
                    d2.flags.writeable = False
                    self._d2 = d2
        return self._d2

    @property
    def spline_table(self):
        """Read-only mapping of abscissa to spline second derivative."""
        return MappingProxyType(
            dict(
                zip(
                    self.points.abscissas.tolist(),
                    self.second_derivatives.tolist(),
                )
            )
        )

    def _estimate(self, x):
        xs = self.points.abscissas
        ys = self.points.ordinates
        d2 = self.second_derivatives

        if x < xs[0] or x > xs[-1]:
            if x < xs[0]:
                log.debug(f"Extrapolating below the sample range at {x}.")
                lo, hi, key = 0, 1, 1
            else:
                log.debug(f"Extrapolating above the sample range at {x}.")
                lo, hi, key = len(xs) - 2, len(xs) - 1, len(xs) - 2
            return extrapolate_spline(
                x,
                first=Point(xs[lo], ys[lo]),
                second=Point(xs[hi], ys[hi]),
                derivative2=d2[key],
            )

        lo, hi = bracket(x, xs)
        width = xs[hi] - xs[lo]
        A = (xs[hi] - x) / width
        B = 1 - A
        C = (A**3 - A) * width**2 / 6
        D = (B**3 - B) * width**2 / 6
        return A * ys[lo] + B * ys[hi] + C * d2[lo] + D * d2[hi]
