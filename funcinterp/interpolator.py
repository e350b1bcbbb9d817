"""
Single entry point for interpolating over one set of sample points.

Example::

    from funcinterp import Interpolator

    interp = Interpolator({1: 2, 2: 3, 3: 4, 4: 5, 5: 6})
    interp.linear(2.5)
    interp.quadratic(2.5)
    interp.cubic(2.5)
    interp.interpolate("cubic", 7.0)
"""

import logging
import threading

from funcinterp.basetypes import Method, PointSet, as_query
from funcinterp.interpolation import BaseInterpolator, get_interpolator

log = logging.getLogger(__name__)


class Interpolator:
    """
    Dispatches queries to the linear, quadratic or cubic spline method.

    One PointSet is bound for the lifetime of the instance. The per-method
    interpolators are created on first use and kept, so the spline table is
    built at most once.

    Args:
        points: Mapping of abscissa to ordinate. Entries with a ``None``
            ordinate are dropped.

    Raises:
        InsufficientDataError: Fewer than two usable points.
        InvalidInputError: Non-numeric, non-finite or duplicate entries.
    """

    def __init__(self, points):
        self.points = points if isinstance(points, PointSet) else PointSet(points)
        self.points.require(Method.LINEAR.min_points)
        self._methods: dict[Method, BaseInterpolator] = {}
        self._lock = threading.Lock()

    def _get(self, method: Method) -> BaseInterpolator:
        interp = self._methods.get(method)
        if interp is None:
            with self._lock:
                interp = self._methods.get(method)
                if interp is None:
                    interp = get_interpolator(method)(self.points)
                    self._methods[method] = interp
        return interp

    def interpolate(self, method: Method | str, x) -> float:
        """
        Estimates the ordinate at ``x`` with the requested method.

        Raises:
            InvalidInputError: Unknown method, or ``x`` not a finite real.
            InsufficientDataError: Too few points for the method and ``x`` is
                not a sample point.
            SingularSystemError: The quadratic fit has no unique solution.
        """
        method = Method.parse(method)
        x = as_query(x)
        if x in self.points:
            return self.points[x]
        return self._get(method).evaluate(x)

    def linear(self, x) -> float:
        """Linear interpolation through the two nearest points."""
        return self.interpolate(Method.LINEAR, x)

    def quadratic(self, x) -> float:
        """Quadratic fit through three neighbouring points."""
        return self.interpolate(Method.QUADRATIC, x)

    def cubic(self, x) -> float:
        """Natural cubic spline; needs at least five points."""
        return self.interpolate(Method.CUBIC, x)

    def __repr__(self):
        return f"Interpolator(n_points={len(self.points)})"
