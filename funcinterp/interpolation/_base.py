import numpy as np

from funcinterp.basetypes import Method, PointSet, as_query


class BaseInterpolator:
    """
    Abstract base class for the one-dimensional interpolators.

    Derived classes set ``method`` and implement ``_estimate``, which is only
    called for validated queries that do not coincide with a sample point.
    """

    method: Method

    def __init__(self, points):
        """
        Binds the sample points and checks there are enough of them.

        Args:
            points: A PointSet, or anything PointSet accepts.

        Raises:
            InsufficientDataError: Fewer points than ``method.min_points``.
        """
        self.points = points if isinstance(points, PointSet) else PointSet(points)
        self.points.require(self.method.min_points, self.method.value)

    def _estimate(self, x: float) -> float:
        """Internal method computing the estimate at a non-sample abscissa."""
        raise NotImplementedError

    def evaluate(self, x) -> float:
        """
        Estimates the ordinate at ``x``.

        Returns the stored ordinate unchanged when ``x`` is a sample point.

        Raises:
            InvalidInputError: ``x`` is not a finite real number.
        """
        x = as_query(x)
        if x in self.points:
            return self.points[x]
        return float(self._estimate(x))

    def __call__(self, x_query):
        """
        Evaluates at a scalar or at every element of an array-like.

        Returns:
            float for scalar input, otherwise an ndarray with the input's shape.
        """
        if np.ndim(x_query) == 0:
            if isinstance(x_query, np.ndarray):
                x_query = x_query.item()
            return self.evaluate(x_query)
        x_query = np.asarray(x_query)
        out = np.empty(x_query.shape, dtype=float)
        for idx, x in np.ndenumerate(x_query):
            out[idx] = self.evaluate(x)
        return out

    def __repr__(self):
        return f"{type(self).__name__}(n_points={len(self.points)})"
