from funcinterp.basetypes import Method
from funcinterp.interpolation._base import BaseInterpolator
from funcinterp.neighbors import closest


class LinearInterpolator(BaseInterpolator):
    """
    Straight line through the two sample points nearest to the query.

    Outside the sample range the line through the two outermost points on that
    side is extended.
    """

    method = Method.LINEAR

    def _estimate(self, x):
        x1, x2 = closest(x, self.points.abscissas, k=2)
        y1, y2 = self.points[x1], self.points[x2]

        m = (y2 - y1) / (x2 - x1)
        c = y1 - x1 * m
        return m * x + c
