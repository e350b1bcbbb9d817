"""
Nearest-neighbour selection over a set of sample abscissas.

All functions reduce their input to its distinct values in ascending order,
so callers may pass any iterable of numbers.
"""

import numpy as np

from funcinterp._errors import InsufficientDataError


def _distinct(abscissas) -> np.ndarray:
    return np.unique(np.asarray(abscissas, dtype=float))


def _nearest_pair(query: float, xs: np.ndarray) -> tuple[int, int]:
    # Grow outward from the insertion point; ties go to the left (smaller) side.
    hi = int(np.searchsorted(xs, query))
    lo = hi - 1
    chosen = []
    while len(chosen) < 2:
        take_left = hi >= len(xs) or (lo >= 0 and query - xs[lo] <= xs[hi] - query)
        if take_left:
            chosen.append(lo)
            lo -= 1
        else:
            chosen.append(hi)
            hi += 1
    return min(chosen), max(chosen)


def closest(query: float, abscissas, k: int = 2) -> tuple[float, ...]:
    """
    Returns the ``k`` abscissas closest to ``query`` in ascending order.

    For ``k=2`` these are the two points with the smallest absolute distance
    to the query, preferring the smaller abscissa on ties. Outside the sample
    range that is the two smallest (or largest) abscissas. ``k=3`` follows
    :func:`closest_three_points`.

    :param query: The sought abscissa.
    :param abscissas: Known abscissas, in any order.
    :param k: Either 2 or 3.
    :raises InsufficientDataError: Fewer than ``k`` distinct abscissas.
    """
    if k == 3:
        return closest_three_points(query, abscissas)
    if k != 2:
        msg = f"k must be 2 or 3, got {k}"
        raise ValueError(msg)
    xs = _distinct(abscissas)
    if len(xs) < 2:
        raise InsufficientDataError(2, len(xs))
    lo, hi = _nearest_pair(query, xs)
    return float(xs[lo]), float(xs[hi])


def closest_three_points(query: float, abscissas) -> tuple[float, float, float]:
    """
    Returns three abscissas around ``query`` for a quadratic fit.

    The closest pair is taken first. The third point is the one right after
    the pair, unless the pair already reaches into the last two positions, in
    which case it is the one right before the pair. The points therefore stay
    contiguous in sorted order.
    """
    xs = _distinct(abscissas)
    n = len(xs)
    if n < 3:
        raise InsufficientDataError(3, n)
    lo, hi = _nearest_pair(query, xs)
    third = hi + 1 if hi < n - 2 else lo - 1
    if third < 0:
        third = hi + 1
    picked = sorted((xs[lo], xs[hi], xs[third]))
    return tuple(float(x) for x in picked)


def bracket(query: float, abscissas) -> tuple[int, int]:
    """
    Indices of the sorted interval ``[x_lo, x_hi]`` that encloses ``query``.

    ``abscissas`` must already be sorted and distinct (as
    :attr:`PointSet.abscissas` is). Queries on a sample point return the
    interval to its left, except at the first point.

    :raises ValueError: If ``query`` lies outside the sample range.
    """
    xs = np.asarray(abscissas, dtype=float)
    if len(xs) < 2:
        raise InsufficientDataError(2, len(xs))
    if not xs[0] <= query <= xs[-1]:
        msg = f"{query} lies outside [{xs[0]}, {xs[-1]}]"
        raise ValueError(msg)
    hi = max(int(np.searchsorted(xs, query, side="left")), 1)
    return hi - 1, hi
