from funcinterp.basetypes import Method
from funcinterp.interpolation._base import BaseInterpolator
from funcinterp.interpolation.cubic import (
    CubicSplineInterpolator,
    extrapolate_spline,
    natural_spline_second_derivatives,
)
from funcinterp.interpolation.linear import LinearInterpolator
from funcinterp.interpolation.quadratic import QuadraticInterpolator, solve_quadratic

__all__ = [
    "BaseInterpolator",
    "CubicSplineInterpolator",
    "LinearInterpolator",
    "QuadraticInterpolator",
    "extrapolate_spline",
    "get_interpolator",
    "natural_spline_second_derivatives",
    "solve_quadratic",
]


def get_interpolator(method):
    """
    Retrieves the interpolator class for a method.

    Args:
        method: A Method or its name ('linear', 'quadratic', 'cubic').

    Returns:
        type: The interpolator class.

    Raises:
        InvalidInputError: For an unknown method name.
    """
    models = {
        Method.LINEAR: LinearInterpolator,
        Method.QUADRATIC: QuadraticInterpolator,
        Method.CUBIC: CubicSplineInterpolator,
    }
    return models[Method.parse(method)]
