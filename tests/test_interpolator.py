import pytest

from funcinterp import (
    InsufficientDataError,
    InterpolationError,
    Interpolator,
    InvalidInputError,
    Method,
)

pytestmark = pytest.mark.pure


@pytest.fixture
def interp(line_points):
    return Interpolator(line_points)


def test_documented_scenarios(interp):
    assert interp.linear(1.5) == pytest.approx(2.5)
    assert interp.quadratic(2.3) == pytest.approx(3.3)
    assert interp.cubic(4.5) == pytest.approx(5.5)


def test_exact_match_all_methods(interp, line_points):
    for x, y in line_points.items():
        assert interp.linear(x) == y
        assert interp.quadratic(x) == y
        assert interp.cubic(x) == y


def test_interpolate_dispatch(interp):
    assert interp.interpolate("linear", 1.5) == interp.linear(1.5)
    assert interp.interpolate(Method.QUADRATIC, 2.3) == interp.quadratic(2.3)
    assert interp.interpolate("CUBIC", 7.0) == pytest.approx(8.0)


def test_interpolate_unknown_method(interp):
    with pytest.raises(InvalidInputError, match="Unknown interpolation method"):
        interp.interpolate("spline", 1.5)


@pytest.mark.parametrize("bad", ["1.5", None, True, float("nan"), float("-inf")])
def test_invalid_query(interp, bad):
    with pytest.raises(InvalidInputError):
        interp.linear(bad)
    with pytest.raises(ValueError):
        interp.cubic(bad)


def test_cubic_needs_five_points():
    interp = Interpolator({1: 2, 2: 3, 3: 4, 4: 5})
    assert interp.linear(2.5) == pytest.approx(3.5)
    with pytest.raises(InsufficientDataError) as excinfo:
        interp.cubic(2.5)
    assert excinfo.value.method == "cubic"
    # Sample points are returned without needing the spline
    assert interp.cubic(2) == 3


def test_quadratic_needs_three_points():
    interp = Interpolator({1: 2, 2: 3})
    with pytest.raises(InsufficientDataError):
        interp.quadratic(1.5)
    assert interp.quadratic(1) == 2
    assert interp.interpolate("cubic", 2) == 3


@pytest.mark.parametrize("points", [{}, {1: 2}, {1: 2, 2: None}])
def test_construction_needs_two_points(points):
    with pytest.raises(InsufficientDataError):
        Interpolator(points)


def test_undefined_ordinates_are_dropped():
    interp = Interpolator({1: 2, 2: None, 3: 4})
    assert list(interp.points) == [1.0, 3.0]
    # Interpolated through (1, 2) and (3, 4), not read as zero
    assert interp.linear(2) == pytest.approx(3.0)


def test_method_instances_are_reused(interp):
    assert interp._get(Method.CUBIC) is interp._get(Method.CUBIC)
    interp.cubic(2.5)
    table = interp._get(Method.CUBIC).second_derivatives
    interp.cubic(3.5)
    assert interp._get(Method.CUBIC).second_derivatives is table


def test_errors_share_base():
    assert issubclass(InvalidInputError, InterpolationError)
    assert issubclass(InsufficientDataError, InterpolationError)
