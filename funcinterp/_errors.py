class InterpolationError(Exception):
    """Base class for every error raised while interpolating."""


class InvalidInputError(InterpolationError, ValueError):
    """A query or sample value is not a finite real number."""


class InsufficientDataError(InterpolationError, ValueError):
    """
    Fewer distinct sample points than the method needs.

    Args:
        required: Minimum number of points for the method.
        available: Number of points actually present.
        method: Name of the method that refused to run, if known.
    """

    def __init__(self, required: int, available: int, method: str | None = None):
        self.required = required
        self.available = available
        self.method = method
        what = f"{method} interpolation" if method else "interpolation"
        super().__init__(
            f"cannot run {what} with fewer than {required} data points "
            f"(got {available})"
        )


class SingularSystemError(InterpolationError, ArithmeticError):
    """The quadratic fit has no unique solution."""
