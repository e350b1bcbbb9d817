try:
    from funcinterp._version import __version__
except ImportError:
    __version__ = "unknown"

from funcinterp._errors import (
    InsufficientDataError,
    InterpolationError,
    InvalidInputError,
    SingularSystemError,
)
from funcinterp.basetypes import Method, PointSet
from funcinterp.interpolator import Interpolator

__all__ = [
    "InsufficientDataError",
    "InterpolationError",
    "Interpolator",
    "InvalidInputError",
    "Method",
    "PointSet",
    "SingularSystemError",
]


def __getattr__(name):
    if name == "helpers":
        from funcinterp import helpers

        return helpers
    aerr = f"module 'funcinterp' has no attribute {name}"
    raise AttributeError(aerr)
