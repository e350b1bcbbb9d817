import logging
import math
import numbers
from collections import namedtuple
from collections.abc import Iterable, Iterator, Mapping
from enum import Enum
from functools import cached_property

import numpy as np

from funcinterp._errors import InsufficientDataError, InvalidInputError

log = logging.getLogger(__name__)

Point = namedtuple("Point", ["x", "y"])


class Method(Enum):
    """Supported interpolation methods and their minimum point counts."""

    LINEAR = "linear"
    QUADRATIC = "quadratic"
    CUBIC = "cubic"

    @property
    def min_points(self) -> int:
        return {"linear": 2, "quadratic": 3, "cubic": 5}[self.value]

    @classmethod
    def parse(cls, method: "Method | str") -> "Method":
        """Accepts a Method or its string value."""
        if isinstance(method, cls):
            return method
        try:
            return cls(str(method).lower())
        except ValueError as e:
            valid = ", ".join(m.value for m in cls)
            msg = f"Unknown interpolation method {method!r}; expected one of: {valid}"
            raise InvalidInputError(msg) from e


def as_query(x) -> float:
    """
    Validates a query abscissa.

    :param x: Any real number, including numpy scalars. Booleans are rejected.
    :return: The query as a Python float.
    :raises InvalidInputError: If ``x`` is not a finite real number.
    """
    if isinstance(x, bool | np.bool_) or not isinstance(x, numbers.Real):
        msg = f"sought point {x!r} must be a real number"
        raise InvalidInputError(msg)
    value = float(x)
    if not math.isfinite(value):
        msg = f"sought point {x!r} must be finite"
        raise InvalidInputError(msg)
    return value


def _coerce(value, role: str) -> float:
    try:
        out = float(value)
    except (TypeError, ValueError) as e:
        msg = f"{role} {value!r} is not a number"
        raise InvalidInputError(msg) from e
    if not math.isfinite(out):
        msg = f"{role} {value!r} must be finite"
        raise InvalidInputError(msg)
    return out


class PointSet(Mapping):
    """
    Immutable mapping of sample abscissas to ordinates.

    Entries whose ordinate is ``None`` are dropped, since there is nothing to
    interpolate through. Keys and values go through ``float()`` so numeric
    strings (as read from configuration files) are accepted.

    Args:
        points: A mapping or an iterable of ``(x, y)`` pairs.
    """

    def __init__(self, points: Mapping | Iterable):
        pairs = points.items() if isinstance(points, Mapping) else points
        data = {}
        dropped = 0
        for key, value in pairs:
            if value is None:
                dropped += 1
                continue
            x = _coerce(key, "abscissa")
            if x in data:
                msg = f"abscissa {key!r} duplicates an existing point at {x!r}"
                raise InvalidInputError(msg)
            data[x] = _coerce(value, "ordinate")
        if dropped:
            log.debug(f"Dropped {dropped} point(s) with undefined ordinates.")
        self._data = data

    def __getitem__(self, x):
        return self._data[x]

    def __iter__(self) -> Iterator[float]:
        return iter(self.abscissas.tolist())

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, x) -> bool:
        try:
            return x in self._data
        except TypeError:
            return False

    def __repr__(self):
        pairs = dict(zip(self.abscissas.tolist(), self.ordinates.tolist()))
        return f"PointSet({pairs})"

    @cached_property
    def abscissas(self) -> np.ndarray:
        """Ascending, read-only array of the sample abscissas."""
        xs = np.array(sorted(self._data), dtype=float)
        xs.flags.writeable = False
        return xs

    @cached_property
    def ordinates(self) -> np.ndarray:
        """Read-only array of ordinates aligned with :attr:`abscissas`."""
        ys = np.array([self._data[x] for x in self.abscissas.tolist()], dtype=float)
        ys.flags.writeable = False
        return ys

    def require(self, count: int, method: str | None = None) -> None:
        """Raises InsufficientDataError if fewer than ``count`` points exist."""
        if len(self) < count:
            raise InsufficientDataError(count, len(self), method)
