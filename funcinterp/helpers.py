import configparser
import logging
from collections.abc import Mapping
from pathlib import Path

from funcinterp._errors import InvalidInputError
from funcinterp.basetypes import PointSet

log = logging.getLogger(__name__)

DEFAULT_FILENAME = "points.ini"


def _resolve(path: str | Path) -> Path:
    path = Path(path)
    if path.is_dir():
        path = path / DEFAULT_FILENAME
    return path


def read_points(path: str | Path, section: str = "points") -> PointSet:
    """
    Reads sample points from an INI file.

    Each option in ``section`` is one sample, ``abscissa = ordinate``. An
    option with an empty value counts as a missing ordinate and is dropped.

    :param path: The file, or a directory holding ``points.ini``.
    :param section: Section holding the samples.
    :raises FileNotFoundError: If the file does not exist.
    :raises InvalidInputError: If the section is missing or a value is not numeric.
    """
    in_path = _resolve(path)
    if not in_path.is_file():
        msg = f"No points file at '{in_path}'"
        raise FileNotFoundError(msg)

    config = configparser.ConfigParser()
    config.optionxform = str  # Keys are numbers, keep them verbatim
    config.read(in_path)
    if not config.has_section(section):
        msg = f"Section [{section}] not found in '{in_path}'"
        raise InvalidInputError(msg)

    raw = {k: (v if v.strip() else None) for k, v in config[section].items()}
    log.debug(f"Read {len(raw)} point(s) from '{in_path}'")
    return PointSet(raw)


def write_points(path: str | Path, points: Mapping, section: str = "points") -> Path:
    """
    Writes sample points to an INI file readable by :func:`read_points`.

    Values are written with ``repr`` so floats round-trip exactly.
    """
    points = points if isinstance(points, PointSet) else PointSet(points)
    config = configparser.ConfigParser()
    config.optionxform = str
    config[section] = {repr(x): repr(points[x]) for x in points}

    out_path = _resolve(path)
    with open(out_path, "w") as f:
        config.write(f)
    log.info(f"Wrote {len(points)} point(s) to '{out_path}'")
    return out_path
