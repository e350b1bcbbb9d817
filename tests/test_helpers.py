import pytest

from funcinterp import InvalidInputError, PointSet
from funcinterp.helpers import read_points, write_points

pytestmark = pytest.mark.pure


def test_write_then_read(tmp_path):
    points = {0.1: 2.5, -3: 1e-7, 2: -4}
    out = write_points(tmp_path / "samples.ini", points)
    assert out == tmp_path / "samples.ini"

    ps = read_points(out)
    assert isinstance(ps, PointSet)
    assert ps == {0.1: 2.5, -3.0: 1e-7, 2.0: -4.0}


def test_directory_uses_default_name(tmp_path):
    out = write_points(tmp_path, {1: 2, 2: 3})
    assert out.name == "points.ini"
    assert read_points(tmp_path) == {1.0: 2.0, 2.0: 3.0}


def test_empty_values_are_dropped(tmp_path):
    path = tmp_path / "points.ini"
    path.write_text("[points]\n1 = 2\n2 =\n3 = 4\n")
    assert list(read_points(path)) == [1.0, 3.0]


def test_custom_section(tmp_path):
    path = tmp_path / "curves.ini"
    path.write_text("[rates]\n0.5 = 0.01\n1 = 0.015\n")
    assert read_points(path, section="rates")[0.5] == pytest.approx(0.01)
    with pytest.raises(InvalidInputError, match=r"Section \[points\]"):
        read_points(path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_points(tmp_path / "nope.ini")


def test_bad_value(tmp_path):
    path = tmp_path / "points.ini"
    path.write_text("[points]\n1 = two\n")
    with pytest.raises(InvalidInputError):
        read_points(path)
