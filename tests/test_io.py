import pytest

from starpad.config import STROKE_STYLE, PATH_ID
from starpad.errors import MalformedInput, InconsistentSampling, InvalidParameter
from starpad.model.geometry_primitives import Point2D
from starpad.model.io import IOManager
from starpad.model.star import generate_star


def test_parse_parameters(batch_params):
    params, radii = IOManager.parse_parameters("1 1 5\n5 3 0.4\n10 15.5\n")
    assert params == batch_params
    assert radii == [10.0, 15.5]


def test_parse_header_only(batch_params):
    params, radii = IOManager.parse_parameters("1 1 5 5 3 0.4")
    assert params == batch_params
    assert radii == []


def test_short_header():
    with pytest.raises(MalformedInput) as excinfo:
        IOManager.parse_parameters("1 1 5")
    assert excinfo.value.position == 3
    assert "min_radius" in str(excinfo.value)


def test_non_numeric_token():
    with pytest.raises(MalformedInput) as excinfo:
        IOManager.parse_parameters("1 1 5 5 3 0.4 10 abc 12")
    assert excinfo.value.position == 7


def test_invalid_header_value():
    with pytest.raises(InvalidParameter):
        IOManager.parse_parameters("0 1 5 5 3 0.4 10")


def test_read_parameters(param_file, batch_params):
    params, radii = IOManager.read_parameters(str(param_file))
    assert params == batch_params
    assert radii == [10.0, 15.0]


@pytest.mark.parametrize("radius, name", [(10.0, "10.0.svg"), (12.34, "12.3.svg"), (7, "7.0.svg")])
def test_output_filename(radius, name):
    assert IOManager.output_filename(radius) == name


def test_format_path_data():
    points = [Point2D(0.0, 0.0), Point2D(1.5, -2.0), Point2D(1.0 / 3.0, 1234567.0)]
    assert IOManager.format_path_data(points) == "M 0 0 L 1.5 -2 L 0.333333 1.23457e+06 Z"


def test_format_empty_path():
    with pytest.raises(InconsistentSampling):
        IOManager.format_path_data([])


def test_save_svg(tmp_path):
    star = generate_star(10.0, 1.0, 0.3, 0.4, 10, 13)
    path = tmp_path / "nested" / "10.0.svg"
    IOManager.save_svg(star, str(path))

    text = path.read_text(encoding="utf-8")
    assert text.startswith('<?xml version="1.0" encoding="UTF-8" standalone="no"?>\n')
    assert f'style="{STROKE_STYLE}"' in text
    assert f'id="{PATH_ID}"' in text
    assert text.count(" L ") == len(star) - 1
    assert text.count("M ") == 1
    assert ' Z"' in text
    assert text.endswith("</svg>\n")
