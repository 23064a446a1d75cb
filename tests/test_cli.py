"""Tests for the geo-svg command line interface."""

import json

import pytest
from typer.testing import CliRunner

from geo_svg.cli import app

runner = CliRunner()

POINT = json.dumps({"type": "Point", "coordinates": [1, 2]})
SQUARE = json.dumps(
    {"type": "Polygon", "coordinates": [[[0, 0], [10, 0], [10, 10], [0, 10], [0, 0]]]}
)


@pytest.fixture(autouse=True)
def clear_style_environment(monkeypatch):
    for name in (
        "GEO_SVG_RADIUS",
        "GEO_SVG_STROKE_WIDTH",
        "GEO_SVG_FILL",
        "GEO_SVG_STROKE",
        "GEO_SVG_POINT_TYPE",
    ):
        monkeypatch.delenv(name, raising=False)


def test_fragment_from_stdin():
    result = runner.invoke(app, ["--fragment"], input=POINT)

    assert result.exit_code == 0
    assert result.stdout.strip() == '<circle alt="point_type_none" cx="1" cy="2" r="0"/>'


def test_document_with_style_options():
    result = runner.invoke(
        app,
        ["-", "--point-type", "circle", "--radius", "4", "--fill", "#FF0000"],
        input=POINT,
    )

    assert result.exit_code == 0
    assert result.stdout.startswith('<svg xmlns="http://www.w3.org/2000/svg"')
    assert '<circle cx="1" cy="2" r="4" fill="#f00"/>' in result.stdout


def test_environment_defaults_apply(monkeypatch):
    monkeypatch.setenv("GEO_SVG_STROKE_WIDTH", "3")

    result = runner.invoke(app, ["--fragment"], input=SQUARE)

    assert result.exit_code == 0
    assert 'stroke-width="3"' in result.stdout


def test_reads_file_and_writes_output(tmp_path):
    source = tmp_path / "square.geojson"
    source.write_text(SQUARE)
    target = tmp_path / "square.svg"

    result = runner.invoke(app, [str(source), "--output", str(target)])

    assert result.exit_code == 0
    markup = target.read_text()
    assert 'viewBox="-1 -1 12 12"' in markup
    assert 'fill-rule="evenodd"' in markup


def test_bounds_table():
    result = runner.invoke(app, ["--bounds"], input=SQUARE)

    assert result.exit_code == 0
    assert "Viewbox" in result.stdout
    assert "12" in result.stdout


def test_invalid_json_is_reported():
    result = runner.invoke(app, ["-"], input="{not json")

    assert result.exit_code == 1
    assert "Invalid JSON" in (result.stdout + result.stderr)


def test_missing_file_is_reported():
    result = runner.invoke(app, ["does-not-exist.geojson"])

    assert result.exit_code == 1
    assert "not found" in (result.stdout + result.stderr)


def test_unsupported_geometry_is_reported():
    result = runner.invoke(app, ["-"], input=json.dumps({"type": "Circle"}))

    assert result.exit_code == 1
    assert "Unsupported GeoJSON type" in (result.stdout + result.stderr)


def test_unknown_point_type_is_reported():
    result = runner.invoke(app, ["--point-type", "star"], input=POINT)

    assert result.exit_code == 1
    assert "Unknown point type" in (result.stdout + result.stderr)
