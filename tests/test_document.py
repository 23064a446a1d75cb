"""Tests for standalone SVG documents."""

import xml.etree.ElementTree as ET

from geo_svg import Color, LineString, MultiPoint, Point, PointType, Rect, Style, ViewBox, to_svg


def _assert_valid_svg_xml(markup: str) -> ET.Element:
    root = ET.fromstring(markup)
    assert root.tag == "{http://www.w3.org/2000/svg}svg"
    return root


def test_document_wraps_fragment_with_viewbox():
    document = to_svg(Point(0, 0)).with_radius(2)

    markup = str(document)

    assert markup == (
        '<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink"'
        ' viewBox="-3 -3 6 6">'
        '<circle alt="point_type_none" cx="0" cy="0" r="2"/></svg>'
    )
    _assert_valid_svg_xml(markup)


def test_document_fragment_matches_layers():
    document = to_svg(Rect((0, 0), (10, 10)), Style(stroke_width=2))

    assert document.fragment() == '<path fill-rule="evenodd" d="M 0 0 L 0 10 L 10 10 L 10 0 Z" stroke-width="2"/>'
    assert document.viewbox() == ViewBox(-2.0, -2.0, 12.0, 12.0)


def test_builder_applies_to_all_stacked_layers():
    """Styles set after stacking reach every layer; earlier ones stay local."""
    document = (
        to_svg(Point(0, 0))
        .with_fill_color(Color.named("red"))
        .with_radius(10)
        .and_(to_svg(Point(50, 0)).with_radius(5))
        .with_stroke_width(1.0)
        .with_point_type(PointType.CIRCLE)
    )

    assert document.fragment() == (
        '<circle cx="0" cy="0" r="10" fill="red" stroke-width="1"/>'
        '<circle cx="50" cy="0" r="5" stroke-width="1"/>'
    )
    assert document.viewbox() == ViewBox(-11.0, -11.0, 56.0, 11.0)


def test_document_with_text_path_is_valid_xml():
    document = to_svg(LineString([(0, 0), (100, 0)])).with_id("road").with_text("Main St")

    root = _assert_valid_svg_xml(str(document))

    text_path = root.find(".//{http://www.w3.org/2000/svg}textPath")
    assert text_path is not None
    assert text_path.text == "Main St"


def test_text_path_reference_matches_escaped_id():
    document = to_svg(LineString([(0, 0), (10, 0)]), Style(text="Main", id="a&b"))

    root = _assert_valid_svg_xml(str(document))

    path = root.find("{http://www.w3.org/2000/svg}path")
    text_path = root.find(".//{http://www.w3.org/2000/svg}textPath")
    assert path.get("id") == "a&b"
    assert text_path.get("{http://www.w3.org/1999/xlink}href") == "#a&b"


def test_text_point_classes_with_quote_are_valid_xml():
    document = to_svg(Point(0, 0), Style(point_type=PointType.TEXT, text="hi", text_classes='a"b'))

    root = _assert_valid_svg_xml(str(document))

    text = root.find("{http://www.w3.org/2000/svg}text")
    assert text.get("class") == 'a"b'
    assert text.text == "hi"


def test_empty_document_has_zero_viewbox():
    markup = str(to_svg(MultiPoint()))

    assert 'viewBox="0 0 0 0"' in markup
    _assert_valid_svg_xml(markup)


def test_with_style_replaces_layer_styles():
    style = Style(point_type=PointType.TEXT, text="A")

    document = to_svg(Point(1, 1)).with_style(style)

    assert document.fragment() == '<text class="" x="1" y="1">A</text>'
