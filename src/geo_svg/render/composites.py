"""Renderers for shapes built out of points and lines."""

from collections.abc import Callable, Iterable
from functools import reduce
from typing import TypeVar
from xml.sax.saxutils import escape

from .._svg_shared import esc_attr, fmt_num
from ..geometry import LineString, MultiLineString, MultiPoint, MultiPolygon, Polygon
from ..style import Style
from ..viewbox import ViewBox
from .primitives import bound_line, bound_point, render_point

_Item = TypeVar("_Item")


def concat_renders(
    items: Iterable[_Item], style: Style, render: Callable[[_Item, Style], str]
) -> str:
    """Concatenate member fragments in order, without separators."""
    return "".join(render(item, style) for item in items)


def fold_bounds(
    items: Iterable[_Item], style: Style, bound: Callable[[_Item, Style], ViewBox]
) -> ViewBox:
    """Union member bounds, seeded with the empty box."""
    return union_bounds(bound(item, style) for item in items)


def union_bounds(view_boxes: Iterable[ViewBox]) -> ViewBox:
    return reduce(ViewBox.add, view_boxes, ViewBox.default())


def render_multi_point(multi_point: MultiPoint, style: Style) -> str:
    return concat_renders(multi_point.points, style, render_point)


def bound_multi_point(multi_point: MultiPoint, style: Style) -> ViewBox:
    return fold_bounds(multi_point.points, style, bound_point)


def render_line_string(line_string: LineString, style: Style) -> str:
    """Render an open contour, with a text-on-path label when style has text and id."""
    d = " ".join(
        f"M {fmt_num(line.start.x)} {fmt_num(line.start.y)} "
        f"L {fmt_num(line.end.x)} {fmt_num(line.end.y)}"
        for line in line_string.lines()
    )
    return f'<path d="{d}"{style}/>{_text_path_element(style)}'


def bound_line_string(line_string: LineString, style: Style) -> ViewBox:
    return fold_bounds(line_string.lines(), style, bound_line)


def _text_path_element(style: Style) -> str:
    if style.text is None or style.id is None:
        return ""
    start_offset = ""
    if style.text_start_offset is not None:
        start_offset = f' startOffset="{esc_attr(style.text_start_offset)}"'
    return (
        f'<text class="{esc_attr(style.text_classes or "")}">'
        f'<textPath xlink:href="#{esc_attr(style.id)}"{start_offset}>{escape(style.text)}</textPath>'
        "</text>"
    )


def render_multi_line_string(multi_line_string: MultiLineString, style: Style) -> str:
    return concat_renders(multi_line_string.line_strings, style, render_line_string)


def bound_multi_line_string(multi_line_string: MultiLineString, style: Style) -> ViewBox:
    return fold_bounds(multi_line_string.line_strings, style, bound_line_string)


def render_polygon(polygon: Polygon, style: Style) -> str:
    """Render every ring as a closed subpath of one even-odd filled path."""
    d = " ".join(
        subpath for subpath in (_closed_subpath(ring) for ring in polygon.rings()) if subpath
    )
    return f'<path fill-rule="evenodd" d="{d}"{style}/>'


def bound_polygon(polygon: Polygon, style: Style) -> ViewBox:
    edges = (line for ring in polygon.rings() for line in ring.lines())
    return fold_bounds(edges, style, bound_line)


def _closed_subpath(ring: LineString) -> str:
    # Rings are stored closed; Z draws the final edge back to the first vertex.
    points = ring.points[:-1] if ring.is_closed and len(ring) > 1 else ring.points
    if not points:
        return ""
    first, *rest = points
    commands = [f"M {fmt_num(first.x)} {fmt_num(first.y)}"]
    commands.extend(f"L {fmt_num(point.x)} {fmt_num(point.y)}" for point in rest)
    commands.append("Z")
    return " ".join(commands)


def render_multi_polygon(multi_polygon: MultiPolygon, style: Style) -> str:
    return concat_renders(multi_polygon.polygons, style, render_polygon)


def bound_multi_polygon(multi_polygon: MultiPolygon, style: Style) -> ViewBox:
    return fold_bounds(multi_polygon.polygons, style, bound_polygon)
