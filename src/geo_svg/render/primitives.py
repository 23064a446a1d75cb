"""Renderers for the atomic shapes: points and lines."""

from dataclasses import replace
from xml.sax.saxutils import escape

from .._svg_shared import esc_attr, fmt_num, to_float
from ..constants import (
    DEFAULT_ICON_VIEWBOX,
    DEFAULT_ICON_WIDTH_HEIGHT,
    DEFAULT_STROKE_PADDING,
    POI_LABEL_OFFSET_X,
    POI_LABEL_OFFSET_Y,
    POINT_TYPE_NONE_MARKER,
)
from ..geometry import Line, Point
from ..style import PointType, Style
from ..viewbox import ViewBox


def render_point(point: Point, style: Style) -> str:
    """Render a point using the style's point type."""
    match style.point_type:
        case PointType.TEXT:
            return _text_element(point, style)
        case PointType.POI:
            return _poi_element(point, style)
        case PointType.CIRCLE | PointType.SYMBOL:
            return _circle_element(point, style)
        case None:
            return _circle_element(point, style, marker=POINT_TYPE_NONE_MARKER)
    raise TypeError(f"Unsupported point type: {style.point_type!r}")


def bound_point(point: Point, style: Style) -> ViewBox:
    """Square around the point padded by radius plus stroke width.

    The point type is ignored: text labels and icons may draw outside
    this box.
    """
    stroke = style.stroke_width if style.stroke_width is not None else DEFAULT_STROKE_PADDING
    pad = style.radius + stroke
    x, y = to_float(point.x), to_float(point.y)
    return ViewBox(x - pad, y - pad, x + pad, y + pad)


def render_line(line: Line, style: Style) -> str:
    return (
        f'<path d="M {fmt_num(line.start.x)} {fmt_num(line.start.y)} '
        f'L {fmt_num(line.end.x)} {fmt_num(line.end.y)}"{style}/>'
    )


def bound_line(line: Line, style: Style) -> ViewBox:
    """Union of both endpoint boxes, padded by stroke width only."""
    stroke_only = replace(style, radius=0.0)
    return bound_point(line.start, stroke_only).add(bound_point(line.end, stroke_only))


def _circle_element(point: Point, style: Style, marker: str | None = None) -> str:
    alt = f'alt="{marker}" ' if marker else ""
    return (
        f'<circle {alt}cx="{fmt_num(point.x)}" cy="{fmt_num(point.y)}" '
        f'r="{fmt_num(style.radius)}"{style}/>'
    )


def _text_element(point: Point, style: Style) -> str:
    return (
        f'<text class="{esc_attr(style.text_classes or "")}" x="{fmt_num(point.x)}" y="{fmt_num(point.y)}"'
        f"{style}>{escape(style.text or '')}</text>"
    )


def _poi_element(point: Point, style: Style) -> str:
    min_x, min_y, vb_width, vb_height = style.icon_svg_viewbox or DEFAULT_ICON_VIEWBOX
    width, height = style.icon_svg_width_height or DEFAULT_ICON_WIDTH_HEIGHT
    x, y = to_float(point.x), to_float(point.y)

    label = ""
    if style.text is not None:
        label_x = x + width / 2 + POI_LABEL_OFFSET_X
        label_y = y + height + POI_LABEL_OFFSET_Y
        label = f'<text x="{fmt_num(label_x)}" y="{fmt_num(label_y)}">{escape(style.text)}</text>'

    return (
        f'<svg x="{fmt_num(x - width / 2)}" y="{fmt_num(y - height / 2)}" '
        f'width="{fmt_num(width)}" height="{fmt_num(height)}" '
        f'viewBox="{fmt_num(min_x)} {fmt_num(min_y)} {fmt_num(vb_width)} {fmt_num(vb_height)}"'
        f"{style}>{style.icon_svg_path or ''}</svg>{label}"
    )
