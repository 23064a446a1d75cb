"""Single entry point mapping any geometry, or sequence of them, to its renderer."""

from typing import Any, TypeAlias

from ..geometry import (
    Geometry,
    GeometryCollection,
    Line,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    Rect,
    Triangle,
)
from ..style import Style
from ..viewbox import ViewBox
from .composites import (
    bound_line_string,
    bound_multi_line_string,
    bound_multi_point,
    bound_multi_polygon,
    bound_polygon,
    concat_renders,
    fold_bounds,
    render_line_string,
    render_multi_line_string,
    render_multi_point,
    render_multi_polygon,
    render_polygon,
)
from .primitives import bound_line, bound_point, render_line, render_point

Renderable: TypeAlias = "Geometry | list[Renderable] | tuple[Renderable, ...]"


def render(item: Renderable, style: Style | None = None) -> str:
    """
    Render a geometry as an SVG fragment.

    Args:
        item: Any geometry variant, or a list/tuple of renderable items
        style: Style to apply; defaults to ``Style()``

    Returns:
        SVG markup without an enclosing ``<svg>`` root

    Raises:
        TypeError: If ``item`` is not a renderable value
    """
    style = style if style is not None else Style()
    match _normalize(item):
        case Point() as point:
            return render_point(point, style)
        case Line() as line:
            return render_line(line, style)
        case LineString() as line_string:
            return render_line_string(line_string, style)
        case Polygon() as polygon:
            return render_polygon(polygon, style)
        case MultiPoint() as multi_point:
            return render_multi_point(multi_point, style)
        case MultiLineString() as multi_line_string:
            return render_multi_line_string(multi_line_string, style)
        case MultiPolygon() as multi_polygon:
            return render_multi_polygon(multi_polygon, style)
        case GeometryCollection(geometries=members):
            return concat_renders(members, style, render)
        case list() | tuple() as members:
            return concat_renders(members, style, render)
    raise _unsupported(item)


def bound(item: Renderable, style: Style | None = None) -> ViewBox:
    """
    Compute the box a rendering of ``item`` occupies, style padding included.

    Args:
        item: Any geometry variant, or a list/tuple of renderable items
        style: Style supplying radius and stroke width; defaults to ``Style()``

    Returns:
        The bounding ViewBox; ``ViewBox.default()`` for empty inputs

    Raises:
        TypeError: If ``item`` is not a renderable value
    """
    style = style if style is not None else Style()
    match _normalize(item):
        case Point() as point:
            return bound_point(point, style)
        case Line() as line:
            return bound_line(line, style)
        case LineString() as line_string:
            return bound_line_string(line_string, style)
        case Polygon() as polygon:
            return bound_polygon(polygon, style)
        case MultiPoint() as multi_point:
            return bound_multi_point(multi_point, style)
        case MultiLineString() as multi_line_string:
            return bound_multi_line_string(multi_line_string, style)
        case MultiPolygon() as multi_polygon:
            return bound_multi_polygon(multi_polygon, style)
        case GeometryCollection(geometries=members):
            return fold_bounds(members, style, bound)
        case list() | tuple() as members:
            return fold_bounds(members, style, bound)
    raise _unsupported(item)


def _normalize(item: Any) -> Any:
    """Reduce shapes defined as polygons to their Polygon."""
    if isinstance(item, (Rect, Triangle)):
        return item.to_polygon()
    return item


def _unsupported(item: Any) -> TypeError:
    return TypeError(f"Cannot render value of type {type(item).__name__}")
