"""Render geometries to SVG fragments and compute their padded bounds."""

from .document import Svg, to_svg
from .geometry import (
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
from .render import Renderable, bound, render
from .style import Color, PointType, Style
from .viewbox import ViewBox

__all__ = [
    "Geometry",
    "GeometryCollection",
    "Line",
    "LineString",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "Point",
    "Polygon",
    "Rect",
    "Triangle",
    "Renderable",
    "render",
    "bound",
    "Color",
    "PointType",
    "Style",
    "ViewBox",
    "Svg",
    "to_svg",
]
