"""Rendering and bounding of geometries as SVG fragments."""

from .composites import (
    bound_line_string,
    bound_multi_line_string,
    bound_multi_point,
    bound_multi_polygon,
    bound_polygon,
    render_line_string,
    render_multi_line_string,
    render_multi_point,
    render_multi_polygon,
    render_polygon,
)
from .dispatch import Renderable, bound, render
from .primitives import bound_line, bound_point, render_line, render_point

__all__ = [
    "Renderable",
    "render",
    "bound",
    "render_point",
    "bound_point",
    "render_line",
    "bound_line",
    "render_line_string",
    "bound_line_string",
    "render_polygon",
    "bound_polygon",
    "render_multi_point",
    "bound_multi_point",
    "render_multi_line_string",
    "bound_multi_line_string",
    "render_multi_polygon",
    "bound_multi_polygon",
]
