"""Standalone SVG documents built from styled geometry layers."""

from collections.abc import Callable
from dataclasses import dataclass

from ._svg_shared import fmt_num
from .constants import SVG_NAMESPACE, XLINK_NAMESPACE
from .render import Renderable, bound, render
from .render.composites import union_bounds
from .style import Color, PointType, Style
from .viewbox import ViewBox


@dataclass(frozen=True, slots=True)
class Layer:
    item: Renderable
    style: Style


@dataclass(frozen=True, slots=True)
class Svg:
    """An SVG document made of layers drawn in order.

    Builder methods return a new document and apply to every layer, so a
    style set after ``and_`` reaches both stacked documents.
    """

    layers: tuple[Layer, ...] = ()

    def and_(self, other: "Svg") -> "Svg":
        """Stack ``other``'s layers on top of this document's."""
        return Svg(self.layers + other.layers)

    def viewbox(self) -> ViewBox:
        return union_bounds(bound(layer.item, layer.style) for layer in self.layers)

    def fragment(self) -> str:
        return "".join(render(layer.item, layer.style) for layer in self.layers)

    def __str__(self) -> str:
        view_box = self.viewbox()
        if view_box.is_empty:
            view_box_attr = "0 0 0 0"
        else:
            view_box_attr = " ".join(
                fmt_num(value)
                for value in (view_box.min_x, view_box.min_y, view_box.width, view_box.height)
            )
        parts: list[str] = [
            f'<svg xmlns="{SVG_NAMESPACE}" xmlns:xlink="{XLINK_NAMESPACE}" viewBox="{view_box_attr}">',
            self.fragment(),
            "</svg>",
        ]
        return "".join(parts)

    def _restyle(self, update: Callable[[Style], Style]) -> "Svg":
        return Svg(tuple(Layer(layer.item, update(layer.style)) for layer in self.layers))

    def with_style(self, style: Style) -> "Svg":
        return self._restyle(lambda _: style)

    def with_fill_color(self, color: Color) -> "Svg":
        return self._restyle(lambda style: style.with_fill_color(color))

    def with_fill_opacity(self, opacity: float) -> "Svg":
        return self._restyle(lambda style: style.with_fill_opacity(opacity))

    def with_stroke_color(self, color: Color) -> "Svg":
        return self._restyle(lambda style: style.with_stroke_color(color))

    def with_stroke_width(self, width: float) -> "Svg":
        return self._restyle(lambda style: style.with_stroke_width(width))

    def with_stroke_opacity(self, opacity: float) -> "Svg":
        return self._restyle(lambda style: style.with_stroke_opacity(opacity))

    def with_opacity(self, opacity: float) -> "Svg":
        return self._restyle(lambda style: style.with_opacity(opacity))

    def with_radius(self, radius: float) -> "Svg":
        return self._restyle(lambda style: style.with_radius(radius))

    def with_point_type(self, point_type: PointType | None) -> "Svg":
        return self._restyle(lambda style: style.with_point_type(point_type))

    def with_text(self, text: str) -> "Svg":
        return self._restyle(lambda style: style.with_text(text))

    def with_text_classes(self, classes: str) -> "Svg":
        return self._restyle(lambda style: style.with_text_classes(classes))

    def with_text_start_offset(self, offset: float | str) -> "Svg":
        return self._restyle(lambda style: style.with_text_start_offset(offset))

    def with_id(self, element_id: str) -> "Svg":
        return self._restyle(lambda style: style.with_id(element_id))

    def with_icon(
        self,
        path: str,
        viewbox: tuple[float, float, float, float] | None = None,
        width_height: tuple[float, float] | None = None,
    ) -> "Svg":
        return self._restyle(lambda style: style.with_icon(path, viewbox, width_height))


def to_svg(item: Renderable, style: Style | None = None) -> Svg:
    """Wrap a geometry in a single-layer document."""
    return Svg((Layer(item, style if style is not None else Style()),))
