"""Style values read by the renderers, plus the generic attribute string."""

from dataclasses import dataclass, replace
from enum import Enum
from xml.sax.saxutils import quoteattr

from ._svg_shared import fmt_num
from .constants import DEFAULT_RADIUS


class PointType(Enum):
    """How a single point is drawn."""

    CIRCLE = "circle"
    SYMBOL = "symbol"
    TEXT = "text"
    POI = "poi"

    @classmethod
    def from_name(cls, name: str) -> "PointType":
        """Resolve a point type from its (case-insensitive) name."""
        try:
            return cls(name.lower())
        except ValueError:
            available = ", ".join(supported_point_types())
            raise ValueError(f"Unknown point type '{name}'. Available: {available}") from None


def supported_point_types() -> tuple[str, ...]:
    """Return supported point type names in declaration order."""
    return tuple(point_type.value for point_type in PointType)


def _short_hex(color: str) -> str:
    lower = color.lower()
    if len(lower) == 7 and lower[1] == lower[2] and lower[3] == lower[4] and lower[5] == lower[6]:
        return f"#{lower[1]}{lower[3]}{lower[5]}"
    return lower


@dataclass(frozen=True, slots=True)
class Color:
    """An SVG paint value."""
    value: str

    @classmethod
    def named(cls, name: str) -> "Color":
        return cls(name)

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> "Color":
        for channel in (r, g, b):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel}")
        return cls(_short_hex(f"#{r:02x}{g:02x}{b:02x}"))

    @classmethod
    def hex(cls, code: str) -> "Color":
        digits = code.removeprefix("#")
        if len(digits) not in (3, 6) or any(c not in "0123456789abcdefABCDEF" for c in digits):
            raise ValueError(f"Invalid hex color: {code}")
        return cls(_short_hex(f"#{digits}"))

    @classmethod
    def parse(cls, text: str) -> "Color":
        """Build a color from ``#hex`` notation or a color keyword."""
        if text.startswith("#"):
            return cls.hex(text)
        return cls.named(text)

    def __str__(self) -> str:
        return self.value


# (attribute name, Style field) pairs rendered by Style.__str__, in output order.
_GENERIC_ATTRIBUTES: tuple[tuple[str, str], ...] = (
    ("id", "id"),
    ("fill", "fill"),
    ("fill-opacity", "fill_opacity"),
    ("stroke", "stroke_color"),
    ("stroke-width", "stroke_width"),
    ("stroke-opacity", "stroke_opacity"),
    ("opacity", "opacity"),
)


@dataclass(frozen=True, slots=True)
class Style:
    """Read-only rendering configuration.

    Renderers read the point/text/icon fields directly and insert
    ``str(style)`` into each element's attribute list for the generic
    visual attributes.
    """

    # Point and label fields
    point_type: PointType | None = None
    radius: float = DEFAULT_RADIUS
    text: str | None = None
    text_classes: str | None = None
    text_start_offset: float | str | None = None
    id: str | None = None

    # Point-of-interest icon
    icon_svg_viewbox: tuple[float, float, float, float] | None = None
    icon_svg_width_height: tuple[float, float] | None = None
    icon_svg_path: str | None = None

    # Generic visual attributes
    fill: Color | None = None
    fill_opacity: float | None = None
    stroke_color: Color | None = None
    stroke_width: float | None = None
    stroke_opacity: float | None = None
    opacity: float | None = None

    def __str__(self) -> str:
        parts: list[str] = []
        for attribute, field_name in _GENERIC_ATTRIBUTES:
            value = getattr(self, field_name)
            if value is None:
                continue
            text = fmt_num(value) if isinstance(value, (int, float)) else str(value)
            parts.append(f" {attribute}={quoteattr(text)}")
        return "".join(parts)

    def with_fill_color(self, color: Color) -> "Style":
        return replace(self, fill=color)

    def with_fill_opacity(self, opacity: float) -> "Style":
        return replace(self, fill_opacity=opacity)

    def with_stroke_color(self, color: Color) -> "Style":
        return replace(self, stroke_color=color)

    def with_stroke_width(self, width: float) -> "Style":
        return replace(self, stroke_width=width)

    def with_stroke_opacity(self, opacity: float) -> "Style":
        return replace(self, stroke_opacity=opacity)

    def with_opacity(self, opacity: float) -> "Style":
        return replace(self, opacity=opacity)

    def with_radius(self, radius: float) -> "Style":
        return replace(self, radius=radius)

    def with_point_type(self, point_type: PointType | None) -> "Style":
        return replace(self, point_type=point_type)

    def with_text(self, text: str) -> "Style":
        return replace(self, text=text)

    def with_text_classes(self, classes: str) -> "Style":
        return replace(self, text_classes=classes)

    def with_text_start_offset(self, offset: float | str) -> "Style":
        return replace(self, text_start_offset=offset)

    def with_id(self, element_id: str) -> "Style":
        return replace(self, id=element_id)

    def with_icon(
        self,
        path: str,
        viewbox: tuple[float, float, float, float] | None = None,
        width_height: tuple[float, float] | None = None,
    ) -> "Style":
        """Switch to point-of-interest rendering with the given icon markup."""
        return replace(
            self,
            point_type=PointType.POI,
            icon_svg_path=path,
            icon_svg_viewbox=viewbox,
            icon_svg_width_height=width_height,
        )
