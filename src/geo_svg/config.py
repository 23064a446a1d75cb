"""Default style configuration from environment variables."""

import os
from collections.abc import Mapping

from .constants import DEFAULT_RADIUS
from .style import Color, PointType, Style

ENV_RADIUS = "GEO_SVG_RADIUS"
ENV_STROKE_WIDTH = "GEO_SVG_STROKE_WIDTH"
ENV_FILL = "GEO_SVG_FILL"
ENV_STROKE = "GEO_SVG_STROKE"
ENV_POINT_TYPE = "GEO_SVG_POINT_TYPE"


def load_style_defaults(environ: Mapping[str, str] | None = None) -> Style:
    """
    Build the base style from ``GEO_SVG_*`` environment variables.

    Args:
        environ: Mapping to read instead of ``os.environ``

    Returns:
        A Style with every configured field set

    Raises:
        ValueError: If a configured value cannot be parsed
    """
    env = os.environ if environ is None else environ

    stroke_width = _read_float(env, ENV_STROKE_WIDTH)
    fill = env.get(ENV_FILL)
    stroke = env.get(ENV_STROKE)
    point_type = env.get(ENV_POINT_TYPE)
    radius = _read_float(env, ENV_RADIUS)

    return Style(
        radius=radius if radius is not None else DEFAULT_RADIUS,
        stroke_width=stroke_width,
        fill=Color.parse(fill) if fill else None,
        stroke_color=Color.parse(stroke) if stroke else None,
        point_type=PointType.from_name(point_type) if point_type else None,
    )


def _read_float(env: Mapping[str, str], name: str) -> float | None:
    raw = env.get(name)
    if raw is None or raw == "":
        return None
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got '{raw}'") from None
