"""Shared helpers for numeric coercion and SVG number formatting."""

import logging
import math
from numbers import Integral
from typing import Any
from xml.sax.saxutils import escape

from .constants import NUMERIC_FALLBACK

logger = logging.getLogger(__name__)


def to_float(value: Any, default: float = NUMERIC_FALLBACK) -> float:
    """Cast a coordinate to float, returning ``default`` when the cast fails.

    Values that cannot be converted, overflow, or are not finite all take
    the fallback.
    """
    try:
        result = float(value)
    except (TypeError, ValueError, OverflowError):
        logger.debug("Cannot cast %r to float, using %s", value, default)
        return default
    if not math.isfinite(result):
        logger.debug("Non-finite coordinate %r, using %s", value, default)
        return default
    return result


def fmt_num(value: Any) -> str:
    """Format a number for an SVG attribute.

    Integral values drop their fractional part (``10.0`` -> ``10``); other
    values use the shortest repr that round-trips.
    """
    if isinstance(value, Integral):
        return str(int(value))
    number = to_float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


def esc_attr(value: Any) -> str:
    """Escape a value for use inside a double-quoted attribute.

    Numbers are formatted with ``fmt_num``; anything else goes through ``str``.
    """
    text = fmt_num(value) if isinstance(value, (int, float)) else str(value)
    return escape(text, {'"': "&quot;"})
