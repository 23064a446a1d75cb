"""Axis-aligned bounding rectangle accumulator."""

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ViewBox:
    """Bounding rectangle of rendered output, padding included.

    The default instance is the empty rectangle: its extremes sit at
    infinity so it never wins a comparison in ``add``.
    """

    min_x: float = math.inf
    min_y: float = math.inf
    max_x: float = -math.inf
    max_y: float = -math.inf

    @classmethod
    def default(cls) -> "ViewBox":
        """Return the identity element of ``add``."""
        return cls()

    def add(self, other: "ViewBox") -> "ViewBox":
        """Return the smallest rectangle containing both boxes."""
        return ViewBox(
            min(self.min_x, other.min_x),
            min(self.min_y, other.min_y),
            max(self.max_x, other.max_x),
            max(self.max_y, other.max_y),
        )

    @property
    def is_empty(self) -> bool:
        return self.min_x > self.max_x or self.min_y > self.max_y

    @property
    def width(self) -> float:
        return 0.0 if self.is_empty else self.max_x - self.min_x

    @property
    def height(self) -> float:
        return 0.0 if self.is_empty else self.max_y - self.min_y

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.min_x, self.min_y, self.max_x, self.max_y)
