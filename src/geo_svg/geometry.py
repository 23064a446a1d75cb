"""Immutable geometry values accepted by the renderers."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, TypeAlias


@dataclass(frozen=True, slots=True)
class Point:
    """A single coordinate. ``x`` and ``y`` may be any ordered numeric type."""
    x: Any
    y: Any


PointLike: TypeAlias = "Point | tuple[Any, Any]"


def as_point(value: "PointLike") -> Point:
    """Coerce an ``(x, y)`` pair into a Point."""
    if isinstance(value, Point):
        return value
    x, y = value
    return Point(x, y)


def _as_points(values: Iterable["PointLike"]) -> tuple[Point, ...]:
    return tuple(as_point(value) for value in values)


@dataclass(frozen=True, slots=True)
class Line:
    """A straight segment between two points."""
    start: Point
    end: Point

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", as_point(self.start))
        object.__setattr__(self, "end", as_point(self.end))


@dataclass(frozen=True, slots=True)
class LineString:
    """An open contour through an ordered sequence of points."""
    points: tuple[Point, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", _as_points(self.points))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def lines(self) -> Iterator[Line]:
        """Yield the segment between each consecutive pair of points."""
        for start, end in zip(self.points, self.points[1:]):
            yield Line(start, end)

    @property
    def is_closed(self) -> bool:
        return bool(self.points) and self.points[0] == self.points[-1]

    def closed(self) -> "LineString":
        """Return this contour with the first point repeated at the end if needed."""
        if not self.points or self.is_closed:
            return self
        return LineString(self.points + (self.points[0],))


def _as_line_string(value: "LineString | Iterable[PointLike]") -> LineString:
    if isinstance(value, LineString):
        return value
    return LineString(tuple(value))


@dataclass(frozen=True, slots=True)
class Polygon:
    """An exterior ring with zero or more interior rings (holes).

    Rings are closed on construction.
    """
    exterior: LineString
    interiors: tuple[LineString, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "exterior", _as_line_string(self.exterior).closed())
        object.__setattr__(
            self,
            "interiors",
            tuple(_as_line_string(ring).closed() for ring in self.interiors),
        )

    def rings(self) -> Iterator[LineString]:
        """Yield the exterior ring, then each interior ring."""
        yield self.exterior
        yield from self.interiors


@dataclass(frozen=True, slots=True)
class Rect:
    """An axis-aligned rectangle given by two opposite corners."""
    min: Point
    max: Point

    def __post_init__(self) -> None:
        a, b = as_point(self.min), as_point(self.max)
        object.__setattr__(self, "min", Point(min(a.x, b.x), min(a.y, b.y)))
        object.__setattr__(self, "max", Point(max(a.x, b.x), max(a.y, b.y)))

    def to_polygon(self) -> Polygon:
        return Polygon(
            LineString(
                (
                    (self.min.x, self.min.y),
                    (self.min.x, self.max.y),
                    (self.max.x, self.max.y),
                    (self.max.x, self.min.y),
                )
            )
        )


@dataclass(frozen=True, slots=True)
class Triangle:
    a: Point
    b: Point
    c: Point

    def __post_init__(self) -> None:
        object.__setattr__(self, "a", as_point(self.a))
        object.__setattr__(self, "b", as_point(self.b))
        object.__setattr__(self, "c", as_point(self.c))

    def to_polygon(self) -> Polygon:
        return Polygon(LineString((self.a, self.b, self.c)))


@dataclass(frozen=True, slots=True)
class MultiPoint:
    points: tuple[Point, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", _as_points(self.points))


@dataclass(frozen=True, slots=True)
class MultiLineString:
    line_strings: tuple[LineString, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "line_strings",
            tuple(_as_line_string(line_string) for line_string in self.line_strings),
        )


@dataclass(frozen=True, slots=True)
class MultiPolygon:
    polygons: tuple[Polygon, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "polygons", tuple(self.polygons))


@dataclass(frozen=True, slots=True)
class GeometryCollection:
    """A heterogeneous, possibly nested, sequence of geometries."""
    geometries: tuple["Geometry", ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "geometries", tuple(self.geometries))


Geometry: TypeAlias = (
    Point
    | Line
    | LineString
    | Polygon
    | Rect
    | Triangle
    | MultiPoint
    | MultiLineString
    | MultiPolygon
    | GeometryCollection
)
