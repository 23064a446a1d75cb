"""Conversion of GeoJSON mappings into geometry values."""

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from .geometry import (
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)


def _point(coordinates: Any) -> Point:
    x, y, *_ = coordinates
    return Point(x, y)


def _line_string(coordinates: Any) -> LineString:
    return LineString(tuple(_point(position) for position in coordinates))


def _polygon(coordinates: Any) -> Polygon:
    rings = [_line_string(ring) for ring in coordinates]
    if not rings:
        return Polygon(LineString())
    return Polygon(rings[0], tuple(rings[1:]))


_GEOMETRY_BUILDERS: dict[str, Callable[[Any], Geometry]] = {
    "Point": _point,
    "LineString": _line_string,
    "Polygon": _polygon,
    "MultiPoint": lambda coordinates: MultiPoint(tuple(_point(p) for p in coordinates)),
    "MultiLineString": lambda coordinates: MultiLineString(
        tuple(_line_string(line) for line in coordinates)
    ),
    "MultiPolygon": lambda coordinates: MultiPolygon(
        tuple(_polygon(polygon) for polygon in coordinates)
    ),
}


def supported_geojson_types() -> tuple[str, ...]:
    """Return GeoJSON object types accepted by ``from_geojson``."""
    return (*_GEOMETRY_BUILDERS.keys(), "GeometryCollection", "Feature", "FeatureCollection")


def from_geojson(obj: Mapping[str, Any]) -> Geometry:
    """
    Convert a GeoJSON geometry, Feature or FeatureCollection.

    Features yield their geometry; a FeatureCollection yields a
    GeometryCollection of its features' geometries. Coordinates beyond
    x and y are dropped.

    Args:
        obj: Parsed GeoJSON object

    Returns:
        The equivalent geometry value

    Raises:
        ValueError: If the object type is missing, unsupported, or malformed
    """
    if not isinstance(obj, Mapping):
        raise ValueError(f"GeoJSON object must be a mapping, got {type(obj).__name__}")

    geojson_type = obj.get("type")
    if geojson_type == "Feature":
        geometry = obj.get("geometry")
        if geometry is None:
            return GeometryCollection()
        return from_geojson(geometry)
    if geojson_type == "FeatureCollection":
        features = _members(obj, geojson_type, "features")
        return GeometryCollection(tuple(from_geojson(feature) for feature in features))
    if geojson_type == "GeometryCollection":
        members = _members(obj, geojson_type, "geometries")
        return GeometryCollection(tuple(from_geojson(member) for member in members))

    builder = _GEOMETRY_BUILDERS.get(geojson_type)
    if builder is None:
        supported = ", ".join(supported_geojson_types())
        raise ValueError(f"Unsupported GeoJSON type: {geojson_type}. Supported types: {supported}")
    try:
        return builder(obj["coordinates"])
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"Invalid {geojson_type} coordinates: {e}") from e


def _members(obj: Mapping[str, Any], geojson_type: str, key: str) -> Sequence[Any]:
    members = obj.get(key, [])
    if not isinstance(members, (list, tuple)):
        raise ValueError(f"{geojson_type} {key} must be a list, got {type(members).__name__}")
    return members
