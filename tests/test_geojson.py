"""Tests for GeoJSON conversion."""

import pytest

from geo_svg import (
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from geo_svg.geojson import from_geojson, supported_geojson_types


def test_point():
    assert from_geojson({"type": "Point", "coordinates": [1, 2]}) == Point(1, 2)


def test_extra_dimensions_are_dropped():
    assert from_geojson({"type": "Point", "coordinates": [1, 2, 300]}) == Point(1, 2)


def test_line_string():
    result = from_geojson({"type": "LineString", "coordinates": [[0, 0], [1, 1]]})

    assert result == LineString([(0, 0), (1, 1)])


def test_polygon_with_hole():
    result = from_geojson(
        {
            "type": "Polygon",
            "coordinates": [
                [[0, 0], [10, 0], [10, 10], [0, 0]],
                [[2, 2], [3, 2], [3, 3], [2, 2]],
            ],
        }
    )

    assert isinstance(result, Polygon)
    assert result.exterior == LineString([(0, 0), (10, 0), (10, 10), (0, 0)])
    assert len(result.interiors) == 1


def test_multi_geometries():
    assert from_geojson({"type": "MultiPoint", "coordinates": [[0, 0], [1, 1]]}) == MultiPoint(
        [(0, 0), (1, 1)]
    )
    assert from_geojson(
        {"type": "MultiLineString", "coordinates": [[[0, 0], [1, 1]]]}
    ) == MultiLineString([[(0, 0), (1, 1)]])
    assert from_geojson(
        {"type": "MultiPolygon", "coordinates": [[[[0, 0], [1, 0], [1, 1]]]]}
    ) == MultiPolygon([Polygon([(0, 0), (1, 0), (1, 1)])])


def test_feature_collection_becomes_geometry_collection():
    result = from_geojson(
        {
            "type": "FeatureCollection",
            "features": [
                {"type": "Feature", "geometry": {"type": "Point", "coordinates": [1, 2]}},
                {"type": "Feature", "geometry": None},
                {
                    "type": "Feature",
                    "geometry": {
                        "type": "GeometryCollection",
                        "geometries": [{"type": "Point", "coordinates": [3, 4]}],
                    },
                },
            ],
        }
    )

    assert result == GeometryCollection(
        [Point(1, 2), GeometryCollection(), GeometryCollection([Point(3, 4)])]
    )


def test_unsupported_type_raises():
    with pytest.raises(ValueError, match="Unsupported GeoJSON type: Circle"):
        from_geojson({"type": "Circle", "coordinates": [0, 0]})


def test_missing_coordinates_raise():
    with pytest.raises(ValueError, match="Invalid Point coordinates"):
        from_geojson({"type": "Point"})


@pytest.mark.parametrize(
    "obj",
    [
        {"type": "FeatureCollection", "features": None},
        {"type": "GeometryCollection", "geometries": None},
        {"type": "FeatureCollection", "features": {"type": "Point"}},
    ],
)
def test_collection_members_must_be_a_list(obj):
    with pytest.raises(ValueError, match="must be a list"):
        from_geojson(obj)


def test_non_mapping_raises():
    with pytest.raises(ValueError, match="must be a mapping"):
        from_geojson([1, 2])  # type: ignore[arg-type]


def test_supported_types():
    assert "FeatureCollection" in supported_geojson_types()
    assert "MultiPolygon" in supported_geojson_types()
