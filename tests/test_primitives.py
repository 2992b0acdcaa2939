import math

import pytest

from conftest import square
from siterisk.geo.models import MultiPolygonGeometry, Point, PolygonGeometry, parse_geometry
from siterisk.geo.primitives import (
    distance_to_boundary_km,
    haversine_distance_km,
    nearest_point_on_segment,
    point_in_polygon,
    point_to_segment_distance_km,
)


def polygon(ring, *holes):
    return {"type": "Polygon", "coordinates": [ring, *holes]}


class TestParseGeometry:
    def test_polygon(self):
        geom = parse_geometry(polygon(square(0, 0, 1)))
        assert isinstance(geom, PolygonGeometry)
        assert geom.outer_ring[0] == (-1.0, -1.0)

    def test_multipolygon_drops_malformed_members(self):
        geom = parse_geometry({
            "type": "MultiPolygon",
            "coordinates": [[square(0, 0, 1)], "garbage", [[[1]]]],
        })
        assert isinstance(geom, MultiPolygonGeometry)
        assert len(geom.polygons) == 1

    @pytest.mark.parametrize("raw", [
        None,
        "Polygon",
        {"type": "Polygon"},
        {"type": "Point", "coordinates": [0, 0]},
        {"type": "LineString", "coordinates": [[0, 0], [1, 1]]},
    ])
    def test_unsupported_returns_none(self, raw):
        assert parse_geometry(raw) is None

    def test_malformed_polygon_raises(self):
        with pytest.raises(ValueError):
            parse_geometry({"type": "Polygon", "coordinates": [[[0]]]})


class TestPointInPolygon:
    def test_inside(self):
        assert point_in_polygon(Point(lat=0.5, lng=0.5), polygon(square(0, 0, 1)))

    def test_outside(self):
        assert not point_in_polygon(Point(lat=2.0, lng=0.0), polygon(square(0, 0, 1)))

    def test_boundary_counts_as_inside(self):
        assert point_in_polygon(Point(lat=0.0, lng=1.0), polygon(square(0, 0, 1)))

    def test_hole_excluded(self):
        geom = polygon(square(0, 0, 2), square(0, 0, 0.5))
        assert not point_in_polygon(Point(lat=0.0, lng=0.0), geom)
        assert point_in_polygon(Point(lat=1.5, lng=1.5), geom)

    def test_multipolygon_any_member(self):
        geom = {
            "type": "MultiPolygon",
            "coordinates": [[square(0, 0, 1)], [square(10, 10, 1)]],
        }
        assert point_in_polygon(Point(lat=10.2, lng=9.8), geom)
        assert not point_in_polygon(Point(lat=5.0, lng=5.0), geom)

    def test_multipolygon_skips_bad_member(self):
        geom = MultiPolygonGeometry(polygons=(
            (((0.0, 0.0), (1.0, 1.0)),),
            tuple([tuple(map(tuple, square(10, 10, 1)))]),
        ))
        assert point_in_polygon(Point(lat=10.0, lng=10.0), geom)

    @pytest.mark.parametrize("geom", [None, {}, {"type": "Point", "coordinates": [0, 0]}])
    def test_missing_or_unsupported_is_false(self, geom):
        assert not point_in_polygon(Point(lat=0.0, lng=0.0), geom)


class TestHaversine:
    def test_zero(self):
        p = Point(lat=28.6, lng=77.2)
        assert haversine_distance_km(p, p) == 0.0

    def test_one_degree_latitude(self):
        d = haversine_distance_km(Point(lat=0.0, lng=0.0), Point(lat=1.0, lng=0.0))
        assert d == pytest.approx(111.195, abs=0.01)

    def test_symmetric(self):
        a = Point(lat=19.07, lng=72.87)
        b = Point(lat=28.61, lng=77.21)
        assert haversine_distance_km(a, b) == pytest.approx(haversine_distance_km(b, a))
        assert haversine_distance_km(a, b) == pytest.approx(1153, abs=5)


class TestSegment:
    def test_nearest_sample_on_segment(self):
        start = Point(lat=0.0, lng=0.0)
        end = Point(lat=0.0, lng=1.5)
        distance, nearest = nearest_point_on_segment(Point(lat=0.1, lng=0.5), start, end)
        assert nearest.lat == 0.0
        assert nearest.lng == pytest.approx(0.5)
        assert distance == pytest.approx(11.12, abs=0.01)

    def test_beyond_endpoint(self):
        start = Point(lat=0.0, lng=0.0)
        end = Point(lat=0.0, lng=1.0)
        distance, nearest = nearest_point_on_segment(Point(lat=0.0, lng=2.0), start, end)
        assert nearest == end
        assert distance == pytest.approx(111.195, abs=0.01)

    def test_degenerate_segment(self):
        p = Point(lat=1.0, lng=1.0)
        assert point_to_segment_distance_km(Point(lat=0.0, lng=1.0), p, p) == pytest.approx(111.195, abs=0.01)

    def test_distance_not_below_true_minimum(self):
        start = Point(lat=0.0, lng=0.0)
        end = Point(lat=0.0, lng=1.0)
        sampled = point_to_segment_distance_km(Point(lat=0.5, lng=0.52), start, end)
        assert sampled >= haversine_distance_km(Point(lat=0.5, lng=0.52), Point(lat=0.0, lng=0.52)) - 1e-9


class TestDistanceToBoundary:
    def test_outside_point(self):
        geom = polygon(square(0, 0, 1))
        d = distance_to_boundary_km(Point(lat=0.0, lng=2.0), geom)
        assert d == pytest.approx(111.195, rel=1e-3)

    def test_inside_point_measures_to_edge(self):
        geom = polygon(square(0, 0, 1))
        d = distance_to_boundary_km(Point(lat=0.0, lng=0.5), geom)
        assert d == pytest.approx(55.6, rel=1e-2)

    def test_unusable_geometry_is_infinite(self):
        assert math.isinf(distance_to_boundary_km(Point(lat=0.0, lng=0.0), None))
