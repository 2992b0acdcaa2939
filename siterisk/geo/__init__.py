"""Geometry module."""
from siterisk.geo.models import (
    FeatureCollection,
    HazardFeature,
    MultiPolygonGeometry,
    Point,
    PolygonGeometry,
    parse_geometry,
)
from siterisk.geo.primitives import (
    distance_to_boundary_km,
    haversine_distance_km,
    nearest_point_on_segment,
    point_in_polygon,
    point_to_segment_distance_km,
)
