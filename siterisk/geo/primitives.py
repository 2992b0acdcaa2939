"""Geometry primitives on WGS84 lon/lat coordinates."""

import math
from typing import Any, Optional

from loguru import logger
from shapely import affinity
from shapely.errors import ShapelyError
from shapely.geometry import MultiPolygon, Polygon
from shapely.geometry import Point as ShapelyPoint
from shapely.ops import nearest_points

from siterisk.geo.models import Geometry, Point, Ring, parse_geometry
from siterisk.utils.constants import EARTH_RADIUS_KM

# Errors a single bad hazard polygon may raise; anything else propagates
GEOMETRY_ERRORS = (ValueError, TypeError, IndexError, ShapelyError)

DEFAULT_SEGMENT_SAMPLES = 15


def to_shapely_polygon(rings: tuple[Ring, ...]) -> Polygon:
    """Build a shapely polygon from an outer ring and optional holes."""
    return Polygon(rings[0], rings[1:])


def to_shapely(geometry: Geometry):
    if geometry.type == "Polygon":
        return to_shapely_polygon(geometry.rings)
    return MultiPolygon([to_shapely_polygon(rings) for rings in geometry.polygons])


def _coerce(geometry: Any) -> Optional[Geometry]:
    try:
        return parse_geometry(geometry)
    except GEOMETRY_ERRORS:
        return None


def point_in_polygon(point: Point, geometry: Any) -> bool:
    """Return True if ``point`` lies inside (or on the boundary of) ``geometry``.

    Accepts a parsed geometry or a raw GeoJSON mapping. Unsupported or
    missing geometry yields False. For a MultiPolygon the first containing
    member wins; a member that fails to build is skipped.
    """
    geom = _coerce(geometry)
    if geom is None:
        return False

    pt = ShapelyPoint(point.lng, point.lat)
    for index, rings in enumerate(geom.polygons):
        try:
            if to_shapely_polygon(rings).covers(pt):
                return True
        except GEOMETRY_ERRORS as e:
            logger.debug(f"Skipping polygon {index}: {e}")
            continue
    return False


def haversine_distance_km(p1: Point, p2: Point) -> float:
    """Great-circle distance in kilometres."""
    d_lat = math.radians(p2.lat - p1.lat)
    d_lng = math.radians(p2.lng - p1.lng)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(p1.lat)) * math.cos(math.radians(p2.lat)) * math.sin(d_lng / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def nearest_point_on_segment(
    point: Point,
    start: Point,
    end: Point,
    samples: int = DEFAULT_SEGMENT_SAMPLES,
) -> tuple[float, Optional[Point]]:
    """Closest of ``samples + 1`` evenly spaced positions along a segment.

    Interpolation is linear in lon/lat, so the result approximates the true
    geodesic projection to within the sample spacing. Falls back to the
    nearer endpoint if no sample produces a finite distance.
    """
    samples = max(1, samples)
    best_distance = math.inf
    best_point = None

    for k in range(samples + 1):
        t = k / samples
        candidate = Point(
            lat=start.lat + t * (end.lat - start.lat),
            lng=start.lng + t * (end.lng - start.lng),
        )
        distance = haversine_distance_km(point, candidate)
        if math.isfinite(distance) and distance < best_distance:
            best_distance = distance
            best_point = candidate

    if best_point is None:
        for endpoint in (start, end):
            distance = haversine_distance_km(point, endpoint)
            if math.isfinite(distance) and distance < best_distance:
                best_distance = distance
                best_point = endpoint

    return best_distance, best_point


def point_to_segment_distance_km(
    point: Point,
    start: Point,
    end: Point,
    samples: int = DEFAULT_SEGMENT_SAMPLES,
) -> float:
    distance, _ = nearest_point_on_segment(point, start, end, samples)
    return distance


def nearest_vertex_distance_km(point: Point, geometry: Geometry) -> float:
    """Brute-force minimum distance to any ring vertex."""
    best = math.inf
    for rings in geometry.polygons:
        for ring in rings:
            for lng, lat in ring:
                distance = haversine_distance_km(point, Point(lat=lat, lng=lng))
                if distance < best:
                    best = distance
    return best


def distance_to_boundary_km(point: Point, geometry: Any) -> float:
    """Distance from ``point`` to the nearest polygon boundary, in km.

    The boundary is measured in a local equirectangular frame centred on the
    point (longitudes scaled by cos(lat)), which keeps the nearest-point
    search accurate at kilometre scale. Falls back to the nearest ring
    vertex if the boundary cannot be built. Returns ``inf`` when the
    geometry is unusable.
    """
    geom = _coerce(geometry)
    if geom is None:
        return math.inf

    try:
        scale = math.cos(math.radians(point.lat))
        if scale <= 1e-9:
            raise ValueError("Point too close to a pole for a local frame")

        origin = (point.lng, point.lat)
        boundary = affinity.scale(to_shapely(geom).boundary, xfact=scale, yfact=1.0, origin=origin)
        _, nearest = nearest_points(ShapelyPoint(*origin), boundary)
        nearest_lng = point.lng + (nearest.x - point.lng) / scale
        return haversine_distance_km(point, Point(lat=nearest.y, lng=nearest_lng))
    except GEOMETRY_ERRORS as e:
        logger.debug(f"Boundary distance failed, scanning vertices: {e}")
        return nearest_vertex_distance_km(point, geom)
