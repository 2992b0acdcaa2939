"""Hazard lookup engine: flood extent, seismic zones, nearest flood boundary.

Hazard layers are externally sourced and not guaranteed clean, so every
lookup evaluates features one at a time through ``_scan``. A feature whose
geometry raises is recorded as a failed ``FeatureOutcome`` and skipped; the
scan carries on with the next one and no geometry error leaves this module.

The positional caps in ``HazardConfig`` bound latency on layers with large
vertex counts. A point near a feature past the cap is treated as unmatched.
"""

import math
import numbers
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

from loguru import logger

from siterisk.core.models import (
    EarthquakeZoneResult,
    FloodRisk,
    FloodRiskLevel,
    NearestFloodPoint,
)
from siterisk.geo.models import FeatureCollection, Geometry, HazardFeature, Point
from siterisk.geo.primitives import (
    GEOMETRY_ERRORS,
    distance_to_boundary_km,
    nearest_point_on_segment,
    point_in_polygon,
)
from siterisk.utils.config import HazardConfig, settings


@dataclass
class FeatureOutcome:
    index: int
    feature: HazardFeature
    value: Any = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _attempt(index: int, feature: HazardFeature, fn: Callable[[HazardFeature], Any]) -> FeatureOutcome:
    try:
        return FeatureOutcome(index=index, feature=feature, value=fn(feature))
    except GEOMETRY_ERRORS as e:
        return FeatureOutcome(index=index, feature=feature, error=e)


def _scan(features: list, fn: Callable[[HazardFeature], Any]) -> Iterator[FeatureOutcome]:
    """Lazily evaluate ``fn`` over features that carry a usable geometry."""
    for index, feature in enumerate(features):
        if feature.geometry is None:
            continue
        outcome = _attempt(index, feature, fn)
        if not outcome.ok:
            logger.debug(f"Skipping feature {index}: {outcome.error}")
        yield outcome


def check_flood_risk(
    point: Point,
    flood_collection: Any,
    buffer_radius_km: Optional[float] = None,
    config: Optional[HazardConfig] = None,
) -> FloodRisk:
    """Classify a point against a flood-extent layer."""
    config = config or settings.hazards
    radius = config.buffer_radius_km if buffer_radius_km is None else buffer_radius_km
    collection = FeatureCollection.from_geojson(flood_collection)

    # First containing feature is enough
    in_flood_extent = any(
        outcome.value
        for outcome in _scan(
            collection.head(config.flood_containment_cap),
            lambda f: point_in_polygon(point, f.geometry),
        )
        if outcome.ok
    )

    min_distance = 0.0 if in_flood_extent else math.inf
    if not in_flood_extent:
        for outcome in _scan(
            collection.head(config.flood_distance_cap),
            lambda f: distance_to_boundary_km(point, f.geometry),
        ):
            if outcome.ok and outcome.value < min_distance:
                min_distance = outcome.value
                if min_distance <= radius:
                    break

    in_buffer = not in_flood_extent and min_distance <= radius

    if in_flood_extent:
        level = FloodRiskLevel.HIGH
    elif in_buffer:
        level = FloodRiskLevel.MEDIUM
    else:
        level = FloodRiskLevel.SAFE

    return FloodRisk(
        level=level,
        distance_km=min_distance if math.isfinite(min_distance) else config.unknown_distance_km,
        in_flood_extent=in_flood_extent,
        in_buffer=in_buffer,
    )


def _zone_label(feature: HazardFeature, label_property: str) -> Optional[str]:
    """Any truthy scalar label, as a string. Blank strings and NaN do not count."""
    label = feature.properties.get(label_property)
    if isinstance(label, str):
        return label if label.strip() else None
    if isinstance(label, bool) or not isinstance(label, numbers.Real):
        return None
    if not label or math.isnan(label):
        return None
    return str(label)


def find_earthquake_zone(
    point: Point,
    zone_collection: Any,
    label_property: Optional[str] = None,
) -> Optional[EarthquakeZoneResult]:
    """Return the zone of the first feature containing ``point``.

    Zone layers are assumed small and non-overlapping, so every feature is
    checked in collection order.
    """
    label_property = label_property or settings.hazards.zone_label_property
    collection = FeatureCollection.from_geojson(zone_collection)
    labelled = [f for f in collection.features if _zone_label(f, label_property)]

    for outcome in _scan(labelled, lambda f: point_in_polygon(point, f.geometry)):
        if outcome.ok and outcome.value:
            label = _zone_label(outcome.feature, label_property)
            return EarthquakeZoneResult(zone=label, pga=label)
    return None


def _closest_on_outer_rings(point: Point, geometry: Geometry, samples: int) -> tuple[float, Optional[Point]]:
    closest_distance = math.inf
    closest_point = None

    for rings in geometry.polygons:
        ring = rings[0] if rings else ()
        n = len(ring)
        # Closed ring, the last vertex connects back to the first
        for j in range(n):
            lng1, lat1 = ring[j]
            lng2, lat2 = ring[(j + 1) % n]
            distance, candidate = nearest_point_on_segment(
                point,
                Point(lat=lat1, lng=lng1),
                Point(lat=lat2, lng=lng2),
                samples,
            )
            if distance < closest_distance:
                closest_distance = distance
                closest_point = candidate

    return closest_distance, closest_point


def _first_coordinate(geometry: Geometry) -> Optional[Point]:
    for rings in geometry.polygons:
        for ring in rings:
            for lng, lat in ring:
                return Point(lat=lat, lng=lng)
    return None


def find_nearest_flood_point(
    point: Point,
    flood_collection: Any,
    config: Optional[HazardConfig] = None,
) -> NearestFloodPoint:
    """Locate the closest sampled point on any flood boundary."""
    config = config or settings.hazards
    collection = FeatureCollection.from_geojson(flood_collection)

    min_distance = math.inf
    nearest_point = None
    nearest_feature = None

    for outcome in _scan(
        collection.head(config.nearest_point_cap),
        lambda f: _closest_on_outer_rings(point, f.geometry, config.segment_samples),
    ):
        if not outcome.ok:
            continue
        distance, candidate = outcome.value
        if distance < min_distance:
            min_distance = distance
            nearest_feature = outcome.feature
            nearest_point = candidate

    if math.isfinite(min_distance) and nearest_point is None and nearest_feature is not None:
        nearest_point = _first_coordinate(nearest_feature.geometry)

    return NearestFloodPoint(
        distance_km=min_distance if math.isfinite(min_distance) else config.unknown_distance_km,
        nearest_point=nearest_point,
        feature=nearest_feature,
    )
