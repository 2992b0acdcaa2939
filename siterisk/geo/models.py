"""Geometry and hazard-layer data models.

Hazard layers arrive as loosely typed GeoJSON. They are normalized here, at
the ingestion boundary, into a small tagged union of polygon geometries so
the hazard engine never has to inspect raw coordinate nesting.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Union

Coordinate = tuple[float, float]  # (lng, lat)
Ring = tuple[Coordinate, ...]


@dataclass(frozen=True)
class Point:
    """WGS84 location in decimal degrees."""
    lat: float
    lng: float

    def to_dict(self) -> dict:
        return {"lat": self.lat, "lng": self.lng}


@dataclass(frozen=True)
class PolygonGeometry:
    """First ring is the outer boundary, the rest are holes."""
    rings: tuple[Ring, ...]
    type: str = field(default="Polygon", init=False)

    @property
    def outer_ring(self) -> Ring:
        return self.rings[0] if self.rings else ()

    @property
    def polygons(self) -> tuple[tuple[Ring, ...], ...]:
        return (self.rings,)


@dataclass(frozen=True)
class MultiPolygonGeometry:
    polygons: tuple[tuple[Ring, ...], ...]
    type: str = field(default="MultiPolygon", init=False)


Geometry = Union[PolygonGeometry, MultiPolygonGeometry]


def _parse_ring(raw_ring: Any) -> Ring:
    ring = []
    for coord in raw_ring:
        if not isinstance(coord, (list, tuple)) or len(coord) < 2:
            raise ValueError(f"Invalid coordinate: {coord!r}")
        ring.append((float(coord[0]), float(coord[1])))
    return tuple(ring)


def _parse_polygon(raw_polygon: Any) -> tuple[Ring, ...]:
    if not isinstance(raw_polygon, (list, tuple)):
        raise ValueError("Polygon coordinates must be a list of rings")
    return tuple(_parse_ring(r) for r in raw_polygon)


def parse_geometry(raw: Any) -> Optional[Geometry]:
    """Normalize a GeoJSON geometry mapping.

    Returns ``None`` for missing geometry, missing coordinates or any type
    other than Polygon/MultiPolygon. Malformed Polygon coordinates raise
    ``ValueError``; malformed MultiPolygon members are dropped.
    """
    if isinstance(raw, (PolygonGeometry, MultiPolygonGeometry)):
        return raw
    if not isinstance(raw, dict):
        return None

    coords = raw.get("coordinates")
    if not coords:
        return None

    geom_type = raw.get("type")
    if geom_type == "Polygon":
        return PolygonGeometry(rings=_parse_polygon(coords))
    if geom_type == "MultiPolygon":
        polygons = []
        for raw_polygon in coords:
            # A malformed member is dropped, the rest remain usable
            try:
                polygons.append(_parse_polygon(raw_polygon))
            except (ValueError, TypeError):
                continue
        return MultiPolygonGeometry(polygons=tuple(polygons)) if polygons else None
    return None


@dataclass
class HazardFeature:
    """A hazard polygon plus its attribute mapping.

    ``geometry`` is ``None`` when the source geometry was missing, of an
    unsupported type or malformed; such features stay in the collection so
    positional scan caps behave the same as on the raw layer.
    """
    geometry: Optional[Geometry]
    properties: dict = field(default_factory=dict)
    raw_geometry: Any = None

    @classmethod
    def from_geojson(cls, raw: Any) -> "HazardFeature":
        raw = raw if isinstance(raw, dict) else {}
        raw_geometry = raw.get("geometry")
        properties = raw.get("properties")
        try:
            geometry = parse_geometry(raw_geometry)
        except (ValueError, TypeError):
            geometry = None
        return cls(
            geometry=geometry,
            properties=properties if isinstance(properties, dict) else {},
            raw_geometry=raw_geometry,
        )

    def to_dict(self) -> dict:
        return {
            "type": "Feature",
            "geometry": self.raw_geometry,
            "properties": self.properties,
        }


@dataclass
class FeatureCollection:
    features: list = field(default_factory=list)

    @classmethod
    def from_geojson(cls, raw: Any) -> "FeatureCollection":
        if isinstance(raw, FeatureCollection):
            return raw
        features = raw.get("features") if isinstance(raw, dict) else None
        if not isinstance(features, (list, tuple)):
            return cls()
        return cls(features=[HazardFeature.from_geojson(f) for f in features])

    def __len__(self) -> int:
        return len(self.features)

    def head(self, n: int) -> list:
        return self.features[:n]
