"""Data models for site risk assessment."""

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from siterisk.geo.models import HazardFeature, Point


class FloodRiskLevel(str, Enum):
    SAFE = "Safe"
    MEDIUM = "Medium Risk"
    HIGH = "High Risk"


@dataclass
class FloodRisk:
    """Flood classification for a point.

    ``level`` is HIGH exactly when the point is inside a flood extent and
    MEDIUM exactly when it is outside but within the buffer radius.
    """
    level: FloodRiskLevel
    distance_km: float
    in_flood_extent: bool
    in_buffer: bool

    def to_dict(self) -> dict:
        return {
            "level": self.level.value,
            "distance_km": self.distance_km,
            "in_flood_extent": self.in_flood_extent,
            "in_buffer": self.in_buffer,
        }


@dataclass
class EarthquakeZoneResult:
    zone: str
    pga: str

    def to_dict(self) -> dict:
        return {"zone": self.zone, "pga": self.pga}


@dataclass
class NearestFloodPoint:
    distance_km: float
    nearest_point: Optional[Point] = None
    feature: Optional[HazardFeature] = None

    def to_dict(self) -> dict:
        return {
            "distance_km": self.distance_km,
            "nearest_point": self.nearest_point.to_dict() if self.nearest_point else None,
            "feature": self.feature.to_dict() if self.feature else None,
        }


@dataclass(frozen=True)
class ZoneInfo:
    """Seismic zone catalog entry."""
    zone: str
    pga: str
    description: str
    risk_level: str  # Low, Moderate, High, Very High
    conditions: tuple
    vulnerability: tuple
    construction_recommendations: tuple
    cost_multiplier: float

    def to_dict(self) -> dict:
        return {
            "zone": self.zone,
            "pga": self.pga,
            "description": self.description,
            "risk_level": self.risk_level,
            "conditions": list(self.conditions),
            "vulnerability": list(self.vulnerability),
            "construction_recommendations": list(self.construction_recommendations),
            "cost_multiplier": self.cost_multiplier,
        }


@dataclass
class ClimateData:
    """Long-term seasonal averages for a location.

    Temperatures in °C, precipitation in mm, wind in km/h, humidity in %.
    A humidity of 0 means the source did not provide it.
    """
    latitude: float
    longitude: float
    elevation: float
    temperature_2m_mean: float
    temperature_2m_max: float
    temperature_2m_min: float
    precipitation_sum: float
    windspeed_10m_mean: float
    relative_humidity_2m_mean: float = 0.0
    climate_zone: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class WeatherData:
    """Current conditions snapshot. Wind in km/h, visibility in km."""
    temperature: float
    humidity: float
    wind_speed: float
    feels_like: Optional[float] = None
    pressure: Optional[float] = None
    wind_direction: float = 0.0
    description: str = "Unknown"
    icon: str = "01d"
    visibility: Optional[float] = None
    cloud_cover: float = 0.0
    location: str = "Unknown Location"

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class ForecastDay:
    date: str
    temperature: float
    min_temp: float
    max_temp: float
    humidity: float
    wind_speed: float
    description: str = "Unknown"
    icon: str = "01d"

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class CostItem:
    """One positive line of the cost breakdown."""
    name: str
    multiplier: float
    cost_per_unit: float
    total_cost: float

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class CostFactor:
    """Row of the cumulative factor table."""
    factor: str
    multiplier: float
    cumulative_cost_per_unit: float

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class CostEstimate:
    base_cost_per_unit: float
    earthquake_multiplier: float
    flood_multiplier: float
    elevation_multiplier: float
    environmental_multiplier: float
    total_multiplier: float
    adjusted_cost_per_unit: float
    reference_area: float
    base_total_cost: float
    total_cost: float
    additional_cost: float
    increase_pct: float
    environmental_source: str  # climate, weather or none
    breakdown: list = field(default_factory=list)
    factors: list = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "base_cost_per_unit": self.base_cost_per_unit,
            "multipliers": {
                "earthquake": self.earthquake_multiplier,
                "flood": self.flood_multiplier,
                "elevation": self.elevation_multiplier,
                "environmental": self.environmental_multiplier,
                "total": self.total_multiplier,
            },
            "adjusted_cost_per_unit": self.adjusted_cost_per_unit,
            "reference_area": self.reference_area,
            "base_total_cost": self.base_total_cost,
            "total_cost": self.total_cost,
            "additional_cost": self.additional_cost,
            "increase_pct": self.increase_pct,
            "environmental_source": self.environmental_source,
            "breakdown": [item.to_dict() for item in self.breakdown],
            "factors": [f.to_dict() for f in self.factors],
        }


@dataclass
class Impact:
    level: str  # low, medium, high, critical
    message: str
    recommendations: list = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class WorkingConditions:
    temperature: Impact
    wind: Impact
    humidity: Impact
    visibility: Optional[Impact]
    overall_level: str
    temperature_category: str
    upcoming_issues: list = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "temperature": self.temperature.to_dict(),
            "wind": self.wind.to_dict(),
            "humidity": self.humidity.to_dict(),
            "visibility": self.visibility.to_dict() if self.visibility else None,
            "overall_level": self.overall_level,
            "temperature_category": self.temperature_category,
            "upcoming_issues": self.upcoming_issues,
        }


@dataclass
class SiteAssessment:
    """Complete assessment output."""
    point: Point
    flood_risk: FloodRisk
    earthquake_zone: Optional[EarthquakeZoneResult]
    zone_info: Optional[ZoneInfo]
    nearest_flood_point: Optional[NearestFloodPoint]
    cost: CostEstimate
    elevation_m: Optional[float] = None
    climate: Optional[ClimateData] = None
    weather: Optional[WeatherData] = None
    working_conditions: Optional[WorkingConditions] = None
    high_risk: Optional[bool] = None
    address: Optional[str] = None
    duration_seconds: float = 0.0
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict:
        return {
            "point": self.point.to_dict(),
            "address": self.address,
            "flood_risk": self.flood_risk.to_dict(),
            "earthquake_zone": self.earthquake_zone.to_dict() if self.earthquake_zone else None,
            "zone_info": self.zone_info.to_dict() if self.zone_info else None,
            "nearest_flood_point": self.nearest_flood_point.to_dict() if self.nearest_flood_point else None,
            "elevation_m": self.elevation_m,
            "climate": self.climate.to_dict() if self.climate else None,
            "weather": self.weather.to_dict() if self.weather else None,
            "working_conditions": self.working_conditions.to_dict() if self.working_conditions else None,
            "high_risk": self.high_risk,
            "cost": self.cost.to_dict(),
            "duration_seconds": self.duration_seconds,
            "timestamp": self.timestamp.isoformat(),
        }
