"""FastAPI application."""

from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from siterisk.core.assessor import SiteAssessor
from siterisk.core.climate import classify_climate_zone, climate_cost_multiplier
from siterisk.core.cost import estimate_cost
from siterisk.core.formatter import format_output
from siterisk.core.models import (
    ClimateData,
    EarthquakeZoneResult,
    FloodRisk,
    FloodRiskLevel,
    WeatherData,
)
from siterisk.core.zones import get_zone_info, list_zones
from siterisk.geo.models import Point
from siterisk.utils.config import settings
from siterisk.utils.constants import FORMAT_STYLES

app = FastAPI(
    title="SiteRisk API",
    description="Construction-site hazard and cost assessment",
    version=settings.app.version,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.api.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

assessor = SiteAssessor()


class ClimateInput(BaseModel):
    latitude: float = 0.0
    longitude: float = 0.0
    elevation: float = 0.0
    temperature_2m_mean: float
    temperature_2m_max: float
    temperature_2m_min: float
    precipitation_sum: float
    windspeed_10m_mean: float
    relative_humidity_2m_mean: float = 0.0
    climate_zone: Optional[str] = None

    def to_climate(self) -> ClimateData:
        climate = ClimateData(**self.model_dump())
        if climate.climate_zone is None:
            climate.climate_zone = classify_climate_zone(climate.temperature_2m_mean, climate.precipitation_sum)
        return climate


class WeatherInput(BaseModel):
    temperature: float
    humidity: float
    wind_speed: float
    visibility: Optional[float] = None

    def to_weather(self) -> WeatherData:
        return WeatherData(**self.model_dump())


class AssessRequest(BaseModel):
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)
    base_cost: Optional[float] = Field(None, ge=0)
    elevation_m: Optional[float] = None
    climate: Optional[ClimateInput] = None
    weather: Optional[WeatherInput] = None
    buffer_radius_km: Optional[float] = Field(None, ge=0)
    fetch_external: bool = False
    style: str = "summary"


class AssessResponse(BaseModel):
    lat: float
    lng: float
    flood_level: str
    earthquake_zone: Optional[str]
    high_risk: Optional[bool]
    total_multiplier: float
    adjusted_cost_per_unit: float
    formatted_output: str
    data: dict


class CostRequest(BaseModel):
    base_cost: float = Field(..., ge=0)
    flood_level: Optional[str] = None
    zone: Optional[str] = None
    elevation_m: Optional[float] = None
    climate: Optional[ClimateInput] = None
    weather: Optional[WeatherInput] = None
    reference_area: Optional[float] = Field(None, gt=0)


class ClassifyRequest(BaseModel):
    mean_temp: float
    precipitation: float


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "earthquake_zone_features": len(assessor.earthquake_zones),
        "flood_extent_features": len(assessor.flood_extent),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@app.post("/api/v1/assess", response_model=AssessResponse)
def run_assessment(request: AssessRequest):
    """Run the full site assessment."""
    if request.style not in FORMAT_STYLES:
        raise HTTPException(status_code=400, detail=f"style must be one of {FORMAT_STYLES}")

    try:
        result = assessor.assess(
            Point(lat=request.lat, lng=request.lng),
            base_cost=request.base_cost,
            elevation_m=request.elevation_m,
            climate=request.climate.to_climate() if request.climate else None,
            weather=request.weather.to_weather() if request.weather else None,
            buffer_radius_km=request.buffer_radius_km,
            fetch_external=request.fetch_external,
        )

        return AssessResponse(
            lat=request.lat,
            lng=request.lng,
            flood_level=result.flood_risk.level.value,
            earthquake_zone=result.earthquake_zone.zone if result.earthquake_zone else None,
            high_risk=result.high_risk,
            total_multiplier=result.cost.total_multiplier,
            adjusted_cost_per_unit=result.cost.adjusted_cost_per_unit,
            formatted_output=format_output(result, request.style),
            data=result.to_dict(),
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/api/v1/assess", response_model=AssessResponse)
def quick_assessment(
    lat: float = Query(..., ge=-90, le=90),
    lng: float = Query(..., ge=-180, le=180),
    base_cost: Optional[float] = Query(None, ge=0),
    style: str = Query("summary"),
):
    """Quick assessment via GET."""
    return run_assessment(AssessRequest(lat=lat, lng=lng, base_cost=base_cost, style=style))


@app.get("/api/v1/zones")
async def get_zones():
    """List the seismic zone catalog."""
    zones = list_zones()
    return {"count": len(zones), "zones": [z.to_dict() for z in zones]}


@app.get("/api/v1/zones/{zone}")
async def get_zone(zone: str):
    info = get_zone_info(zone)
    if info is None:
        raise HTTPException(status_code=404, detail=f"Unknown zone: {zone}")
    return info.to_dict()


@app.post("/api/v1/cost")
async def compute_cost(request: CostRequest):
    """Cost estimate from already-known hazard results."""
    flood = None
    if request.flood_level is not None:
        try:
            level = FloodRiskLevel(request.flood_level)
        except ValueError:
            raise HTTPException(
                status_code=400,
                detail=f"flood_level must be one of {[lvl.value for lvl in FloodRiskLevel]}",
            )
        flood = FloodRisk(
            level=level,
            distance_km=0.0 if level == FloodRiskLevel.HIGH else settings.hazards.unknown_distance_km,
            in_flood_extent=level == FloodRiskLevel.HIGH,
            in_buffer=level == FloodRiskLevel.MEDIUM,
        )

    zone = EarthquakeZoneResult(zone=request.zone, pga=request.zone) if request.zone else None
    estimate = estimate_cost(
        request.base_cost,
        flood_risk=flood,
        earthquake_zone=zone,
        elevation_m=request.elevation_m,
        climate=request.climate.to_climate() if request.climate else None,
        weather=request.weather.to_weather() if request.weather else None,
        reference_area=request.reference_area,
    )
    return estimate.to_dict()


@app.post("/api/v1/climate/classify")
async def classify_climate(request: ClassifyRequest):
    return {"climate_zone": classify_climate_zone(request.mean_temp, request.precipitation)}


@app.post("/api/v1/climate/multiplier")
async def climate_multiplier(climate: ClimateInput):
    data = climate.to_climate()
    return {"climate_zone": data.climate_zone, "multiplier": climate_cost_multiplier(data)}
