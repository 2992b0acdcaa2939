"""Construction cost model.

Independent risk dimensions (seismic, flood, elevation, environment) each
contribute a multiplier >= 1.0. They compose multiplicatively, so
compounding risks scale the base cost proportionally.
"""

from typing import Optional

from loguru import logger

from siterisk.core.climate import climate_cost_multiplier
from siterisk.core.models import (
    ClimateData,
    CostEstimate,
    CostFactor,
    CostItem,
    EarthquakeZoneResult,
    FloodRisk,
    WeatherData,
)
from siterisk.core.zones import get_zone_info
from siterisk.utils.config import CostConfig, settings
from siterisk.utils.constants import ELEVATION_TIERS, FLOOD_MULTIPLIERS


def earthquake_multiplier(zone: Optional[EarthquakeZoneResult]) -> float:
    info = get_zone_info(zone.zone) if zone else None
    return info.cost_multiplier if info else 1.0


def flood_multiplier(flood_risk: Optional[FloodRisk]) -> float:
    if flood_risk is None:
        return 1.0
    return FLOOD_MULTIPLIERS.get(flood_risk.level.value, 1.0)


def elevation_multiplier(elevation_m: Optional[float]) -> float:
    """Highest matching tier only."""
    if elevation_m is None:
        return 1.0
    for threshold, multiplier in ELEVATION_TIERS:
        if elevation_m > threshold:
            return multiplier
    return 1.0


def weather_cost_multiplier(weather: Optional[WeatherData]) -> float:
    """Fallback environmental adjustment from a current-conditions snapshot.

    Terms are independent; the humid-and-mild term can stack with the
    humidity and temperature terms.
    """
    if weather is None:
        return 1.0

    multiplier = 1.0
    if weather.humidity > 80:
        multiplier += 0.03
    if weather.temperature > 40 or weather.temperature < 0:
        multiplier += 0.05
    if weather.wind_speed > 30:
        multiplier += 0.04
    if weather.humidity > 85 and 15 < weather.temperature < 35:
        multiplier += 0.02
    return multiplier


def environmental_multiplier(
    climate: Optional[ClimateData] = None,
    weather: Optional[WeatherData] = None,
) -> tuple[float, str]:
    """Climate-based multiplier when available, else weather-based.

    Returns ``(multiplier, source)`` where source is climate, weather or none.
    """
    if climate is not None:
        return climate_cost_multiplier(climate), "climate"
    if weather is not None:
        return weather_cost_multiplier(weather), "weather"
    return 1.0, "none"


def estimate_cost(
    base_cost_per_unit: float,
    flood_risk: Optional[FloodRisk] = None,
    earthquake_zone: Optional[EarthquakeZoneResult] = None,
    elevation_m: Optional[float] = None,
    climate: Optional[ClimateData] = None,
    weather: Optional[WeatherData] = None,
    reference_area: Optional[float] = None,
    config: Optional[CostConfig] = None,
) -> CostEstimate:
    """Combine all risk multipliers into an adjusted unit cost and breakdown."""
    if base_cost_per_unit < 0:
        raise ValueError(f"Base cost must be non-negative, got {base_cost_per_unit}")

    config = config or settings.cost
    area = config.reference_area if reference_area is None else reference_area
    base = base_cost_per_unit

    eq = earthquake_multiplier(earthquake_zone)
    fl = flood_multiplier(flood_risk)
    el = elevation_multiplier(elevation_m)
    env, env_source = environmental_multiplier(climate, weather)

    total_multiplier = eq * fl * el * env
    adjusted = base * total_multiplier

    named = [
        ("Earthquake Mitigation", "Earthquake Zone", eq),
        ("Flood Protection", "Flood Risk", fl),
        ("Elevation Adjustment", "Elevation", el),
        ("Climate/Weather Protection", "Climate/Weather", env),
    ]

    breakdown = [CostItem(name="Base Construction", multiplier=1.0, cost_per_unit=base, total_cost=base * area)]
    for item_name, _, multiplier in named:
        extra = base * (multiplier - 1)
        if extra > 0:
            breakdown.append(CostItem(name=item_name, multiplier=multiplier, cost_per_unit=extra, total_cost=extra * area))
    breakdown = [item for item in breakdown if item.total_cost > 0]

    factors = [CostFactor(factor="Base Cost", multiplier=1.0, cumulative_cost_per_unit=base)]
    running = base
    for _, factor_name, multiplier in named:
        running *= multiplier
        factors.append(CostFactor(factor=factor_name, multiplier=multiplier, cumulative_cost_per_unit=running))

    base_total = base * area
    total_cost = adjusted * area

    logger.debug(
        f"Cost: base={base} eq={eq} flood={fl} elev={el} env={env} ({env_source}) -> x{total_multiplier:.4f}"
    )

    return CostEstimate(
        base_cost_per_unit=base,
        earthquake_multiplier=eq,
        flood_multiplier=fl,
        elevation_multiplier=el,
        environmental_multiplier=env,
        total_multiplier=total_multiplier,
        adjusted_cost_per_unit=adjusted,
        reference_area=area,
        base_total_cost=base_total,
        total_cost=total_cost,
        additional_cost=total_cost - base_total,
        increase_pct=(total_multiplier - 1) * 100,
        environmental_source=env_source,
        breakdown=breakdown,
        factors=factors,
    )
