"""Climate classification and climate-driven cost adjustment."""

from typing import Iterable, Optional

import numpy as np
import pandas as pd
from loguru import logger

from siterisk.core.models import ClimateData
from siterisk.geo.models import Point
from siterisk.utils.constants import CLIMATE_DAILY_VARIABLES

HUMIDITY_VARIABLE = "relative_humidity_2m_mean"


def classify_climate_zone(mean_temp: float, precipitation: float) -> str:
    """Simplified Köppen-style label from mean temperature (°C) and precipitation (mm)."""
    if mean_temp < 0:
        return "Polar"
    elif mean_temp < 10:
        if precipitation < 50:
            return "Cold Desert"
        return "Cold"
    elif mean_temp < 18:
        if precipitation < 50:
            return "Temperate Desert"
        elif precipitation < 200:
            return "Temperate Semi-Arid"
        return "Temperate"
    elif mean_temp < 25:
        if precipitation < 50:
            return "Hot Desert"
        elif precipitation < 200:
            return "Hot Semi-Arid"
        elif precipitation < 1000:
            return "Tropical Savanna"
        return "Tropical"
    else:
        # Same bands as 18-25°C; kept separate so the hot band can diverge
        if precipitation < 50:
            return "Hot Desert"
        elif precipitation < 200:
            return "Hot Semi-Arid"
        elif precipitation < 1000:
            return "Tropical Savanna"
        return "Tropical"


def climate_cost_multiplier(climate: Optional[ClimateData]) -> float:
    """Additive construction cost adjustment on a base of 1.0."""
    if climate is None:
        return 1.0

    multiplier = 1.0

    # Temperature extremes
    if climate.temperature_2m_max > 40:
        multiplier += 0.08
    elif climate.temperature_2m_max > 35:
        multiplier += 0.05
    elif climate.temperature_2m_min < -10:
        multiplier += 0.08
    elif climate.temperature_2m_min < 0:
        multiplier += 0.05

    # Waterproofing and drainage
    if climate.precipitation_sum > 200:
        multiplier += 0.06
    elif climate.precipitation_sum > 100:
        multiplier += 0.03

    # Moisture protection; 0 means humidity was not reported
    if climate.relative_humidity_2m_mean > 0:
        if climate.relative_humidity_2m_mean > 80:
            multiplier += 0.04
        elif climate.relative_humidity_2m_mean > 70:
            multiplier += 0.02

    # Wind-resistant construction
    if climate.windspeed_10m_mean > 25:
        multiplier += 0.05
    elif climate.windspeed_10m_mean > 15:
        multiplier += 0.02

    return multiplier


def _clean(values: list) -> pd.Series:
    series = pd.to_numeric(pd.Series(values, dtype="object"), errors="coerce")
    return series.replace([np.inf, -np.inf], np.nan).dropna()


def aggregate_climate(
    point: Point,
    daily_samples: Iterable[dict],
    elevation: float = 0.0,
) -> Optional[ClimateData]:
    """Average sampled daily records into long-term climate figures.

    Each sample maps Open-Meteo daily variable names to lists of daily
    values. Missing or non-finite values are dropped per variable.
    Returns None when no mean temperature survives.
    """
    variables = CLIMATE_DAILY_VARIABLES + [HUMIDITY_VARIABLE]
    collected = {var: [] for var in variables}
    for sample in daily_samples:
        for var in variables:
            values = sample.get(var)
            if isinstance(values, (list, tuple)):
                collected[var].extend(values)

    cleaned = {var: _clean(values) for var, values in collected.items()}
    if cleaned["temperature_2m_mean"].empty:
        logger.warning(f"No climate data available for {point.lat:.4f}, {point.lng:.4f}")
        return None

    means = {var: float(s.mean()) if not s.empty else 0.0 for var, s in cleaned.items()}
    zone = classify_climate_zone(means["temperature_2m_mean"], means["precipitation_sum"])

    logger.debug(
        f"Climate from {len(cleaned['temperature_2m_mean'])} days: "
        f"{means['temperature_2m_mean']:.1f}°C, {means['precipitation_sum']:.1f}mm -> {zone}"
    )

    return ClimateData(
        latitude=point.lat,
        longitude=point.lng,
        elevation=elevation,
        temperature_2m_mean=round(means["temperature_2m_mean"], 1),
        temperature_2m_max=round(means["temperature_2m_max"], 1),
        temperature_2m_min=round(means["temperature_2m_min"], 1),
        precipitation_sum=round(means["precipitation_sum"], 1),
        windspeed_10m_mean=round(means["windspeed_10m_mean"], 1),
        relative_humidity_2m_mean=round(means[HUMIDITY_VARIABLE], 1),
        climate_zone=zone,
    )
