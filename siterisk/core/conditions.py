"""Day-to-day working conditions for construction from current weather."""

from typing import Optional

from siterisk.core.models import Impact, WeatherData, WorkingConditions
from siterisk.utils.constants import IMPACT_LEVELS


def temperature_impact(temp: float) -> Impact:
    if temp < 5:
        return Impact(
            level="high",
            message="Very Cold - Concrete work should be avoided. Risk of freezing.",
            recommendations=[
                "Use heated enclosures for concrete work",
                "Add accelerators to concrete mix",
                "Protect materials from freezing",
                "Consider postponing concrete pours",
            ],
        )
    if temp < 10:
        return Impact(
            level="medium",
            message="Cold - Concrete work requires special precautions.",
            recommendations=[
                "Use insulated blankets for concrete curing",
                "Monitor concrete temperature closely",
                "Consider using hot water in mix",
                "Protect workers from cold exposure",
            ],
        )
    if temp <= 30:
        return Impact(
            level="low",
            message="Ideal Temperature - Optimal conditions for construction work.",
            recommendations=[
                "Normal concrete work can proceed",
                "Standard curing procedures apply",
                "Good working conditions for labor",
            ],
        )
    if temp <= 35:
        return Impact(
            level="medium",
            message="Hot - Extra precautions needed for concrete and workers.",
            recommendations=[
                "Increase water content in concrete mix",
                "Use sunshades and windbreaks",
                "Provide frequent breaks for workers",
                "Monitor concrete temperature during placement",
            ],
        )
    return Impact(
        level="high",
        message="Very Hot - Construction work should be limited or postponed.",
        recommendations=[
            "Avoid concrete work during peak heat hours",
            "Work early morning or evening only",
            "Use cooling measures for concrete",
            "Ensure adequate hydration for workers",
            "Consider postponing non-critical work",
        ],
    )


def wind_impact(wind_speed: float) -> Impact:
    """Wind speed in km/h."""
    if wind_speed < 20:
        return Impact(
            level="low",
            message="Low Wind - Safe for most construction activities.",
            recommendations=[
                "Crane operations can proceed normally",
                "No special precautions needed",
                "Good conditions for hoisting materials",
            ],
        )
    if wind_speed < 40:
        return Impact(
            level="medium",
            message="Moderate Wind - Exercise caution with elevated work.",
            recommendations=[
                "Limit crane operations",
                "Secure all loose materials",
                "Use wind barriers for concrete work",
                "Monitor conditions closely",
            ],
        )
    if wind_speed < 60:
        return Impact(
            level="high",
            message="High Wind - Dangerous for elevated work and cranes.",
            recommendations=[
                "Stop crane operations",
                "Secure all equipment and materials",
                "Avoid working at heights",
                "Postpone concrete pours if possible",
            ],
        )
    return Impact(
        level="critical",
        message="Very High Wind - All outdoor construction should stop.",
        recommendations=[
            "Stop all construction activities",
            "Secure site completely",
            "Evacuate elevated work areas",
            "Wait for conditions to improve",
        ],
    )


def humidity_impact(humidity: float) -> Impact:
    if humidity < 30:
        return Impact(
            level="medium",
            message="Low Humidity - Concrete may dry too quickly.",
            recommendations=[
                "Increase curing frequency",
                "Use curing compounds or wet coverings",
                "Monitor concrete for cracking",
                "Consider fogging or misting",
            ],
        )
    if humidity <= 70:
        return Impact(
            level="low",
            message="Normal Humidity - Good conditions for concrete curing.",
            recommendations=[
                "Standard curing procedures apply",
                "Normal concrete work can proceed",
            ],
        )
    return Impact(
        level="medium",
        message="High Humidity - May slow concrete curing.",
        recommendations=[
            "Allow extra time for concrete to set",
            "Ensure proper ventilation",
            "Monitor for moisture-related issues",
            "Protect materials from moisture",
        ],
    )


def visibility_impact(visibility_km: float) -> Impact:
    if visibility_km < 1:
        return Impact(
            level="critical",
            message="Very Poor Visibility - Construction should stop.",
            recommendations=[
                "Stop all construction activities",
                "Use warning lights and barriers",
                "Ensure site safety measures are in place",
            ],
        )
    if visibility_km < 5:
        return Impact(
            level="high",
            message="Poor Visibility - Exercise extreme caution.",
            recommendations=[
                "Limit heavy equipment operations",
                "Increase safety personnel",
                "Use additional lighting",
                "Slow down all operations",
            ],
        )
    return Impact(
        level="low",
        message="Good Visibility - Normal operations can proceed.",
        recommendations=[
            "Standard safety procedures apply",
            "Normal construction activities",
        ],
    )


def temperature_category(temp: float) -> str:
    if temp > 40:
        return "Extreme Heat"
    if temp < 0:
        return "Extreme Winter"
    if temp < 10:
        return "Cold"
    if temp > 30:
        return "Hot"
    return "Moderate"


def _worst(*levels: str) -> str:
    return max(levels, key=IMPACT_LEVELS.index)


def upcoming_issues(forecast: Optional[list]) -> list:
    """Flag extreme temperature or high wind in the next three forecast days."""
    issues = []
    for day in (forecast or [])[:3]:
        if day.temperature < 5 or day.temperature > 35:
            issues.append(f"{day.date}: Extreme temperature ({day.temperature:g}°C)")
        if day.wind_speed >= 40:
            issues.append(f"{day.date}: High wind ({day.wind_speed:g} km/h)")
    return issues


def assess_working_conditions(
    weather: WeatherData,
    forecast: Optional[list] = None,
) -> WorkingConditions:
    """Overall level follows temperature and wind only."""
    temp = temperature_impact(weather.temperature)
    wind = wind_impact(weather.wind_speed)

    return WorkingConditions(
        temperature=temp,
        wind=wind,
        humidity=humidity_impact(weather.humidity),
        visibility=visibility_impact(weather.visibility) if weather.visibility is not None else None,
        overall_level=_worst(temp.level, wind.level),
        temperature_category=temperature_category(weather.temperature),
        upcoming_issues=upcoming_issues(forecast),
    )

