"""Seismic zone catalog keyed by PGA zone label."""

from typing import Optional

from siterisk.core.models import FloodRisk, FloodRiskLevel, ZoneInfo

HIGH_RISK_LEVELS = ("High", "Very High")

EARTHQUAKE_ZONES = {
    "Zone 1": ZoneInfo(
        zone="Zone 1",
        pga="< 0.05g",
        description="Lowest seismic hazard zone with minimal earthquake risk",
        risk_level="Low",
        conditions=(
            "Very low probability of significant ground shaking",
            "Stable geological conditions",
            "Minimal seismic activity historically",
            "Suitable for standard construction practices",
        ),
        vulnerability=(
            "Low vulnerability to earthquake damage",
            "Minimal risk of structural failure",
            "Low risk of ground liquefaction",
            "Stable foundation conditions",
        ),
        construction_recommendations=(
            "Standard building codes sufficient",
            "No special seismic reinforcement required",
            "Standard foundation design acceptable",
            "Regular construction materials suitable",
        ),
        cost_multiplier=1.00,
    ),
    "Zone 2A": ZoneInfo(
        zone="Zone 2A",
        pga="0.05g - 0.10g",
        description="Low to moderate seismic hazard zone",
        risk_level="Moderate",
        conditions=(
            "Low to moderate probability of ground shaking",
            "Generally stable geological conditions",
            "Occasional minor seismic activity",
            "Most of Punjab falls in this zone",
        ),
        vulnerability=(
            "Moderate vulnerability to earthquake damage",
            "Some risk of structural damage in strong earthquakes",
            "Low to moderate risk of ground effects",
            "Generally stable foundation conditions",
        ),
        construction_recommendations=(
            "Follow standard seismic building codes",
            "Consider basic seismic reinforcement",
            "Ensure proper foundation design",
            "Use quality construction materials",
        ),
        cost_multiplier=1.15,
    ),
    "Zone 2B": ZoneInfo(
        zone="Zone 2B",
        pga="0.10g - 0.15g",
        description="Moderate seismic hazard zone with increased risk",
        risk_level="Moderate",
        conditions=(
            "Moderate probability of significant ground shaking",
            "Some areas with active fault lines",
            "Historical moderate seismic activity",
            "Requires careful site assessment",
        ),
        vulnerability=(
            "Moderate to high vulnerability",
            "Risk of structural damage in moderate earthquakes",
            "Moderate risk of ground liquefaction in some areas",
            "Foundation stability needs assessment",
        ),
        construction_recommendations=(
            "Strict adherence to seismic building codes",
            "Seismic reinforcement recommended",
            "Professional geotechnical assessment required",
            "Enhanced foundation design necessary",
            "Consider base isolation for critical structures",
        ),
        cost_multiplier=1.30,
    ),
    "Zone 3": ZoneInfo(
        zone="Zone 3",
        pga="0.15g - 0.25g",
        description="High seismic hazard zone requiring special attention",
        risk_level="High",
        conditions=(
            "High probability of significant ground shaking",
            "Active fault lines present",
            "History of moderate to strong earthquakes",
            "Requires comprehensive site evaluation",
        ),
        vulnerability=(
            "High vulnerability to earthquake damage",
            "Significant risk of structural failure",
            "High risk of ground liquefaction",
            "Potential for landslides and slope failures",
            "Foundation instability concerns",
        ),
        construction_recommendations=(
            "Mandatory strict seismic building codes",
            "Comprehensive seismic reinforcement required",
            "Professional geotechnical and seismic assessment mandatory",
            "Enhanced foundation design with deep foundations",
            "Consider seismic isolation systems",
            "Regular structural inspections recommended",
            "Use earthquake-resistant construction techniques",
        ),
        cost_multiplier=1.50,
    ),
    "Zone 4": ZoneInfo(
        zone="Zone 4",
        pga="> 0.25g",
        description="Very high seismic hazard zone - highest risk area",
        risk_level="Very High",
        conditions=(
            "Very high probability of severe ground shaking",
            "Active major fault lines",
            "History of major destructive earthquakes",
            "Most hazardous zone in Pakistan",
            "Requires extensive engineering solutions",
        ),
        vulnerability=(
            "Very high vulnerability to earthquake damage",
            "High risk of complete structural failure",
            "Very high risk of ground liquefaction",
            "High risk of landslides and rockfalls",
            "Severe foundation instability",
            "Potential for surface rupture",
        ),
        construction_recommendations=(
            "Maximum seismic building code compliance required",
            "Extensive seismic reinforcement mandatory",
            "Comprehensive geotechnical and seismic studies essential",
            "Advanced foundation systems required (piles, deep foundations)",
            "Seismic isolation or damping systems highly recommended",
            "Specialized earthquake-resistant design mandatory",
            "Regular monitoring and maintenance required",
            "Consider alternative construction sites if possible",
            "Use only certified earthquake-resistant materials",
        ),
        cost_multiplier=1.80,
    ),
}


def get_zone_info(zone: Optional[str]) -> Optional[ZoneInfo]:
    if not zone:
        return None
    return EARTHQUAKE_ZONES.get(zone)


def list_zones() -> list:
    """All catalog entries, lowest risk first."""
    return sorted(EARTHQUAKE_ZONES.values(), key=lambda z: z.cost_multiplier)


def is_high_risk_site(flood_risk: Optional[FloodRisk], zone_info: Optional[ZoneInfo]) -> Optional[bool]:
    """Flag a site whose flood or seismic exposure is high.

    Returns None unless both signals are known.
    """
    if flood_risk is None or zone_info is None:
        return None
    return flood_risk.level == FloodRiskLevel.HIGH or zone_info.risk_level in HIGH_RISK_LEVELS
