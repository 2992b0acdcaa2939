"""Core module."""
from siterisk.core.climate import aggregate_climate, classify_climate_zone, climate_cost_multiplier
from siterisk.core.cost import estimate_cost
from siterisk.core.formatter import format_output
from siterisk.core.hazards import check_flood_risk, find_earthquake_zone, find_nearest_flood_point
from siterisk.core.zones import get_zone_info, list_zones
