"""Project-wide constants."""

EARTH_RADIUS_KM = 6371.0

WGS84_EPSG = 4326

FLOOD_MULTIPLIERS = {
    "High Risk": 1.30,
    "Medium Risk": 1.15,
    "Safe": 1.0,
}

# (threshold metres, multiplier), highest tier first
ELEVATION_TIERS = [
    (2000, 1.15),
    (1000, 1.10),
    (500, 1.05),
]

# Open-Meteo daily variables requested for climate sampling
CLIMATE_DAILY_VARIABLES = [
    "temperature_2m_mean",
    "temperature_2m_max",
    "temperature_2m_min",
    "precipitation_sum",
    "windspeed_10m_mean",
]

# (start MM-DD, end MM-DD): winter and summer months
CLIMATE_SAMPLE_WINDOWS = [
    ("01-01", "01-31"),
    ("07-01", "07-31"),
]

IMPACT_LEVELS = ["low", "medium", "high", "critical"]

FORMAT_STYLES = ["summary", "detail"]
