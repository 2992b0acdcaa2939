"""Configuration loader for SiteRisk."""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()


class HazardConfig(BaseModel):
    # Feature scan caps bound latency on large hazard layers
    flood_containment_cap: int = 20
    flood_distance_cap: int = 5
    nearest_point_cap: int = 10
    segment_samples: int = 15
    buffer_radius_km: float = 5.0
    unknown_distance_km: float = 999.0
    zone_label_property: str = "PGA"


class CostConfig(BaseModel):
    default_base_cost: float = 2000.0
    reference_area: float = 1000.0
    currency: str = "Rs."
    area_unit: str = "sqft"


class LayersConfig(BaseModel):
    earthquake_zones: str = "data/hazards/earthquake_zones.geojson"
    flood_extent: str = "data/hazards/flood_extent.geojson"


class ClimateConfig(BaseModel):
    base_url: str = "https://climate-api.open-meteo.com/v1/climate"
    timeout_seconds: int = 30
    sample_years: list[int] = [1995, 2000, 2005, 2010, 2015, 2020]


class ElevationConfig(BaseModel):
    base_url: str = "https://api.open-elevation.com/api/v1/lookup"
    timeout_seconds: int = 10


class WeatherConfig(BaseModel):
    base_url: str = "https://api.openweathermap.org/data/2.5"
    api_key: Optional[str] = None
    timeout_seconds: int = 10
    forecast_days: int = 5


class GeocodingConfig(BaseModel):
    photon_url: str = "https://photon.komoot.io/reverse"
    bigdatacloud_url: str = "https://api.bigdatacloud.net/data/reverse-geocode-client"
    nominatim_url: str = "https://nominatim.openstreetmap.org/reverse"
    user_agent: str = "SiteRisk/0.1"
    timeout_seconds: int = 3
    cache_ttl_seconds: int = 300
    miss_ttl_seconds: int = 60


class APIConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = True
    cors_origins: list[str] = ["*"]


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
    rotation: str = "10 MB"
    retention: str = "7 days"
    file_enabled: bool = False


class AppConfig(BaseModel):
    name: str = "siterisk"
    version: str = "0.1.0"
    environment: str = "development"


class Settings(BaseModel):
    app: AppConfig = AppConfig()
    logging: LoggingConfig = LoggingConfig()
    hazards: HazardConfig = HazardConfig()
    cost: CostConfig = CostConfig()
    layers: LayersConfig = LayersConfig()
    climate: ClimateConfig = ClimateConfig()
    elevation: ElevationConfig = ElevationConfig()
    weather: WeatherConfig = WeatherConfig()
    geocoding: GeocodingConfig = GeocodingConfig()
    api: APIConfig = APIConfig()


def get_project_root() -> Path:
    return Path(__file__).parent.parent.parent


def load_yaml_config(env: str = "development") -> dict[str, Any]:
    config_path = get_project_root() / "config" / "environments" / f"{env}.yaml"
    if not config_path.exists():
        return {}
    with open(config_path, "r") as f:
        return yaml.safe_load(f) or {}


def get_settings(env: Optional[str] = None) -> Settings:
    env = env or os.getenv("APP_ENV", "development")
    yaml_config = load_yaml_config(env)

    # Override with env vars
    if os.getenv("OPENWEATHER_API_KEY"):
        yaml_config.setdefault("weather", {})["api_key"] = os.getenv("OPENWEATHER_API_KEY")
    if os.getenv("EARTHQUAKE_ZONES_PATH"):
        yaml_config.setdefault("layers", {})["earthquake_zones"] = os.getenv("EARTHQUAKE_ZONES_PATH")
    if os.getenv("FLOOD_EXTENT_PATH"):
        yaml_config.setdefault("layers", {})["flood_extent"] = os.getenv("FLOOD_EXTENT_PATH")
    if os.getenv("LOG_LEVEL"):
        yaml_config.setdefault("logging", {})["level"] = os.getenv("LOG_LEVEL")

    return Settings(**yaml_config) if yaml_config else Settings()


settings = get_settings()
