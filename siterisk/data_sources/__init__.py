"""Data sources module."""

from siterisk.data_sources.climate_client import ClimateClient, climate_client
from siterisk.data_sources.elevation_client import ElevationClient, elevation_client
from siterisk.data_sources.geocoding_client import GeocodingClient, geocoding_client
from siterisk.data_sources.hazard_layers import HazardLayerLoader, hazard_layer_loader
from siterisk.data_sources.weather_client import WeatherClient, weather_client

__all__ = [
    "ClimateClient", "climate_client",
    "ElevationClient", "elevation_client",
    "GeocodingClient", "geocoding_client",
    "HazardLayerLoader", "hazard_layer_loader",
    "WeatherClient", "weather_client",
]
