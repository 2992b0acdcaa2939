"""Site assessment pipeline."""

from datetime import datetime, timezone
from typing import Optional

from loguru import logger

from siterisk.core.conditions import assess_working_conditions
from siterisk.core.cost import estimate_cost
from siterisk.core.hazards import check_flood_risk, find_earthquake_zone, find_nearest_flood_point
from siterisk.core.models import ClimateData, SiteAssessment, WeatherData
from siterisk.core.zones import get_zone_info, is_high_risk_site
from siterisk.data_sources.climate_client import climate_client
from siterisk.data_sources.elevation_client import elevation_client
from siterisk.data_sources.geocoding_client import geocoding_client
from siterisk.data_sources.hazard_layers import hazard_layer_loader
from siterisk.data_sources.weather_client import weather_client
from siterisk.geo.models import FeatureCollection, Point
from siterisk.utils.config import settings


class SiteAssessor:
    """Hazard lookup -> catalog -> cost model for a selected point.

    Hazard layers are loaded once and shared read-only across calls. External
    services are only queried when ``fetch_external`` is set; any that fail
    leave their dimension at a neutral multiplier.
    """

    def __init__(
        self,
        earthquake_zones: Optional[FeatureCollection] = None,
        flood_extent: Optional[FeatureCollection] = None,
        climate=None,
        elevation=None,
        weather=None,
        geocoder=None,
    ):
        self.earthquake_zones = FeatureCollection.from_geojson(
            earthquake_zones if earthquake_zones is not None else hazard_layer_loader.load_earthquake_zones()
        )
        self.flood_extent = FeatureCollection.from_geojson(
            flood_extent if flood_extent is not None else hazard_layer_loader.load_flood_extent()
        )
        self.climate_client = climate or climate_client
        self.elevation_client = elevation or elevation_client
        self.weather_client = weather or weather_client
        self.geocoder = geocoder or geocoding_client

    def assess(
        self,
        point: Point,
        base_cost: Optional[float] = None,
        elevation_m: Optional[float] = None,
        climate: Optional[ClimateData] = None,
        weather: Optional[WeatherData] = None,
        forecast: Optional[list] = None,
        buffer_radius_km: Optional[float] = None,
        fetch_external: bool = False,
    ) -> SiteAssessment:
        start = datetime.now(timezone.utc)
        base_cost = settings.cost.default_base_cost if base_cost is None else base_cost
        address = None

        logger.info(f"Assessing {point.lat:.5f}, {point.lng:.5f}")

        if fetch_external:
            logger.info("Fetching external data...")
            if elevation_m is None:
                elevation_m = self.elevation_client.get_elevation(point)
            if climate is None:
                climate = self.climate_client.get_climate_data(point)
            if weather is None:
                weather = self.weather_client.get_current_weather(point)
            if forecast is None and weather is not None:
                forecast = self.weather_client.get_forecast(point)
            address = self.geocoder.reverse_geocode(point)

        logger.info("Checking hazards...")
        flood = check_flood_risk(point, self.flood_extent, buffer_radius_km=buffer_radius_km)
        zone = find_earthquake_zone(point, self.earthquake_zones)
        zone_info = get_zone_info(zone.zone) if zone else None
        nearest = find_nearest_flood_point(point, self.flood_extent) if len(self.flood_extent) else None

        logger.info("Estimating cost...")
        cost = estimate_cost(
            base_cost,
            flood_risk=flood,
            earthquake_zone=zone,
            elevation_m=elevation_m,
            climate=climate,
            weather=weather,
        )

        duration = (datetime.now(timezone.utc) - start).total_seconds()
        logger.info(
            f"Assessment done: flood={flood.level.value}, zone={zone.zone if zone else 'n/a'}, "
            f"x{cost.total_multiplier:.3f}, {duration:.2f}s"
        )

        return SiteAssessment(
            point=point,
            flood_risk=flood,
            earthquake_zone=zone,
            zone_info=zone_info,
            nearest_flood_point=nearest,
            cost=cost,
            elevation_m=elevation_m,
            climate=climate,
            weather=weather,
            working_conditions=assess_working_conditions(weather, forecast) if weather else None,
            high_risk=is_high_risk_site(flood, zone_info),
            address=address,
            duration_seconds=duration,
            timestamp=start,
        )
