import pytest

from siterisk.core.models import ClimateData, WeatherData
from siterisk.geo.models import FeatureCollection, Point


def square(lng, lat, half):
    """Closed square ring centred on (lng, lat) with half-width ``half`` degrees."""
    return [
        [lng - half, lat - half],
        [lng + half, lat - half],
        [lng + half, lat + half],
        [lng - half, lat + half],
        [lng - half, lat - half],
    ]


def polygon_feature(ring, **properties):
    return {
        "type": "Feature",
        "geometry": {"type": "Polygon", "coordinates": [ring]},
        "properties": properties,
    }


def collection(*features):
    return {"type": "FeatureCollection", "features": list(features)}


@pytest.fixture
def site():
    """A site near Delhi."""
    return Point(lat=28.6, lng=77.2)


@pytest.fixture
def flood_containing(site):
    return collection(polygon_feature(square(site.lng, site.lat, 0.05), name="river"))


@pytest.fixture
def flood_3km_east(site):
    """Flood polygon whose west edge is ~3 km east of the site."""
    # 3 km of longitude at this latitude
    offset = 3.0 / (111.195 * 0.87798)
    west = site.lng + offset
    ring = [
        [west, site.lat - 0.2],
        [west + 0.2, site.lat - 0.2],
        [west + 0.2, site.lat + 0.2],
        [west, site.lat + 0.2],
        [west, site.lat - 0.2],
    ]
    return collection(polygon_feature(ring))


@pytest.fixture
def zone_layer(site):
    return collection(
        polygon_feature(square(site.lng + 5, site.lat, 1.0), PGA="Zone 2A"),
        polygon_feature(square(site.lng, site.lat, 1.0), PGA="Zone 4"),
    )


@pytest.fixture
def empty_collection():
    return FeatureCollection()


@pytest.fixture
def hot_wet_climate():
    return ClimateData(
        latitude=28.6,
        longitude=77.2,
        elevation=216.0,
        temperature_2m_mean=30.0,
        temperature_2m_max=42.0,
        temperature_2m_min=20.0,
        precipitation_sum=250.0,
        windspeed_10m_mean=30.0,
        relative_humidity_2m_mean=85.0,
        climate_zone="Tropical Savanna",
    )


@pytest.fixture
def mild_weather():
    return WeatherData(temperature=22.0, humidity=55.0, wind_speed=10.0, visibility=10.0)
