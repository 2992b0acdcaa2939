import pytest
from fastapi.testclient import TestClient

from siterisk.api import main as api
from siterisk.core.assessor import SiteAssessor
from siterisk.geo.models import FeatureCollection


@pytest.fixture
def client(monkeypatch, flood_containing, zone_layer):
    assessor = SiteAssessor(
        earthquake_zones=FeatureCollection.from_geojson(zone_layer),
        flood_extent=FeatureCollection.from_geojson(flood_containing),
    )
    monkeypatch.setattr(api, "assessor", assessor)
    with TestClient(api.app) as test_client:
        yield test_client


class TestAPI:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["earthquake_zone_features"] == 2
        assert data["flood_extent_features"] == 1

    def test_assess_post(self, client, site):
        response = client.post("/api/v1/assess", json={"lat": site.lat, "lng": site.lng, "base_cost": 2000})

        assert response.status_code == 200
        data = response.json()
        assert data["flood_level"] == "High Risk"
        assert data["earthquake_zone"] == "Zone 4"
        assert data["high_risk"] is True
        assert data["adjusted_cost_per_unit"] == pytest.approx(2000 * 1.80 * 1.30)
        assert "SITE ASSESSMENT" in data["formatted_output"]

    def test_assess_with_climate(self, client):
        payload = {
            "lat": -40.0,
            "lng": 0.0,
            "base_cost": 1000,
            "climate": {
                "temperature_2m_mean": 30,
                "temperature_2m_max": 42,
                "temperature_2m_min": 20,
                "precipitation_sum": 250,
                "windspeed_10m_mean": 30,
                "relative_humidity_2m_mean": 85,
            },
        }
        data = client.post("/api/v1/assess", json=payload).json()

        assert data["flood_level"] == "Safe"
        assert data["total_multiplier"] == pytest.approx(1.23)
        assert data["data"]["climate"]["climate_zone"] == "Tropical Savanna"

    def test_assess_get_detail(self, client, site):
        response = client.get("/api/v1/assess", params={"lat": site.lat, "lng": site.lng, "style": "detail"})

        assert response.status_code == 200
        assert '"flood_risk"' in response.json()["formatted_output"]

    @pytest.mark.parametrize("params", [{"lat": 91, "lng": 0}, {"lat": 0, "lng": -181}, {"lat": 0}])
    def test_assess_rejects_bad_coordinates(self, client, params):
        assert client.get("/api/v1/assess", params=params).status_code == 422

    def test_assess_rejects_unknown_style(self, client):
        response = client.post("/api/v1/assess", json={"lat": 0, "lng": 0, "style": "poster"})
        assert response.status_code == 400

    def test_zones(self, client):
        data = client.get("/api/v1/zones").json()
        assert data["count"] == 5
        assert data["zones"][-1]["zone"] == "Zone 4"

    def test_zone_detail(self, client):
        response = client.get("/api/v1/zones/Zone 4")
        assert response.status_code == 200
        assert response.json()["cost_multiplier"] == 1.80

    def test_unknown_zone(self, client):
        assert client.get("/api/v1/zones/Zone 9").status_code == 404

    def test_cost(self, client):
        response = client.post("/api/v1/cost", json={"base_cost": 2000, "zone": "Zone 4", "flood_level": "Safe"})

        assert response.status_code == 200
        assert response.json()["adjusted_cost_per_unit"] == pytest.approx(3600)

    def test_cost_weather_fallback(self, client):
        payload = {"base_cost": 1000, "weather": {"temperature": 45, "humidity": 50, "wind_speed": 5}}
        data = client.post("/api/v1/cost", json=payload).json()

        assert data["environmental_source"] == "weather"
        assert data["multipliers"]["environmental"] == pytest.approx(1.05)

    def test_cost_rejects_unknown_flood_level(self, client):
        response = client.post("/api/v1/cost", json={"base_cost": 2000, "flood_level": "Extreme"})
        assert response.status_code == 400

    def test_cost_rejects_negative_base(self, client):
        assert client.post("/api/v1/cost", json={"base_cost": -5}).status_code == 422

    def test_classify(self, client):
        response = client.post("/api/v1/climate/classify", json={"mean_temp": 5, "precipitation": 20})
        assert response.json() == {"climate_zone": "Cold Desert"}

    def test_climate_multiplier(self, client):
        payload = {
            "temperature_2m_mean": 5,
            "temperature_2m_max": 12,
            "temperature_2m_min": -12,
            "precipitation_sum": 20,
            "windspeed_10m_mean": 5,
        }
        data = client.post("/api/v1/climate/multiplier", json=payload).json()
        assert data == {"climate_zone": "Cold Desert", "multiplier": pytest.approx(1.08)}
