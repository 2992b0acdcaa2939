import pytest

from siterisk.core.models import FloodRisk, FloodRiskLevel
from siterisk.core.zones import EARTHQUAKE_ZONES, get_zone_info, is_high_risk_site, list_zones


class TestZoneCatalog:
    def test_zone_4_multiplier(self):
        assert get_zone_info("Zone 4").cost_multiplier == 1.80

    @pytest.mark.parametrize("zone", ["Zone 1", "Zone 2A", "Zone 2B", "Zone 3", "Zone 4"])
    def test_entries_are_complete(self, zone):
        info = get_zone_info(zone)
        assert info.zone == zone
        assert info.pga
        assert info.conditions
        assert info.vulnerability
        assert info.construction_recommendations
        assert info.cost_multiplier >= 1.0

    @pytest.mark.parametrize("zone", [None, "", "Zone 2", "Zone 5", "zone 4"])
    def test_unknown_zone(self, zone):
        assert get_zone_info(zone) is None

    def test_multiplier_increases_with_risk(self):
        multipliers = [z.cost_multiplier for z in list_zones()]
        assert multipliers == sorted(multipliers)
        assert len(set(multipliers)) == len(EARTHQUAKE_ZONES)

    def test_list_zones_lowest_first(self):
        zones = list_zones()
        assert zones[0].risk_level == "Low"
        assert zones[-1].risk_level == "Very High"


class TestHighRiskSite:
    def flood(self, level):
        return FloodRisk(level=level, distance_km=0.0, in_flood_extent=level == FloodRiskLevel.HIGH, in_buffer=False)

    def test_flood_high(self):
        assert is_high_risk_site(self.flood(FloodRiskLevel.HIGH), get_zone_info("Zone 1")) is True

    def test_seismic_high(self):
        assert is_high_risk_site(self.flood(FloodRiskLevel.SAFE), get_zone_info("Zone 3")) is True

    def test_neither(self):
        assert is_high_risk_site(self.flood(FloodRiskLevel.MEDIUM), get_zone_info("Zone 2B")) is False

    def test_unknown_without_zone(self):
        assert is_high_risk_site(self.flood(FloodRiskLevel.HIGH), None) is None
