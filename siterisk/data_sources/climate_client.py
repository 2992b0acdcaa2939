"""Long-term climate averages via the Open-Meteo climate API (free, no API key)."""

from typing import Optional

import httpx
from loguru import logger

from siterisk.core.climate import aggregate_climate
from siterisk.core.models import ClimateData
from siterisk.geo.models import Point
from siterisk.utils.config import settings
from siterisk.utils.constants import CLIMATE_DAILY_VARIABLES, CLIMATE_SAMPLE_WINDOWS


class ClimateClient:
    """Samples January and July across several years and averages them.

    Six sample years of two months each stand in for a 30-year daily series
    at a fraction of the request volume.
    """

    def __init__(self, transport: Optional[httpx.BaseTransport] = None):
        self.base_url = settings.climate.base_url
        self.timeout = settings.climate.timeout_seconds
        self.sample_years = settings.climate.sample_years
        self.transport = transport

    def _windows(self) -> list:
        return [
            (f"{year}-{start}", f"{year}-{end}")
            for year in self.sample_years
            for start, end in CLIMATE_SAMPLE_WINDOWS
        ]

    def _fetch_window(self, client: httpx.Client, point: Point, start: str, end: str) -> Optional[dict]:
        params = {
            "latitude": point.lat,
            "longitude": point.lng,
            "start_date": start,
            "end_date": end,
            "daily": ",".join(CLIMATE_DAILY_VARIABLES),
            "timezone": "auto",
        }
        try:
            resp = client.get(self.base_url, params=params)
            if resp.status_code != 200:
                logger.warning(f"Climate API partial error {resp.status_code} for {start}..{end}")
                return None
            data = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Climate window {start}..{end} failed: {e}")
            return None

        if not isinstance(data, dict):
            logger.warning(f"Climate window {start}..{end} returned a non-object payload")
            return None
        daily = data.get("daily")
        if data.get("error") or not isinstance(daily, dict) or not daily.get("time"):
            return None
        return data

    def get_climate_data(self, point: Point) -> Optional[ClimateData]:
        """Fetch all sample windows; failed windows are skipped."""
        samples = []
        elevation = 0.0

        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                for start, end in self._windows():
                    data = self._fetch_window(client, point, start, end)
                    if data is None:
                        continue
                    if not elevation and isinstance(data.get("elevation"), (int, float)):
                        elevation = float(data["elevation"])
                    samples.append(data["daily"])
        except httpx.HTTPError as e:
            logger.error(f"Climate fetch failed: {e}")
            return None

        logger.info(f"Climate: {len(samples)}/{len(self._windows())} windows for {point.lat:.4f}, {point.lng:.4f}")
        return aggregate_climate(point, samples, elevation=elevation)


climate_client = ClimateClient()
