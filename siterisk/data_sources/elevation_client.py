"""Elevation lookup via Open-Elevation (NASA SRTM, 30m)."""

from typing import Optional

import httpx
from loguru import logger

from siterisk.geo.models import Point
from siterisk.utils.config import settings


class ElevationClient:
    def __init__(self, transport: Optional[httpx.BaseTransport] = None):
        self.base_url = settings.elevation.base_url
        self.timeout = settings.elevation.timeout_seconds
        self.transport = transport

    def get_elevation(self, point: Point) -> Optional[float]:
        """Elevation in metres, or None if unavailable."""
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                resp = client.get(self.base_url, params={"locations": f"{point.lat},{point.lng}"})
                resp.raise_for_status()
                data = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Elevation fetch failed: {e}")
            return None

        results = data.get("results") if isinstance(data, dict) else None
        if not isinstance(results, list) or not results or not isinstance(results[0], dict):
            logger.warning("Elevation response has no usable results")
            return None

        try:
            elevation = float(results[0].get("elevation") or 0)
        except (TypeError, ValueError) as e:
            logger.error(f"Unexpected elevation value: {e}")
            return None
        logger.info(f"Elevation: {elevation:.0f}m")
        return elevation


elevation_client = ElevationClient()
