"""Reverse geocoding with provider fallbacks and a short-lived cache."""

from typing import Callable, Optional

import httpx
from loguru import logger

from siterisk.geo.models import Point
from siterisk.utils.cache import TTLCache
from siterisk.utils.config import settings


def cache_key(point: Point) -> str:
    """Coordinates rounded to 4 decimals (~11m)."""
    return f"{point.lat:.4f},{point.lng:.4f}"


def _join(parts: list) -> Optional[str]:
    parts = [p for p in parts if isinstance(p, str) and p]
    return ", ".join(parts) if parts else None


class GeocodingClient:
    """Tries Photon, then BigDataCloud, then Nominatim."""

    def __init__(self, cache: Optional[TTLCache] = None, transport: Optional[httpx.BaseTransport] = None):
        cfg = settings.geocoding
        self.cfg = cfg
        self.cache = cache if cache is not None else TTLCache(ttl_seconds=cfg.cache_ttl_seconds)
        self.transport = transport

    def _fetch(self, url: str, params: dict, headers: Optional[dict] = None) -> Optional[dict]:
        try:
            with httpx.Client(timeout=self.cfg.timeout_seconds, transport=self.transport) as client:
                resp = client.get(url, params=params, headers=headers)
                if resp.status_code != 200:
                    return None
                data = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.debug(f"Geocoder {url} failed: {e}")
            return None

        if not isinstance(data, dict):
            logger.debug(f"Geocoder {url} returned a non-object payload")
            return None
        return data

    def _photon(self, point: Point) -> Optional[str]:
        data = self._fetch(self.cfg.photon_url, {"lat": point.lat, "lon": point.lng, "lang": "en"})
        features = (data or {}).get("features")
        if not isinstance(features, list) or not features or not isinstance(features[0], dict):
            return None

        props = features[0].get("properties")
        if not isinstance(props, dict):
            return None
        is_street = props.get("type") in ("street", "road") or props.get("osm_key") == "highway"
        parts = [
            props.get("name") if is_street else None,
            props.get("locality"),
            props.get("city") or props.get("town") or props.get("village"),
            props.get("county"),
            props.get("state"),
            props.get("country"),
        ]
        if props.get("name") and not is_street:
            parts.insert(0, props["name"])
        return _join(parts)

    def _bigdatacloud(self, point: Point) -> Optional[str]:
        data = self._fetch(
            self.cfg.bigdatacloud_url,
            {"latitude": point.lat, "longitude": point.lng, "localityLanguage": "en"},
        )
        if not data:
            return None
        return _join([data.get("locality"), data.get("principalSubdivision"), data.get("countryName")]) or _join(
            [data.get("display_name")]
        )

    def _nominatim(self, point: Point) -> Optional[str]:
        data = self._fetch(
            self.cfg.nominatim_url,
            {"format": "json", "lat": point.lat, "lon": point.lng, "zoom": 18, "addressdetails": 1},
            headers={"User-Agent": self.cfg.user_agent, "Accept": "application/json"},
        )
        if not data:
            return None

        addr = data.get("address")
        display_name = data.get("display_name") if isinstance(data.get("display_name"), str) else None
        if not isinstance(addr, dict) or not addr:
            return display_name
        return _join([
            addr.get("road"),
            addr.get("neighbourhood") or addr.get("suburb"),
            addr.get("city") or addr.get("town") or addr.get("village"),
            addr.get("state_district"),
            addr.get("state"),
            addr.get("country"),
        ]) or display_name

    def providers(self) -> list[Callable[[Point], Optional[str]]]:
        return [self._photon, self._bigdatacloud, self._nominatim]

    def reverse_geocode(self, point: Point) -> Optional[str]:
        key = cache_key(point)
        hit, cached = self.cache.get(key)
        if hit:
            return cached

        for provider in self.providers():
            address = provider(point)
            if address:
                self.cache.set(key, address)
                return address

        # Misses are retried sooner
        self.cache.set(key, None, ttl_seconds=self.cfg.miss_ttl_seconds)
        logger.info(f"No address found for {key}")
        return None


geocoding_client = GeocodingClient()
