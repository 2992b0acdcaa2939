"""Current weather and 5-day forecast via OpenWeather."""

from datetime import datetime, timezone
from typing import Optional

import httpx
from loguru import logger

from siterisk.core.models import ForecastDay, WeatherData
from siterisk.geo.models import Point
from siterisk.utils.config import settings

MS_TO_KMH = 3.6


class WeatherClient:
    """Client for OpenWeather (requires OPENWEATHER_API_KEY)."""

    def __init__(self, api_key: Optional[str] = None, transport: Optional[httpx.BaseTransport] = None):
        self.base_url = settings.weather.base_url
        self.api_key = api_key or settings.weather.api_key
        self.timeout = settings.weather.timeout_seconds
        self.forecast_days = settings.weather.forecast_days
        self.transport = transport

    def _get(self, endpoint: str, point: Point) -> Optional[dict]:
        if not self.api_key:
            logger.warning("OpenWeather API key not configured")
            return None

        params = {"lat": point.lat, "lon": point.lng, "appid": self.api_key, "units": "metric"}
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                resp = client.get(f"{self.base_url}/{endpoint}", params=params)
                if resp.status_code == 401:
                    logger.error("OpenWeather 401: invalid or unauthorized API key")
                    return None
                resp.raise_for_status()
                data = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Weather {endpoint} fetch failed: {e}")
            return None

        if not isinstance(data, dict):
            logger.error(f"Weather {endpoint} returned a non-object payload")
            return None
        return data

    def get_current_weather(self, point: Point) -> Optional[WeatherData]:
        data = self._get("weather", point)
        if data is None:
            return None

        try:
            main = data["main"]
            wind = data.get("wind") or {}
            conditions = (data.get("weather") or [{}])[0]
            visibility = data.get("visibility")
            weather = WeatherData(
                temperature=round(main["temp"]),
                feels_like=round(main["feels_like"]) if "feels_like" in main else None,
                humidity=main.get("humidity", 0),
                pressure=main.get("pressure"),
                wind_speed=round(wind.get("speed", 0) * MS_TO_KMH, 1),
                wind_direction=wind.get("deg", 0),
                description=conditions.get("description", "Unknown"),
                icon=conditions.get("icon", "01d"),
                visibility=round(visibility / 1000, 1) if visibility else None,
                cloud_cover=(data.get("clouds") or {}).get("all", 0),
                location=data.get("name") or "Unknown Location",
            )
        except (KeyError, TypeError) as e:
            logger.error(f"Unexpected weather payload: {e}")
            return None

        logger.info(f"Weather: {weather.temperature}°C, {weather.humidity}% RH, {weather.wind_speed} km/h")
        return weather

    def get_forecast(self, point: Point) -> Optional[list]:
        """One entry per day: the midday sample plus the day's min/max."""
        data = self._get("forecast", point)
        if data is None:
            return None

        by_date = {}
        try:
            for item in data.get("list", []):
                day = datetime.fromtimestamp(item["dt"], tz=timezone.utc).date()
                by_date.setdefault(day, []).append(item)

            forecast = []
            for day, items in list(by_date.items())[: self.forecast_days]:
                selected = items[len(items) // 2]
                temps = [i["main"]["temp"] for i in items]
                conditions = (selected.get("weather") or [{}])[0]
                forecast.append(ForecastDay(
                    date=f"{day:%a, %b} {day.day}",
                    temperature=round(selected["main"]["temp"]),
                    min_temp=round(min(temps)),
                    max_temp=round(max(temps)),
                    humidity=selected["main"].get("humidity", 0),
                    wind_speed=round((selected.get("wind") or {}).get("speed", 0) * MS_TO_KMH, 1),
                    description=conditions.get("description", "Unknown"),
                    icon=conditions.get("icon", "01d"),
                ))
        except (KeyError, TypeError) as e:
            logger.error(f"Unexpected forecast payload: {e}")
            return None

        return forecast


weather_client = WeatherClient()
