"""
OpenWeatherMap client for spot weather overlays.

Current conditions and the 5-day/3-hour forecast are fetched concurrently
and reduced to the current reading plus up to three daily min/max entries.
"""

import asyncio
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

import httpx
from asgiref.sync import async_to_sync
from django.conf import settings
from django.utils import timezone

from api.errors import UpstreamError

logger = logging.getLogger(__name__)

FORECAST_DAYS = 3


def _params(lat: float, lon: float) -> Dict[str, Any]:
    return {
        "lat": lat,
        "lon": lon,
        "appid": settings.OPENWEATHER_API_KEY,
        "units": "metric",
    }


async def _get_json(client: httpx.AsyncClient, path: str, params: Dict[str, Any], label: str) -> Dict[str, Any]:
    url = f"{settings.OPENWEATHER_BASE_URL}/{path}"
    try:
        response = await client.get(url, params=params)
    except httpx.HTTPError as e:
        raise UpstreamError(f"{label} API request failed: {e}") from e

    if response.status_code != 200:
        logger.warning(f"{label} API returned {response.status_code} for {url}")
        raise UpstreamError(
            f"{label} API error: {response.status_code} - {response.reason_phrase}",
            status_code=response.status_code,
        )
    return response.json()


async def fetch_current_weather(client: httpx.AsyncClient, lat: float, lon: float) -> Dict[str, Any]:
    return await _get_json(client, "weather", _params(lat, lon), "Weather")


async def fetch_forecast(client: httpx.AsyncClient, lat: float, lon: float) -> Dict[str, Any]:
    return await _get_json(client, "forecast", _params(lat, lon), "Forecast")


def process_forecast_data(forecast: Dict[str, Any], days: int = FORECAST_DAYS) -> List[Dict[str, Any]]:
    """
    Group 3-hour forecast entries by local calendar day.

    Each day keeps the timestamp and weather of its first entry and the
    min/max over all of its temperatures.
    """
    tz = timezone.get_default_timezone()
    daily: Dict[Any, Dict[str, Any]] = {}

    for item in forecast.get("list", []):
        day = datetime.fromtimestamp(item["dt"], tz=tz).date()
        if day not in daily:
            daily[day] = {"dt": item["dt"], "temps": [], "weather": item.get("weather", [])}
        daily[day]["temps"].append(item["main"]["temp"])

    result = []
    for entry in list(daily.values())[:days]:
        result.append({
            "dt": entry["dt"],
            "temp": {"min": min(entry["temps"]), "max": max(entry["temps"])},
            "weather": entry["weather"],
        })
    return result


async def fetch_weather_data(lat: float, lon: float, transport: Optional[httpx.AsyncBaseTransport] = None) -> Dict[str, Any]:
    """Current weather plus daily forecast. Raises UpstreamError on failure."""
    async with httpx.AsyncClient(timeout=settings.EXTERNAL_API_TIMEOUT, transport=transport) as client:
        results = await asyncio.gather(
            fetch_current_weather(client, lat, lon),
            fetch_forecast(client, lat, lon),
            return_exceptions=True,
        )

    # Both requests settle before the client closes; the first failure wins
    for result in results:
        if isinstance(result, Exception):
            raise result
    current, forecast = results

    return {
        "current": {
            "temp": current["main"]["temp"],
            "feels_like": current["main"]["feels_like"],
            "humidity": current["main"]["humidity"],
            "wind_speed": current["wind"]["speed"],
            "weather": current.get("weather", []),
        },
        "daily": process_forecast_data(forecast),
    }


def get_weather(lat: float, lon: float) -> Dict[str, Any]:
    """Sync entry point for request handlers."""
    return async_to_sync(fetch_weather_data)(lat, lon)
