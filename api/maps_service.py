"""
Google Maps proxies: nearby places and directions.

Single lookups are plain pass-through calls made with requests. The nearby
bundle for a spot page queries restaurants, bars and cafes concurrently
with httpx; a failing type comes back empty instead of failing the bundle.
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional

import httpx
import requests
from asgiref.sync import async_to_sync
from django.conf import settings

from api.errors import UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_RADIUS = 1000
DEFAULT_TRAVEL_MODE = "DRIVING"
NEARBY_TYPES = ("restaurant", "bar", "cafe")
NEARBY_LIMIT = 6


def _get(path: str, params: Dict[str, Any], label: str) -> Dict[str, Any]:
    params = {**params, "key": settings.GOOGLE_MAPS_API_KEY}
    try:
        response = requests.get(
            f"{settings.GOOGLE_MAPS_BASE_URL}/{path}",
            params=params,
            timeout=settings.EXTERNAL_API_TIMEOUT,
        )
    except requests.RequestException as e:
        logger.error(f"{label} request failed: {e}")
        raise UpstreamError(f"Failed to fetch {label.lower()}") from e

    try:
        data = response.json()
    except ValueError:
        data = {}

    if not response.ok:
        message = data.get("error_message") or f"Failed to fetch {label.lower()}"
        logger.error(f"{label} API error {response.status_code}: {message}")
        raise UpstreamError(message, status_code=response.status_code)
    return data


def search_places(lat: float, lng: float, place_type: str, radius: int = DEFAULT_RADIUS) -> Dict[str, Any]:
    """Nearby search pass-through; returns the upstream JSON as-is."""
    return _get(
        "place/nearbysearch/json",
        {"location": f"{lat},{lng}", "radius": radius, "type": place_type},
        "Places",
    )


def get_directions(
    origin_lat: float,
    origin_lng: float,
    dest_lat: float,
    dest_lng: float,
    mode: str = DEFAULT_TRAVEL_MODE,
) -> Dict[str, Any]:
    """Directions pass-through; returns the upstream JSON as-is."""
    return _get(
        "directions/json",
        {
            "origin": f"{origin_lat},{origin_lng}",
            "destination": f"{dest_lat},{dest_lng}",
            "mode": mode,
        },
        "Directions",
    )


async def _fetch_place_type(client: httpx.AsyncClient, lat: float, lng: float, place_type: str, radius: int) -> List[Dict[str, Any]]:
    response = await client.get(
        f"{settings.GOOGLE_MAPS_BASE_URL}/place/nearbysearch/json",
        params={
            "location": f"{lat},{lng}",
            "radius": radius,
            "type": place_type,
            "key": settings.GOOGLE_MAPS_API_KEY,
        },
    )
    response.raise_for_status()
    return response.json().get("results", [])[:NEARBY_LIMIT]


async def fetch_nearby_places(
    lat: float,
    lng: float,
    radius: int = DEFAULT_RADIUS,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Dict[str, List[Dict[str, Any]]]:
    async with httpx.AsyncClient(timeout=settings.EXTERNAL_API_TIMEOUT, transport=transport) as client:
        results = await asyncio.gather(
            *(_fetch_place_type(client, lat, lng, place_type, radius) for place_type in NEARBY_TYPES),
            return_exceptions=True,
        )

    nearby = {}
    for place_type, result in zip(NEARBY_TYPES, results):
        if isinstance(result, Exception):
            logger.error(f"Error fetching nearby {place_type} places: {result}")
            result = []
        nearby[f"{place_type}s"] = result
    return nearby


def get_nearby_places(lat: float, lng: float, radius: int = DEFAULT_RADIUS) -> Dict[str, List[Dict[str, Any]]]:
    """Restaurants, bars and cafes near a point, up to six of each."""
    return async_to_sync(fetch_nearby_places)(lat, lng, radius)
