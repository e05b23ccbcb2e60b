"""
Public proxy endpoints for third-party data and standalone spot pages.

Keys for the upstream services stay on the server; clients only see the
JSON these routes return.
"""

import logging

from ninja import Query, Router
from ninja.errors import HttpError

from api.errors import UpstreamError
from api.geocoding import geocode_address
from api.llm_providers import get_llm_provider
from api.maps_service import (
    DEFAULT_RADIUS,
    DEFAULT_TRAVEL_MODE,
    get_directions,
    get_nearby_places,
    search_places,
)
from api.views import CommunitySpotSchema
from api.weather_service import get_weather
from spots.summer import sunset_summary
from spots.unified import get_community_spot
from spots.vibes import beach_day_suggestions

logger = logging.getLogger(__name__)

router = Router()

# Upstream statuses passed through to the client; anything else is a 500
PASSTHROUGH_WEATHER_STATUSES = {
    401: "Invalid API key",
    429: "Rate limit exceeded",
}


@router.get("/weather", auth=None)
def weather(request, lat: float = Query(None), lon: float = Query(None)):
    """Current conditions plus a three-day forecast."""
    if lat is None or lon is None:
        raise HttpError(400, "Latitude and longitude are required")

    try:
        return get_weather(lat, lon)
    except UpstreamError as e:
        logger.error(f"Weather API error: {e}")
        if e.status_code in PASSTHROUGH_WEATHER_STATUSES:
            raise HttpError(e.status_code, PASSTHROUGH_WEATHER_STATUSES[e.status_code])
        raise HttpError(500, "Failed to fetch weather data")
    except (KeyError, ValueError) as e:
        logger.error(f"Unexpected weather payload: {e}")
        raise HttpError(500, "Failed to fetch weather data")


@router.get("/places", auth=None)
def places(
    request,
    lat: float = Query(None),
    lng: float = Query(None),
    place_type: str = Query(None, alias="type"),
    radius: int = Query(DEFAULT_RADIUS),
):
    if lat is None or lng is None or not place_type:
        raise HttpError(400, "Missing required parameters")

    try:
        return search_places(lat, lng, place_type, radius)
    except UpstreamError as e:
        raise HttpError(500, str(e))


@router.get("/places/nearby", auth=None)
def nearby_places(request, lat: float = Query(None), lng: float = Query(None), radius: int = Query(DEFAULT_RADIUS)):
    """Restaurants, bars and cafes around a spot, up to six of each."""
    if lat is None or lng is None:
        raise HttpError(400, "Missing required parameters")
    return get_nearby_places(lat, lng, radius)


@router.get("/directions", auth=None)
def directions(
    request,
    origin_lat: float = Query(None, alias="originLat"),
    origin_lng: float = Query(None, alias="originLng"),
    dest_lat: float = Query(None, alias="destLat"),
    dest_lng: float = Query(None, alias="destLng"),
    mode: str = Query(DEFAULT_TRAVEL_MODE),
):
    if None in (origin_lat, origin_lng, dest_lat, dest_lng):
        raise HttpError(400, "Missing required parameters")

    try:
        return get_directions(origin_lat, origin_lng, dest_lat, dest_lng, mode)
    except UpstreamError as e:
        raise HttpError(500, str(e))


@router.get("/geocode", auth=None)
def geocode(request, address: str = Query(None)):
    if not address or not address.strip():
        raise HttpError(400, "Address is required")

    lat, lng = geocode_address(address)
    if lat is None:
        raise HttpError(404, "Address not found")
    return {"lat": float(lat), "lng": float(lng)}


@router.get("/summer/sunset", auth=None)
def summer_sunset(request):
    """Sunset estimate, golden hour window and a seasonal tip for Oslo."""
    return sunset_summary()


@router.get("/vibes", auth=None)
def vibes(
    request,
    temperature: float = Query(None),
    weather: str = Query(None),
    spot_name: str = Query("Oslo", alias="spotName"),
):
    """Beach-day vibes, drink ideas and a quote for the given conditions."""
    if temperature is None or not weather:
        raise HttpError(400, "Temperature and weather are required")
    return beach_day_suggestions(temperature, weather, spot_name.strip() or "Oslo", provider=get_llm_provider())


@router.get("/community-spot/{spot_id}", auth=None, response=CommunitySpotSchema)
def community_spot(request, spot_id: int):
    """A single community spot record in any moderation state."""
    spot = get_community_spot(spot_id)
    if spot is None:
        raise HttpError(404, "Spot not found")
    return spot
