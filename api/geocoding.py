"""
Address geocoding for the add-spot form using OpenStreetMap/Nominatim.
"""

import logging
from decimal import Decimal
from typing import Optional, Tuple

from django.conf import settings
from geopy.exc import GeocoderServiceError, GeocoderTimedOut
from geopy.geocoders import Nominatim

logger = logging.getLogger(__name__)

# Bias results toward Norway
COUNTRY_CODES = "no"


def geocode_address(address: str) -> Tuple[Optional[Decimal], Optional[Decimal]]:
    """
    Geocode an address string to latitude/longitude.

    Returns (None, None) when the address is blank, not found, or the
    geocoder fails.
    """
    if not address or not address.strip():
        return (None, None)

    try:
        geocoder = Nominatim(user_agent=settings.GEOCODER_USER_AGENT, timeout=settings.EXTERNAL_API_TIMEOUT)
        location = geocoder.geocode(address, country_codes=COUNTRY_CODES)
    except (GeocoderTimedOut, GeocoderServiceError) as e:
        logger.error(f"Geocoding service error for '{address}': {e}")
        return (None, None)

    if not location:
        logger.warning(f"No geocoding result for: {address}")
        return (None, None)

    lat = Decimal(str(location.latitude)).quantize(Decimal('0.000001'))
    lng = Decimal(str(location.longitude)).quantize(Decimal('0.000001'))
    logger.info(f"Geocoded '{address}' to ({lat}, {lng})")
    return (lat, lng)
