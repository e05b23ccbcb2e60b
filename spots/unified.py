"""
Unified spot read model.

Merges featured spots and approved community spots into one list for
display. Community spots carry fewer fields, so unset values are filled
with listing defaults.

Usage:
    from spots.unified import get_all_spots, get_spot_by_id

    spots = get_all_spots()
    spot = get_spot_by_id("community-42")
"""

import asyncio
import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from asgiref.sync import async_to_sync
from django.db import DatabaseError
from django.utils import timezone

from spots.models import CommunitySpot, FeaturedSpot

logger = logging.getLogger(__name__)

COMMUNITY_PREFIX = "community-"

# Defaults for fields a community submitter left unset
DEFAULT_WATER_TEMPERATURE = 18.0
DEFAULT_WATER_QUALITY = "Good"
DEFAULT_CROWD_LEVEL = "Moderate"
DEFAULT_PARTY_LEVEL = "Chill"
DEFAULT_FACILITIES = ["Community Submitted"]
DEFAULT_VIBES = ["Community Favorite", "Hidden Gem"]


@dataclass
class UnifiedSpot:
    """One entry of the public listing, built fresh per request."""
    id: str
    name: str
    location: str
    description: str
    water_temperature: float
    water_quality: str
    crowd_level: str
    party_level: str
    byob_friendly: bool
    sunset_views: bool
    last_updated: str
    image_url: str
    facilities: List[str]
    coordinates: Dict[str, float]
    vibes: List[str]
    is_community_spot: bool
    is_featured_spot: bool
    community_spot_id: Optional[int] = None
    featured_spot_id: Optional[str] = None
    submitted_by: Optional[int] = None
    additional_images: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def featured_to_unified(spot: FeaturedSpot) -> UnifiedSpot:
    return UnifiedSpot(
        id=spot.id,
        name=spot.name,
        location=spot.location,
        description=spot.description,
        water_temperature=spot.water_temperature,
        water_quality=spot.water_quality,
        crowd_level=spot.crowd_level,
        party_level=spot.party_level,
        byob_friendly=spot.byob_friendly,
        sunset_views=spot.sunset_views,
        last_updated=spot.last_updated,
        image_url=spot.image_url,
        facilities=list(spot.facilities or []),
        coordinates={"lat": float(spot.latitude), "lon": float(spot.longitude)},
        vibes=list(spot.vibes or []),
        is_community_spot=False,
        is_featured_spot=True,
        featured_spot_id=spot.id,
    )


def community_to_unified(spot: CommunitySpot) -> UnifiedSpot:
    """Normalize a community spot, applying defaults for unset fields."""
    last_updated = ""
    if spot.updated_at:
        last_updated = timezone.localtime(spot.updated_at).date().isoformat()

    return UnifiedSpot(
        id=spot.unified_id,
        name=spot.title,
        location=spot.address,
        description=spot.description,
        water_temperature=(
            spot.water_temperature if spot.water_temperature is not None else DEFAULT_WATER_TEMPERATURE
        ),
        water_quality=spot.water_quality or DEFAULT_WATER_QUALITY,
        crowd_level=spot.crowd_level or DEFAULT_CROWD_LEVEL,
        party_level=spot.party_level or DEFAULT_PARTY_LEVEL,
        byob_friendly=bool(spot.byob_friendly),
        sunset_views=bool(spot.sunset_views),
        last_updated=last_updated,
        image_url=spot.main_image_url,
        facilities=list(spot.facilities) if spot.facilities else list(DEFAULT_FACILITIES),
        coordinates={"lat": float(spot.latitude), "lon": float(spot.longitude)},
        vibes=list(spot.vibes) if spot.vibes else list(DEFAULT_VIBES),
        is_community_spot=True,
        is_featured_spot=False,
        community_spot_id=spot.id,
        submitted_by=spot.user_id,
        additional_images=list(spot.additional_images or []),
    )


async def _fetch_featured_spots() -> List[FeaturedSpot]:
    qs = FeaturedSpot.objects.filter(is_active=True).order_by("sort_order", "name")
    return [spot async for spot in qs]


async def _fetch_approved_community_spots() -> List[CommunitySpot]:
    qs = CommunitySpot.objects.filter(
        status=CommunitySpot.Status.APPROVED
    ).order_by("-approved_at", "-id")
    return [spot async for spot in qs]


async def _gather_sources():
    """Read both stores concurrently; failures come back as exceptions."""
    return await asyncio.gather(
        _fetch_featured_spots(),
        _fetch_approved_community_spots(),
        return_exceptions=True,
    )


def get_all_spots() -> List[UnifiedSpot]:
    """
    Return active featured spots followed by approved community spots.

    A source that fails is logged and treated as empty, so the listing
    degrades instead of failing. Never raises for store errors.
    """
    try:
        featured, community = async_to_sync(_gather_sources)()
    except Exception as e:
        logger.error(f"Error loading spots: {e}")
        return []

    if isinstance(featured, Exception):
        logger.error(f"Error fetching featured spots: {featured}")
        featured = []
    if isinstance(community, Exception):
        logger.error(f"Error fetching community spots: {community}")
        community = []

    unified = [featured_to_unified(spot) for spot in featured]
    unified.extend(community_to_unified(spot) for spot in community)
    return unified


def parse_community_id(spot_id: str) -> Optional[int]:
    """Return the numeric id from 'community-<id>', or None if malformed."""
    raw = spot_id[len(COMMUNITY_PREFIX):]
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


def get_spot_by_id(spot_id: str) -> Optional[UnifiedSpot]:
    """
    Look up one spot by its unified id.

    Ids starting with 'community-' are community spots (prefix stripped);
    everything else is a featured spot. Returns None when not found or
    when the store lookup fails.
    """
    if not spot_id:
        return None

    try:
        if spot_id.startswith(COMMUNITY_PREFIX):
            community_id = parse_community_id(spot_id)
            if community_id is None:
                logger.debug(f"Malformed community spot id: {spot_id}")
                return None
            spot = CommunitySpot.objects.filter(id=community_id).first()
            return community_to_unified(spot) if spot else None

        spot = FeaturedSpot.objects.filter(id=spot_id).first()
        return featured_to_unified(spot) if spot else None
    except DatabaseError as e:
        logger.error(f"Error fetching spot {spot_id}: {e}")
        return None


def get_community_spot(community_id: int) -> Optional[CommunitySpot]:
    """Fetch a community spot record regardless of status."""
    return CommunitySpot.objects.filter(id=community_id).first()


def update_community_spot(community_id: int, **changes) -> bool:
    """Apply field changes to a community spot. Returns False if missing."""
    spot = get_community_spot(community_id)
    if spot is None:
        logger.warning(f"Community spot {community_id} not found for update")
        return False

    for attr, value in changes.items():
        setattr(spot, attr, value)
    spot.save()
    return True


def update_featured_spot(spot_id: str, **changes) -> bool:
    """Apply field changes to a featured spot. Returns False if missing."""
    spot = FeaturedSpot.objects.filter(id=spot_id).first()
    if spot is None:
        logger.warning(f"Featured spot {spot_id} not found for update")
        return False

    for attr, value in changes.items():
        setattr(spot, attr, value)
    spot.save()
    return True
