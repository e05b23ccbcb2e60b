"""
Per-user favorites keyed by unified spot id.

A favorite stores a snapshot of the spot name and water temperature so the
favorites list renders without re-reading the spot stores.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from django.db import IntegrityError, transaction

from spots.models import Favorite

logger = logging.getLogger(__name__)


@dataclass
class FavoriteResult:
    is_favorite: bool
    action: str  # added, removed or already_favorited


def toggle_favorite(
    user,
    spot_id: str,
    spot_name: str = "",
    water_temperature: Optional[float] = None,
) -> FavoriteResult:
    """
    Flip favorite membership for (user, spot_id).

    Check-then-write; a concurrent insert that loses the race on the
    unique constraint is reported as already favorited, not an error.
    """
    existing = Favorite.objects.filter(user=user, spot_id=spot_id).first()
    if existing:
        existing.delete()
        logger.info(f"User {user.pk} removed favorite {spot_id}")
        return FavoriteResult(is_favorite=False, action="removed")

    try:
        with transaction.atomic():
            Favorite.objects.create(
                user=user,
                spot_id=spot_id,
                spot_name=spot_name,
                water_temperature=water_temperature,
            )
    except IntegrityError:
        logger.info(f"Favorite {spot_id} already exists for user {user.pk}")
        return FavoriteResult(is_favorite=True, action="already_favorited")

    logger.info(f"User {user.pk} added favorite {spot_id}")
    return FavoriteResult(is_favorite=True, action="added")


def is_favorite(user, spot_id: str) -> bool:
    return Favorite.objects.filter(user=user, spot_id=spot_id).exists()


def list_favorites(user) -> List[Favorite]:
    return list(Favorite.objects.filter(user=user).order_by("-created_at", "-id"))


def remove_favorite(user, favorite_id: int) -> bool:
    """Delete one of the user's favorites by row id. Returns False if absent."""
    deleted, _ = Favorite.objects.filter(user=user, id=favorite_id).delete()
    return deleted > 0
