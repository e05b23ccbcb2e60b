"""
Community spot moderation.

Spots move one way: pending -> approved or pending -> rejected. The status
change is a conditional single-row update, so when two moderators act on
the same spot only the first one wins. The audit entry is written as a
separate step afterwards; if it fails the status change stands and the
entry can be written again with log_admin_action().
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from django.db import DatabaseError, transaction
from django.utils import timezone

from moderation.models import AdminAction
from spots.models import CommunitySpot, FeaturedSpot, Profile
from spots.unified import update_featured_spot

logger = logging.getLogger(__name__)

UNKNOWN_SUBMITTER = "Unknown User"
DEFAULT_ACTIONS_LIMIT = 50


@dataclass
class PendingSpot:
    """A pending community spot with its submitter's display details."""
    id: int
    user_id: int
    title: str
    address: str
    description: str
    coordinates: Dict[str, float]
    main_image_url: str
    status: str
    created_at: datetime
    updated_at: datetime
    submitter_name: str = UNKNOWN_SUBMITTER
    submitter_image: Optional[str] = None
    additional_images: List[str] = field(default_factory=list)


def log_admin_action(
    admin,
    action_type: str,
    target_id,
    target_type: str,
    details: Optional[Dict[str, Any]] = None,
) -> bool:
    """Append one audit entry. Returns False if the write failed."""
    try:
        with transaction.atomic():
            AdminAction.objects.create(
                admin=admin,
                action_type=action_type,
                target_id=str(target_id),
                target_type=target_type,
                details=details or {},
            )
    except DatabaseError as e:
        logger.error(f"Error logging admin action {action_type} on {target_type}:{target_id}: {e}")
        return False
    return True


def approve_spot(spot_id: int, admin) -> bool:
    """
    Approve a pending community spot.

    Returns False if the spot does not exist, has already left the
    pending state, or the store write failed.
    """
    now = timezone.now()
    try:
        updated = CommunitySpot.objects.filter(
            id=spot_id, status=CommunitySpot.Status.PENDING
        ).update(
            status=CommunitySpot.Status.APPROVED,
            approved_at=now,
            approved_by=admin,
            updated_at=now,
        )
    except DatabaseError as e:
        logger.error(f"Error approving spot {spot_id}: {e}")
        return False
    if not updated:
        logger.warning(f"Spot {spot_id} not approved: missing or not pending")
        return False

    logger.info(f"Spot {spot_id} approved by admin {admin.pk}")
    log_admin_action(
        admin,
        AdminAction.ActionType.APPROVE_SPOT,
        spot_id,
        AdminAction.TargetType.COMMUNITY_SPOT,
        {"action": "approved"},
    )
    return True


def reject_spot(spot_id: int, admin, reason: str) -> bool:
    """
    Reject a pending community spot with a reason shown to the submitter.

    A blank reason is refused. Returns False if the spot does not exist or
    has already left the pending state.
    """
    reason = (reason or "").strip()
    if not reason:
        logger.warning(f"Refusing to reject spot {spot_id} without a reason")
        return False

    try:
        updated = CommunitySpot.objects.filter(
            id=spot_id, status=CommunitySpot.Status.PENDING
        ).update(
            status=CommunitySpot.Status.REJECTED,
            rejection_reason=reason,
            updated_at=timezone.now(),
        )
    except DatabaseError as e:
        logger.error(f"Error rejecting spot {spot_id}: {e}")
        return False
    if not updated:
        logger.warning(f"Spot {spot_id} not rejected: missing or not pending")
        return False

    logger.info(f"Spot {spot_id} rejected by admin {admin.pk}")
    log_admin_action(
        admin,
        AdminAction.ActionType.REJECT_SPOT,
        spot_id,
        AdminAction.TargetType.COMMUNITY_SPOT,
        {"action": "rejected", "reason": reason},
    )
    return True


def is_user_admin(user_id) -> bool:
    """Profile-based admin check. Any lookup problem means not an admin."""
    if user_id is None:
        return False
    try:
        return Profile.objects.filter(user_id=user_id, is_admin=True).exists()
    except (DatabaseError, ValueError, TypeError) as e:
        logger.error(f"Error checking admin status for user {user_id}: {e}")
        return False


def get_pending_spots() -> List[PendingSpot]:
    """Pending spots, newest first, with submitter name and image."""
    spots = list(
        CommunitySpot.objects.filter(status=CommunitySpot.Status.PENDING).order_by("-created_at", "-id")
    )
    if not spots:
        return []

    user_ids = {spot.user_id for spot in spots}
    try:
        profiles = {
            profile.user_id: profile
            for profile in Profile.objects.filter(user_id__in=user_ids)
        }
    except DatabaseError as e:
        logger.error(f"Error fetching submitter profiles: {e}")
        profiles = {}

    pending = []
    for spot in spots:
        profile = profiles.get(spot.user_id)
        pending.append(
            PendingSpot(
                id=spot.id,
                user_id=spot.user_id,
                title=spot.title,
                address=spot.address,
                description=spot.description,
                coordinates={"lat": float(spot.latitude), "lng": float(spot.longitude)},
                main_image_url=spot.main_image_url,
                additional_images=list(spot.additional_images or []),
                status=spot.status,
                created_at=spot.created_at,
                updated_at=spot.updated_at,
                submitter_name=(profile.name if profile and profile.name else UNKNOWN_SUBMITTER),
                submitter_image=(profile.profile_image_url or None) if profile else None,
            )
        )
    return pending


def get_admin_actions(limit: int = DEFAULT_ACTIONS_LIMIT) -> List[AdminAction]:
    """Most recent audit entries first."""
    limit = max(int(limit), 0)
    try:
        return list(AdminAction.objects.select_related("admin").order_by("-created_at", "-id")[:limit])
    except DatabaseError as e:
        logger.error(f"Error fetching admin actions: {e}")
        return []


def create_featured_spot(admin, **fields) -> FeaturedSpot:
    with transaction.atomic():
        spot = FeaturedSpot.objects.create(**fields)
    logger.info(f"Featured spot {spot.id} created by admin {admin.pk}")
    log_admin_action(
        admin,
        AdminAction.ActionType.CREATE_FEATURED_SPOT,
        spot.id,
        AdminAction.TargetType.FEATURED_SPOT,
        {"action": "created", "name": spot.name},
    )
    return spot


def edit_featured_spot(spot_id: str, admin, **changes) -> Optional[FeaturedSpot]:
    """Apply changes to a featured spot and log them. None if missing."""
    if not update_featured_spot(spot_id, **changes):
        return None

    logger.info(f"Featured spot {spot_id} edited by admin {admin.pk}")
    log_admin_action(
        admin,
        AdminAction.ActionType.EDIT_FEATURED_SPOT,
        spot_id,
        AdminAction.TargetType.FEATURED_SPOT,
        {"action": "edited", "fields": sorted(changes)},
    )
    return FeaturedSpot.objects.get(id=spot_id)
