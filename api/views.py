from typing import List
from datetime import datetime
import logging

from django.conf import settings
from django.db import IntegrityError
from django.shortcuts import get_object_or_404
from ninja import Router, Schema
from ninja.errors import HttpError
from ninja_jwt.authentication import JWTAuth

from moderation import services as moderation
from spots.favorites import (
    is_favorite,
    list_favorites,
    remove_favorite,
    toggle_favorite,
)
from spots.models import CommunitySpot, CrowdLevel, PartyLevel, Profile, WaterQuality
from spots.unified import get_all_spots, get_spot_by_id, update_community_spot

logger = logging.getLogger(__name__)

router = Router()


class CoordinatesSchema(Schema):
    lat: float
    lon: float


class UnifiedSpotSchema(Schema):
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
    coordinates: CoordinatesSchema
    vibes: List[str]
    is_community_spot: bool
    is_featured_spot: bool
    community_spot_id: int | None = None
    featured_spot_id: str | None = None
    submitted_by: int | None = None
    additional_images: List[str] = []


class CommunitySpotSchema(Schema):
    id: int
    unified_id: str
    user_id: int
    title: str
    address: str
    description: str
    latitude: float
    longitude: float
    main_image_url: str
    additional_images: List[str]
    status: str
    rejection_reason: str
    created_at: datetime
    updated_at: datetime
    approved_at: datetime | None = None


class CommunitySpotCreateSchema(Schema):
    title: str
    address: str
    description: str
    latitude: float
    longitude: float
    main_image_url: str
    additional_images: List[str] = []
    water_temperature: float | None = None
    water_quality: str | None = None
    crowd_level: str | None = None
    party_level: str | None = None
    byob_friendly: bool | None = None
    sunset_views: bool | None = None
    facilities: List[str] | None = None
    vibes: List[str] | None = None


class CommunitySpotUpdateSchema(Schema):
    title: str | None = None
    address: str | None = None
    description: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    main_image_url: str | None = None
    additional_images: List[str] | None = None


class FeaturedSpotCreateSchema(Schema):
    id: str | None = None
    name: str
    location: str
    description: str = ""
    latitude: float
    longitude: float
    image_url: str = ""
    water_temperature: float = 18.0
    water_quality: str = WaterQuality.GOOD
    crowd_level: str = CrowdLevel.MODERATE
    party_level: str = PartyLevel.CHILL
    byob_friendly: bool = False
    sunset_views: bool = False
    last_updated: str = ""
    facilities: List[str] = []
    vibes: List[str] = []
    sort_order: int = 0
    is_active: bool = True


class FeaturedSpotUpdateSchema(Schema):
    name: str | None = None
    location: str | None = None
    description: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    image_url: str | None = None
    water_temperature: float | None = None
    water_quality: str | None = None
    crowd_level: str | None = None
    party_level: str | None = None
    byob_friendly: bool | None = None
    sunset_views: bool | None = None
    last_updated: str | None = None
    facilities: List[str] | None = None
    vibes: List[str] | None = None
    sort_order: int | None = None
    is_active: bool | None = None


class FavoriteSchema(Schema):
    id: int
    spot_id: str
    spot_name: str
    water_temperature: float | None = None
    created_at: datetime


class FavoriteToggleSchema(Schema):
    spot_id: str
    spot_name: str = ""
    water_temperature: float | None = None


class FavoriteToggleResponseSchema(Schema):
    is_favorite: bool
    action: str


class ProfileSchema(Schema):
    user_id: int
    email: str
    name: str
    profile_image_url: str
    is_admin: bool


class ProfileUpdateSchema(Schema):
    name: str | None = None
    profile_image_url: str | None = None


class AdminStatusSchema(Schema):
    is_admin: bool


class PendingSpotSchema(Schema):
    id: int
    user_id: int
    title: str
    address: str
    description: str
    coordinates: dict
    main_image_url: str
    additional_images: List[str]
    status: str
    created_at: datetime
    updated_at: datetime
    submitter_name: str
    submitter_image: str | None = None


class RejectSchema(Schema):
    reason: str = ""


class ModerationResultSchema(Schema):
    id: int
    status: str


class AdminActionSchema(Schema):
    id: int
    admin_id: int
    action_type: str
    target_id: str
    target_type: str
    details: dict
    created_at: datetime


class MessageSchema(Schema):
    message: str


def _require_admin(request):
    if not moderation.is_user_admin(request.user.id):
        raise HttpError(403, "Admin access required")


def _check_choice(value, choices, field):
    if value not in (None, "") and value not in choices.values:
        raise HttpError(400, f"Invalid {field}. Must be one of: {', '.join(choices.values)}")


def _check_coordinates(lat, lon):
    if lat is not None and not -90 <= lat <= 90:
        raise HttpError(400, "Latitude must be between -90 and 90")
    if lon is not None and not -180 <= lon <= 180:
        raise HttpError(400, "Longitude must be between -180 and 180")


def _check_images(images):
    if images is not None and len(images) > settings.MAX_ADDITIONAL_IMAGES:
        raise HttpError(400, f"At most {settings.MAX_ADDITIONAL_IMAGES} additional images are allowed")


def _check_spot_details(payload):
    _check_coordinates(payload.latitude, payload.longitude)
    _check_choice(payload.water_quality, WaterQuality, "water_quality")
    _check_choice(payload.crowd_level, CrowdLevel, "crowd_level")
    _check_choice(payload.party_level, PartyLevel, "party_level")


def _profile_response(user, profile):
    return {
        "user_id": user.id,
        "email": user.email,
        "name": profile.name,
        "profile_image_url": profile.profile_image_url,
        "is_admin": profile.is_admin,
    }


# Spots

@router.get("/spots", auth=None, response=List[UnifiedSpotSchema])
def list_spots(request):
    """Featured spots followed by approved community spots."""
    return get_all_spots()


@router.post("/spots/community", auth=JWTAuth(), response={201: CommunitySpotSchema})
def submit_community_spot(request, payload: CommunitySpotCreateSchema):
    """Submit a spot for moderation. New spots start as pending."""
    data = payload.dict()
    for field in ("title", "address", "description", "main_image_url"):
        data[field] = (data[field] or "").strip()
        if not data[field]:
            raise HttpError(400, f"{field} is required")
    _check_spot_details(payload)
    _check_images(payload.additional_images)

    for field in ("water_quality", "crowd_level", "party_level"):
        data[field] = data[field] or ""

    spot = CommunitySpot.objects.create(
        user=request.user,
        status=CommunitySpot.Status.PENDING,
        **data,
    )
    logger.info(f"User {request.user.id} submitted community spot {spot.id}")
    return 201, spot


@router.get("/my-spots", auth=JWTAuth(), response=List[CommunitySpotSchema])
def list_my_spots(request):
    """The caller's submissions in every status, newest first."""
    return list(CommunitySpot.objects.filter(user=request.user).order_by("-created_at", "-id"))


@router.put("/spots/community/{spot_id}", auth=JWTAuth(), response=CommunitySpotSchema)
def edit_community_spot(request, spot_id: int, payload: CommunitySpotUpdateSchema):
    """Edit one of the caller's own submissions. Status is unchanged."""
    spot = get_object_or_404(CommunitySpot, id=spot_id)
    if spot.user_id != request.user.id:
        raise HttpError(403, "You can only edit spots that you submitted")

    changes = payload.dict(exclude_none=True)
    for field in ("title", "address", "description", "main_image_url"):
        if field in changes:
            changes[field] = changes[field].strip()
            if not changes[field]:
                raise HttpError(400, f"{field} cannot be blank")
    _check_coordinates(changes.get("latitude"), changes.get("longitude"))
    _check_images(changes.get("additional_images"))

    if changes:
        update_community_spot(spot_id, **changes)
    spot.refresh_from_db()
    return spot


@router.post("/spots/featured", auth=JWTAuth(), response={201: UnifiedSpotSchema})
def create_featured_spot(request, payload: FeaturedSpotCreateSchema):
    _require_admin(request)
    _check_spot_details(payload)

    fields = payload.dict()
    if not fields.get("id"):
        fields.pop("id")
    try:
        spot = moderation.create_featured_spot(request.user, **fields)
    except IntegrityError:
        raise HttpError(409, "A featured spot with this id already exists")
    return 201, get_spot_by_id(spot.id)


@router.put("/spots/featured/{spot_id}", auth=JWTAuth(), response=UnifiedSpotSchema)
def edit_featured_spot(request, spot_id: str, payload: FeaturedSpotUpdateSchema):
    _require_admin(request)
    _check_spot_details(payload)

    spot = moderation.edit_featured_spot(spot_id, request.user, **payload.dict(exclude_none=True))
    if spot is None:
        raise HttpError(404, "Spot not found")
    return get_spot_by_id(spot.id)


@router.get("/spots/{spot_id}", auth=None, response=UnifiedSpotSchema)
def get_spot(request, spot_id: str):
    spot = get_spot_by_id(spot_id)
    if spot is None:
        raise HttpError(404, "Spot not found")
    return spot


# Favorites

@router.get("/favorites", auth=JWTAuth(), response=List[FavoriteSchema])
def get_favorites(request):
    return list_favorites(request.user)


@router.post("/favorites/toggle", auth=JWTAuth(), response=FavoriteToggleResponseSchema)
def toggle_favorite_endpoint(request, payload: FavoriteToggleSchema):
    spot_id = payload.spot_id.strip()
    if not spot_id:
        raise HttpError(400, "spot_id is required")
    return toggle_favorite(request.user, spot_id, payload.spot_name, payload.water_temperature)


@router.get("/favorites/{spot_id}/status", auth=JWTAuth())
def favorite_status(request, spot_id: str):
    return {"spot_id": spot_id, "is_favorite": is_favorite(request.user, spot_id)}


@router.delete("/favorites/{favorite_id}", auth=JWTAuth(), response={204: None})
def delete_favorite(request, favorite_id: int):
    if not remove_favorite(request.user, favorite_id):
        raise HttpError(404, "Favorite not found")
    return 204, None


# Profile

@router.get("/profile", auth=JWTAuth(), response=ProfileSchema)
def get_profile(request):
    profile, _ = Profile.objects.get_or_create(user=request.user)
    return _profile_response(request.user, profile)


@router.put("/profile", auth=JWTAuth(), response=ProfileSchema)
def update_profile(request, payload: ProfileUpdateSchema):
    profile, _ = Profile.objects.get_or_create(user=request.user)
    if payload.name is not None:
        profile.name = payload.name.strip()
    if payload.profile_image_url is not None:
        profile.profile_image_url = payload.profile_image_url
    profile.save()
    return _profile_response(request.user, profile)


# Moderation

@router.get("/admin/status", auth=JWTAuth(), response=AdminStatusSchema)
def admin_status(request):
    return {"is_admin": moderation.is_user_admin(request.user.id)}


@router.get("/admin/pending", auth=JWTAuth(), response=List[PendingSpotSchema])
def pending_spots(request):
    _require_admin(request)
    return moderation.get_pending_spots()


@router.post(
    "/admin/spots/{spot_id}/approve",
    auth=JWTAuth(),
    response={200: ModerationResultSchema, 409: MessageSchema},
)
def approve_spot(request, spot_id: int):
    _require_admin(request)
    get_object_or_404(CommunitySpot, id=spot_id)

    if not moderation.approve_spot(spot_id, request.user):
        return 409, {"message": "Spot is no longer pending"}
    return {"id": spot_id, "status": CommunitySpot.Status.APPROVED}


@router.post(
    "/admin/spots/{spot_id}/reject",
    auth=JWTAuth(),
    response={200: ModerationResultSchema, 409: MessageSchema},
)
def reject_spot(request, spot_id: int, payload: RejectSchema):
    _require_admin(request)
    reason = payload.reason.strip()
    if not reason:
        raise HttpError(400, "A rejection reason is required")
    get_object_or_404(CommunitySpot, id=spot_id)

    if not moderation.reject_spot(spot_id, request.user, reason):
        return 409, {"message": "Spot is no longer pending"}
    return {"id": spot_id, "status": CommunitySpot.Status.REJECTED}


@router.get("/admin/actions", auth=JWTAuth(), response=List[AdminActionSchema])
def admin_actions(request, limit: int = moderation.DEFAULT_ACTIONS_LIMIT):
    _require_admin(request)
    if limit < 1:
        raise HttpError(400, "limit must be positive")
    return moderation.get_admin_actions(limit=limit)
