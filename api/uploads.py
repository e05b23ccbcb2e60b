"""
Image uploads for spot photos and profile pictures.

Files go to the configured default storage backend; the response carries
the public URL to store on the spot or profile.
"""

import logging
import time
from typing import Optional

from django.conf import settings
from django.core.files.storage import default_storage
from ninja import File, Router, Schema
from ninja.errors import HttpError
from ninja.files import UploadedFile
from ninja_jwt.authentication import JWTAuth

from spots.models import Profile

logger = logging.getLogger(__name__)

router = Router()


class UploadResponseSchema(Schema):
    url: str


def _validate_image(file: Optional[UploadedFile], max_bytes: int) -> None:
    if file is None:
        raise HttpError(400, "No file provided")
    if not (file.content_type or "").startswith("image/"):
        raise HttpError(400, "File must be an image")
    if file.size > max_bytes:
        raise HttpError(400, f"File size must be less than {max_bytes // (1024 * 1024)}MB")


def _storage_name(prefix: str, user_id: int, original_name: str) -> str:
    ext = original_name.rsplit(".", 1)[-1].lower() if "." in (original_name or "") else "jpg"
    return f"{prefix}s/{prefix}-{user_id}-{int(time.time() * 1000)}.{ext}"


def _save(file: UploadedFile, name: str) -> str:
    try:
        saved_name = default_storage.save(name, file)
    except OSError as e:
        logger.error(f"Failed to store upload {name}: {e}")
        raise HttpError(500, f"Failed to upload file: {e}")
    return default_storage.url(saved_name)


@router.post("", auth=JWTAuth(), response=UploadResponseSchema)
def upload_spot_image(request, file: Optional[UploadedFile] = File(None)):
    """Upload a spot photo (image/*, up to MAX_SPOT_IMAGE_BYTES)."""
    _validate_image(file, settings.MAX_SPOT_IMAGE_BYTES)

    url = _save(file, _storage_name("spot", request.user.id, file.name))
    logger.info(f"User {request.user.id} uploaded spot image {url}")
    return {"url": url}


@router.post("/profile-image", auth=JWTAuth(), response=UploadResponseSchema)
def upload_profile_image(request, file: Optional[UploadedFile] = File(None)):
    """Upload a profile picture and set it on the caller's profile."""
    _validate_image(file, settings.MAX_PROFILE_IMAGE_BYTES)

    url = _save(file, _storage_name("profile", request.user.id, file.name))
    profile, _ = Profile.objects.get_or_create(user=request.user)
    profile.profile_image_url = url
    profile.save(update_fields=["profile_image_url", "updated_at"])

    logger.info(f"User {request.user.id} uploaded profile image {url}")
    return {"url": url}
