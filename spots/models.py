"""
Spot record store.

Two persisted shapes: admin-curated featured spots and user-submitted
community spots. Favorites and profiles hang off the Django user.
"""

from django.conf import settings
from django.db import models
from django.utils.text import slugify


class WaterQuality(models.TextChoices):
    EXCELLENT = "Excellent", "Excellent"
    GOOD = "Good", "Good"
    FAIR = "Fair", "Fair"
    POOR = "Poor", "Poor"


class CrowdLevel(models.TextChoices):
    LOW = "Low", "Low"
    MODERATE = "Moderate", "Moderate"
    HIGH = "High", "High"


class PartyLevel(models.TextChoices):
    QUIET = "Quiet", "Quiet"
    CHILL = "Chill", "Chill"
    PARTY_FRIENDLY = "Party-Friendly", "Party-Friendly"


class FeaturedSpot(models.Model):
    """
    Admin-curated bathing spot with full metadata.

    The primary key is a slug (e.g. 'huk') so curated spots keep stable,
    readable identifiers in URLs and favorites.
    """

    id = models.SlugField(max_length=100, primary_key=True, blank=True)
    name = models.CharField(max_length=200)
    location = models.CharField(max_length=255, help_text="Area text (e.g., 'Bygdøy, Oslo')")
    description = models.TextField(blank=True)

    latitude = models.DecimalField(max_digits=9, decimal_places=6)
    longitude = models.DecimalField(max_digits=9, decimal_places=6)

    image_url = models.CharField(max_length=500, blank=True)
    water_temperature = models.FloatField(default=18.0)
    water_quality = models.CharField(max_length=20, choices=WaterQuality.choices, default=WaterQuality.GOOD)
    crowd_level = models.CharField(max_length=20, choices=CrowdLevel.choices, default=CrowdLevel.MODERATE)
    party_level = models.CharField(max_length=20, choices=PartyLevel.choices, default=PartyLevel.CHILL)
    byob_friendly = models.BooleanField(default=False)
    sunset_views = models.BooleanField(default=False)
    last_updated = models.CharField(max_length=100, blank=True, help_text="Display text for the last reading")
    facilities = models.JSONField(default=list, blank=True)
    vibes = models.JSONField(default=list, blank=True)

    sort_order = models.IntegerField(default=0)
    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "featured_spots"
        ordering = ["sort_order", "name"]
        indexes = [
            models.Index(fields=["is_active", "sort_order"], name="featured_active_sort_idx"),
        ]

    def __str__(self) -> str:
        return self.name

    def save(self, *args, **kwargs):
        """Auto-generate slug id if not provided."""
        if not self.id and self.name:
            self.id = slugify(self.name)
        super().save(*args, **kwargs)


class CommunitySpot(models.Model):
    """User-submitted bathing spot, visible publicly only once approved."""

    class Status(models.TextChoices):
        PENDING = "pending", "Pending"
        APPROVED = "approved", "Approved"
        REJECTED = "rejected", "Rejected"

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="community_spots",
    )
    title = models.CharField(max_length=200)
    address = models.CharField(max_length=255)
    description = models.TextField()

    latitude = models.DecimalField(max_digits=9, decimal_places=6)
    longitude = models.DecimalField(max_digits=9, decimal_places=6)

    main_image_url = models.CharField(max_length=500)
    additional_images = models.JSONField(default=list, blank=True)

    status = models.CharField(max_length=20, choices=Status.choices, default=Status.PENDING)
    rejection_reason = models.TextField(blank=True)
    approved_at = models.DateTimeField(null=True, blank=True)
    approved_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="approved_spots",
    )

    # Optional details; unset values fall back to listing defaults
    water_temperature = models.FloatField(null=True, blank=True)
    water_quality = models.CharField(max_length=20, choices=WaterQuality.choices, blank=True)
    crowd_level = models.CharField(max_length=20, choices=CrowdLevel.choices, blank=True)
    party_level = models.CharField(max_length=20, choices=PartyLevel.choices, blank=True)
    byob_friendly = models.BooleanField(null=True, blank=True)
    sunset_views = models.BooleanField(null=True, blank=True)
    facilities = models.JSONField(null=True, blank=True)
    vibes = models.JSONField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "user_spots"
        indexes = [
            models.Index(fields=["status", "approved_at"], name="user_spots_status_approved_idx"),
            models.Index(fields=["status", "created_at"], name="user_spots_status_created_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.title} ({self.status})"

    @property
    def unified_id(self) -> str:
        """Identifier used by the unified listing and favorites."""
        return f"community-{self.id}"


class Favorite(models.Model):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="favorites",
    )
    # Unified id: featured slug or 'community-<id>'
    spot_id = models.CharField(max_length=120)
    spot_name = models.CharField(max_length=200, blank=True)
    water_temperature = models.FloatField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "favorites"
        constraints = [
            models.UniqueConstraint(fields=["user", "spot_id"], name="unique_user_favorite"),
        ]

    def __str__(self) -> str:
        return f"{self.user} ♥ {self.spot_name or self.spot_id}"


class Profile(models.Model):
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="profile",
    )
    name = models.CharField(max_length=150, blank=True)
    profile_image_url = models.CharField(max_length=500, blank=True)
    is_admin = models.BooleanField(default=False)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "profiles"

    def __str__(self) -> str:
        return self.name or str(self.user)
