"""
Spot admin configuration with Grappelli styling.

Community spot approve/reject actions go through the moderation service
so they are logged the same way as API moderation.
"""

from django.contrib import admin

from moderation.services import approve_spot, reject_spot
from spots.models import CommunitySpot, Favorite, FeaturedSpot, Profile

admin.site.site_header = "Oslo Bathing Spots"
admin.site.site_title = "Oslo Bathing Spots Admin"

ADMIN_REJECTION_REASON = "Rejected by moderator"


def approve_spots(modeladmin, request, queryset):
    """Approve selected pending spots."""
    approved = 0
    skipped = 0

    for spot in queryset:
        if approve_spot(spot.id, request.user):
            approved += 1
        else:
            skipped += 1

    modeladmin.message_user(request, f"Approved: {approved}, Skipped (not pending): {skipped}")
approve_spots.short_description = "Approve selected spots"


def reject_spots(modeladmin, request, queryset):
    """Reject selected pending spots with a generic reason."""
    rejected = 0
    skipped = 0

    for spot in queryset:
        if reject_spot(spot.id, request.user, ADMIN_REJECTION_REASON):
            rejected += 1
        else:
            skipped += 1

    modeladmin.message_user(request, f"Rejected: {rejected}, Skipped (not pending): {skipped}")
reject_spots.short_description = "Reject selected spots"


@admin.register(FeaturedSpot)
class FeaturedSpotAdmin(admin.ModelAdmin):
    list_display = ['id', 'name', 'location', 'water_quality', 'crowd_level', 'sort_order', 'is_active']
    list_filter = ['is_active', 'water_quality', 'crowd_level', 'party_level']
    list_editable = ['sort_order', 'is_active']
    search_fields = ['id', 'name', 'location']
    readonly_fields = ['created_at', 'updated_at']
    ordering = ['sort_order', 'name']

    fieldsets = (
        ('Spot', {
            'fields': ('id', 'name', 'location', 'description', 'image_url')
        }),
        ('Coordinates', {
            'fields': ('latitude', 'longitude')
        }),
        ('Conditions', {
            'fields': (
                'water_temperature', 'water_quality', 'crowd_level', 'party_level',
                'byob_friendly', 'sunset_views', 'last_updated', 'facilities', 'vibes',
            )
        }),
        ('Listing', {
            'fields': ('sort_order', 'is_active')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )


@admin.register(CommunitySpot)
class CommunitySpotAdmin(admin.ModelAdmin):
    list_display = ['id', 'title', 'address', 'user', 'status', 'created_at', 'approved_at']
    list_filter = ['status', 'created_at']
    search_fields = ['title', 'address', 'user__username', 'user__email']
    readonly_fields = ['status', 'approved_at', 'approved_by', 'created_at', 'updated_at']
    ordering = ['-created_at']
    actions = [approve_spots, reject_spots]


@admin.register(Favorite)
class FavoriteAdmin(admin.ModelAdmin):
    list_display = ['id', 'user', 'spot_id', 'spot_name', 'created_at']
    search_fields = ['spot_id', 'spot_name', 'user__username']
    ordering = ['-created_at']


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = ['id', 'user', 'name', 'is_admin', 'updated_at']
    list_filter = ['is_admin']
    search_fields = ['name', 'user__username', 'user__email']
