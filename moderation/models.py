"""
Append-only audit log of moderator activity.
"""

from django.conf import settings
from django.db import models


class AdminAction(models.Model):
    """One moderation event. Rows are written once and never changed."""

    class ActionType(models.TextChoices):
        APPROVE_SPOT = "approve_spot", "Approve spot"
        REJECT_SPOT = "reject_spot", "Reject spot"
        EDIT_FEATURED_SPOT = "edit_featured_spot", "Edit featured spot"
        CREATE_FEATURED_SPOT = "create_featured_spot", "Create featured spot"

    class TargetType(models.TextChoices):
        COMMUNITY_SPOT = "community_spot", "Community spot"
        FEATURED_SPOT = "featured_spot", "Featured spot"

    admin = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="admin_actions",
    )
    action_type = models.CharField(max_length=30, choices=ActionType.choices)
    target_id = models.CharField(max_length=120)
    target_type = models.CharField(max_length=20, choices=TargetType.choices)
    details = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "admin_actions"
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["-created_at"], name="admin_actions_created_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.action_type} {self.target_type}:{self.target_id}"

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValueError("Admin actions are append-only and cannot be modified")
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValueError("Admin actions are append-only and cannot be deleted")
