"""Django signals for the spots app."""

import logging

logger = logging.getLogger(__name__)


def user_post_save(sender, instance, created, **kwargs):
    """
    Create an empty profile for every new user.

    Admin status and display name live on the profile, so moderation
    lookups can rely on it existing for users created through any path.
    """
    if not created:
        return

    from spots.models import Profile

    profile, was_created = Profile.objects.get_or_create(user=instance)
    if was_created:
        logger.debug(f"Created profile for user {instance.pk}")
