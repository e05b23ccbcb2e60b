from django.apps import AppConfig


class SpotsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'spots'

    def ready(self):
        from django.conf import settings
        from django.db.models.signals import post_save
        from spots.signals import user_post_save

        post_save.connect(user_post_save, sender=settings.AUTH_USER_MODEL)
