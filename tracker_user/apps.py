from django.apps import AppConfig


class TrackerUserConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'tracker_user'
    verbose_name = 'People'
