from django.apps import AppConfig


class NotificationsConfig(AppConfig):
    """Per-user notifications, their cache and the polling API"""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.notifications'
    verbose_name = 'Notifications'
