from django.apps import AppConfig


class CoreConfig(AppConfig):
    """
    Configuration for Core application

    This app contains:
        - Public home page and dashboard
        - Reports and their Excel/CSV export
        - Organization settings (single row)
        - Navigation menu and shared entity-screen helpers
    """
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.core'
    verbose_name = 'Core'
