from django.apps import AppConfig


class LeadsConfig(AppConfig):
    """Prospects before they become contacts and deals"""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.leads'
    verbose_name = 'Leads'
