from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class AccountsConfig(AppConfig):
    """
    Identities, CRM profiles, roles and the per-request session store

    Signals registered in ready():
    - user_logged_in → resolve the CRM profile
    - user_logged_out → clear the session and its notification cache
    """

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.accounts'
    verbose_name = _('Accounts')

    def ready(self):
        # Import signals module to register signal handlers
        import apps.accounts.signals  # noqa: F401
