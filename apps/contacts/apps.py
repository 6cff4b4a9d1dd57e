from django.apps import AppConfig


class ContactsConfig(AppConfig):
    """
    Accounts (customer organizations) and the contacts that work for them
    """
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.contacts'
    verbose_name = 'Contacts & Accounts'
