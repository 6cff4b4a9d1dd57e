from django.conf import settings

from apps.accounts.decorators import get_current_user
from apps.notifications.store import NotificationStore
from .navigation import QUICK_ADD_ITEMS, compose_menu


def navigation(request):
    """
    Template variables for the layout:
    - current_profile: signed-in CRM profile (or None)
    - menu_items: sidebar entries the profile's role may see
    - quick_add_items: create shortcuts the role may use
    - unread_notifications: badge count
    """
    profile = get_current_user(request)
    if profile is None:
        return {'current_profile': None, 'menu_items': [], 'quick_add_items': [], 'unread_notifications': 0}

    unread = 0
    if profile.pk is not None:
        unread = NotificationStore(profile).unread_count

    return {
        'current_profile': profile,
        'menu_items': compose_menu(profile.role),
        'quick_add_items': compose_menu(profile.role, QUICK_ADD_ITEMS),
        'unread_notifications': unread,
        'notifications_refresh_interval': settings.NOTIFICATIONS_REFRESH_INTERVAL,
    }
