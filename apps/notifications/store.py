"""
Notification store
==================

Per-profile cache of notifications, kept in Django's cache framework so every
request (and the polling endpoint) sees the same list.

- refresh() replaces the cache with the database rows for the profile.
  A cache older than NOTIFICATIONS_REFRESH_INTERVAL is refreshed on read.
- add / mark_read / mark_all_read / remove change the cache first, then the
  database. If the database call fails, the cache is restored from the snapshot
  taken before the change and NotificationError is raised.
- unread_count is computed from the cache on every read.
"""

import logging
import time

from django.conf import settings
from django.core.cache import cache as default_cache
from django.utils import timezone

from .repository import NotificationRepository

logger = logging.getLogger(__name__)

TEMP_ID_PREFIX = 'tmp-'


class NotificationError(Exception):
    """A notification change could not be saved and was rolled back"""


def is_temporary_id(notification_id):
    return str(notification_id).startswith(TEMP_ID_PREFIX)


class NotificationStore:

    def __init__(self, profile, repository=None, cache=None, refresh_interval=None):
        self.profile = profile
        self.repository = repository or NotificationRepository()
        self.cache = cache or default_cache
        if refresh_interval is None:
            refresh_interval = settings.NOTIFICATIONS_REFRESH_INTERVAL
        self.refresh_interval = refresh_interval

    @property
    def cache_key(self):
        return f'notifications:{self.profile.pk}'

    # CACHE
    def _load(self):
        return self.cache.get(self.cache_key)

    def _save(self, items, fetched_at=None):
        entry = self._load() or {}
        if fetched_at is None:
            fetched_at = entry.get('fetched_at', 0)
        self.cache.set(self.cache_key, {'items': items, 'fetched_at': fetched_at}, timeout=None)

    def _items(self):
        entry = self._load()
        return list(entry['items']) if entry else []

    def is_stale(self):
        entry = self._load()
        if entry is None:
            return True
        return time.time() - entry['fetched_at'] >= self.refresh_interval

    @property
    def notifications(self):
        """Cached list, newest first; refreshed when stale"""
        if self.is_stale():
            self.refresh()
        return self._items()

    @property
    def unread_count(self):
        return sum(1 for n in self.notifications if not n['read'])

    def refresh(self):
        """
        Replace the cache with the database rows

        Returns:
            bool: False if the database could not be read (cache kept as is)
        """
        if self.profile is None or self.profile.pk is None:
            return False

        try:
            items = self.repository.list_for(self.profile)
        except Exception:
            logger.exception("Failed to fetch notifications for profile %s", self.profile.pk)
            return False

        self._save(items, fetched_at=time.time())
        return True

    def clear(self):
        """Forget the cached list (sign-out)"""
        self.cache.delete(self.cache_key)

    # MUTATIONS
    def _apply(self, change, backend_call, action):
        snapshot = self._items()
        self._save(change(snapshot))

        try:
            backend_call()
        except Exception as e:
            logger.exception("Failed to %s for profile %s", action, self.profile.pk)
            self._save(snapshot)
            raise NotificationError(f'Failed to {action}') from e

    def add(self, draft):
        """
        Add a notification for this profile

        Args:
            draft (dict): title, message, type, optional link

        Returns:
            dict: the temporary record shown until the refresh lands
        """
        record = {
            'id': f'{TEMP_ID_PREFIX}{int(time.time() * 1000)}',
            'title': draft['title'],
            'message': draft.get('message', ''),
            'type': draft.get('type', 'info'),
            'read': False,
            'link': draft.get('link') or '',
            'created_at': timezone.now().isoformat(),
        }

        self._apply(
            lambda items: [record] + items,
            lambda: self.repository.create(self.profile, draft),
            'create notification',
        )

        # Swap the temporary record for the saved one
        self.refresh()
        return record

    def mark_read(self, notification_id):
        notification_id = str(notification_id)

        def change(items):
            return [dict(n, read=True) if n['id'] == notification_id else n for n in items]

        def backend_call():
            if not is_temporary_id(notification_id):
                self.repository.mark_read(self.profile, notification_id)

        self._apply(change, backend_call, 'mark notification as read')

    def mark_all_read(self):
        self._apply(
            lambda items: [dict(n, read=True) for n in items],
            lambda: self.repository.mark_all_read(self.profile),
            'mark all notifications as read',
        )

    def remove(self, notification_id):
        notification_id = str(notification_id)

        def backend_call():
            if not is_temporary_id(notification_id):
                self.repository.delete(self.profile, notification_id)

        self._apply(
            lambda items: [n for n in items if n['id'] != notification_id],
            backend_call,
            'delete notification',
        )
