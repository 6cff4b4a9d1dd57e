"""
Database access for notifications

The store talks to the database only through this class, so tests can swap in
a repository that fails or records calls.
"""

from .models import Notification


def to_record(notification):
    """Plain dict kept in the notification cache"""
    return {
        'id': str(notification.pk),
        'title': notification.title,
        'message': notification.message,
        'type': notification.type,
        'read': notification.read,
        'link': notification.link,
        'created_at': notification.created_at.isoformat(),
    }


class NotificationRepository:

    def list_for(self, profile):
        queryset = Notification.objects.filter(user=profile).order_by('-created_at', '-id')
        return [to_record(n) for n in queryset]

    def create(self, profile, draft):
        return Notification.objects.create(
            user=profile,
            title=draft['title'],
            message=draft.get('message', ''),
            type=draft.get('type', 'info'),
            link=draft.get('link') or '',
            read=False,
        )

    def mark_read(self, profile, notification_id):
        Notification.objects.filter(user=profile, pk=notification_id).update(read=True)

    def mark_all_read(self, profile):
        Notification.objects.filter(user=profile, read=False).update(read=True)

    def delete(self, profile, notification_id):
        Notification.objects.filter(user=profile, pk=notification_id).delete()
