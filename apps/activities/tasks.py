import logging

from celery import shared_task
from django.utils import timezone

from apps.notifications.store import NotificationError
from .models import Task
from .services import notify_due_today

logger = logging.getLogger(__name__)


@shared_task
def notify_due_tasks():
    today = timezone.localdate()
    tasks = Task.objects.filter(
        due_date=today,
        assigned_to__isnull=False,
        assigned_to__enabled=True,
    ).exclude(status=Task.STATUS_COMPLETED).select_related('assigned_to')

    notifications_sent = 0

    for task in tasks:
        try:
            notify_due_today(task)
        except NotificationError:
            logger.warning("Could not send due-date reminder for task %s", task.pk)
            continue
        notifications_sent += 1

    return f'{notifications_sent} due-task notifications sent.'
