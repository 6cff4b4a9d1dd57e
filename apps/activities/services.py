"""
Task notifications

Both the task views and the daily reminder job notify through NotificationStore,
so the assignee's cached list picks the new notification up at once.
"""
import logging

from django.urls import reverse

from apps.notifications.store import NotificationStore

logger = logging.getLogger(__name__)


def notify_assignee(task):
    """
    Tell task.assigned_to about a newly assigned task

    Raises:
        NotificationError: if the notification could not be saved
    """
    if task.assigned_to is None:
        return None

    due = f" (due {task.due_date.isoformat()})" if task.due_date else ''
    draft = {
        'title': 'New task assigned',
        'message': f'You have been assigned "{task.title}"{due}',
        'type': 'info',
        'link': reverse('activities:task_list'),
    }
    logger.info("Notifying profile %s about task %s", task.assigned_to_id, task.pk)
    return NotificationStore(task.assigned_to).add(draft)


def notify_due_today(task):
    draft = {
        'title': 'Task due today',
        'message': f'"{task.title}" is due today',
        'type': 'warning',
        'link': reverse('activities:task_list'),
    }
    return NotificationStore(task.assigned_to).add(draft)
