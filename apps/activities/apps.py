from django.apps import AppConfig


class ActivitiesConfig(AppConfig):
    """
    Tasks and communications

    Tasks can be related to a lead, contact, deal or account. Assigning a task
    notifies the assignee, and a daily Celery job reminds assignees of tasks due today.
    """
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.activities'
    verbose_name = 'Activities'
