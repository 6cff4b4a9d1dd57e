# Celery runs the CRM's background jobs
#
# - Task due-date reminders (notifications)
#
# Start worker: celery -A config worker -l info
# Start beat: celery -A config beat -l info
# ==============================================================================

import os
from celery import Celery
from celery.schedules import crontab

# Set the default Django settings module for Celery
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

app = Celery('crmpro')

# All settings prefixed with 'CELERY_' will be used
# Example: CELERY_BROKER_URL, CELERY_RESULT_BACKEND
app.config_from_object('django.conf:settings', namespace='CELERY')

# Looks for tasks.py file in each installed app
app.autodiscover_tasks()


# CELERY BEAT SCHEDULE (Periodic Tasks)
app.conf.beat_schedule = {
    # Remind assignees about tasks due today, every morning at 8 AM
    'notify-due-tasks': {
        'task': 'apps.activities.tasks.notify_due_tasks',
        'schedule': crontab(hour=8, minute=0),
    },
}

