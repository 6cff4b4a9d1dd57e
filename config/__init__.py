# ==============================================================================
# CRM PRO - CONFIG PACKAGE INITIALIZER
# ==============================================================================

# Import Celery app to ensure it's loaded when Django starts, so the
# notify-due-tasks beat job is registered with Django settings
from .celery import app as celery_app

__all__ = ('celery_app',)
