#!/usr/bin/env python
# CRM Pro management script
#
# - python manage.py migrate            # Create the CRM tables
# - python manage.py createsuperuser    # First System Admin (metadata role set automatically)
# - python manage.py runserver
# - python manage.py test apps          # Run the test suite
#
# Background jobs run separately:
# - celery -A config worker -l info
# - celery -A config beat -l info
# ==============================================================================

import os
import sys


def main():
    """Run administrative tasks with config.settings"""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Are you sure it's installed and "
            "available on your PYTHONPATH environment variable? Did you "
            "forget to activate a virtual environment?"
        ) from exc

    execute_from_command_line(sys.argv)


if __name__ == '__main__':
    main()
