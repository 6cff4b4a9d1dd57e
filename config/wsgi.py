# WSGI entry point for CRM Pro
#
# Each worker process serves requests synchronously; every request gets its own
# SessionStore from SessionProfileMiddleware. Several workers need the shared
# Redis cache (the default with DEBUG off) so they see the same notifications.
#
# Run: gunicorn config.wsgi:application --bind 0.0.0.0:8000 --workers 4
# ==============================================================================

import os
from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

application = get_wsgi_application()
