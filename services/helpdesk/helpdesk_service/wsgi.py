"""WSGI config for the helpdesk service."""
import os

from django.conf import settings
from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "helpdesk_service.settings")

application = get_wsgi_application()

if settings.BOOTSTRAP_ON_STARTUP:
    from bootstrap.orchestrator import init

    init()
