"""WSGI entrypoint for the cinema tickets API."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "cinema.settings")

application = get_wsgi_application()
