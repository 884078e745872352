"""
WSGI entrypoint.

Hosted platforms import `app`; local development goes through
`manage.py serve` instead.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'hoikushi.settings')

application = get_wsgi_application()

# Alias for platforms that look for an `app` handler
app = application
