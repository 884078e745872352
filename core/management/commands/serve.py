"""
Django management command to start the application.

Locally this runs the development server on the configured port. On a
hosted platform the platform owns the listener and imports
`hoikushi.wsgi.app`, so nothing is bound here.
"""

import logging
from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Start the development server unless running on a hosted platform'

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            '--port',
            type=int,
            default=None,
            help='Port to listen on (default: settings.PORT / $PORT)',
        )
        parser.add_argument(
            '--noreload',
            action='store_true',
            help='Disable the auto-reloader',
        )

    def handle(self, *args, **options):
        """Bind the listener for local runs only."""
        if settings.IS_HOSTED:
            logger.info("Hosted deployment detected; the platform serves hoikushi.wsgi.app")
            self.stdout.write("Hosted deployment: not binding a port")
            return

        port = options['port'] or settings.PORT
        logger.info(f"Server started on http://localhost:{port}")
        self.stdout.write(self.style.SUCCESS(f"Server started on http://localhost:{port}"))

        call_command('runserver', str(port), use_reloader=not options['noreload'])
