import logging

from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Bootstraps the store and serves the API on the configured port.'

    def handle(self, *args, **options):
        from config.urls import store

        if store.bootstrap():
            self.stdout.write(self.style.SUCCESS(f'Store ready: {store.name}'))
        else:
            self.stdout.write(self.style.ERROR(f'Store unavailable: {store.name}. Serving anyway.'))

        addrport = f'{settings.SERVER_HOST}:{settings.SERVER_PORT}'
        logger.info(f"Server running at http://{addrport}")
        call_command('runserver', addrport, use_reloader=False)
