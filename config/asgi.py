"""
ASGI config for the meuapp API.

Works with any ASGI server (Daphne, Uvicorn). The store is bootstrapped
at import time, before the first request is served.
"""
import os

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

from django.core.asgi import get_asgi_application

application = get_asgi_application()

from config.urls import store

store.bootstrap()
