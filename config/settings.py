"""
Django settings for the meuapp API.

Values that differ between machines come from environment variables; the
listen address is fixed.
"""
import os
from pathlib import Path

from .database import get_database_config

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_flag(name: str, default: str = 'false') -> bool:
    return os.getenv(name, default).lower() in ('1', 'true', 'yes')


SECRET_KEY = os.getenv('DJANGO_SECRET_KEY', 'django-insecure-meuapp-dev-key')
DEBUG = _env_flag('DJANGO_DEBUG')
ALLOWED_HOSTS = os.getenv('DJANGO_ALLOWED_HOSTS', 'localhost,127.0.0.1').split(',')

INSTALLED_APPS = [
    'ninja',
    'apps.core',
    'apps.usuarios',
    'apps.tarefas',
]

MIDDLEWARE = [
    'apps.core.middleware.RequestLogMiddleware',
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
]

ROOT_URLCONF = 'config.urls'
ASGI_APPLICATION = 'config.asgi.application'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {},
    },
]

# =============================================================================
# Store
# =============================================================================

DATABASES = {
    'default': get_database_config(BASE_DIR),
}
DEFAULT_AUTO_FIELD = 'django.db.models.AutoField'

# Refuse to start when the store cannot be opened. Off by default: the
# process keeps serving and requests fail individually with 500.
STORE_FAIL_FAST = _env_flag('STORE_FAIL_FAST')

# =============================================================================
# Server
# =============================================================================

SERVER_HOST = '127.0.0.1'
SERVER_PORT = 3000

LANGUAGE_CODE = 'pt-br'
TIME_ZONE = 'UTC'
USE_I18N = False
USE_TZ = True

# =============================================================================
# Logging
# =============================================================================

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'standard': {
            'format': '%(asctime)s %(levelname)s [%(name)s] %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'standard',
        },
    },
    'loggers': {
        'apps': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
        'django': {
            'handlers': ['console'],
            'level': 'WARNING',
        },
    },
}
