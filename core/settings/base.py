from pathlib import Path

from environs import Env

env = Env()
env.read_env(recurse=False)

BASE_DIR = Path(__file__).resolve().parent.parent.parent

SECRET_KEY = env.str('SECRET_KEY', 'django-insecure-4r!q7w0c$2k@h9n^x8e)v3p+j1m5s6z(t0b&y_d4g7f=u2i8a')

DEBUG = env.bool('DEBUG', False)

ALLOWED_HOSTS = env.list('ALLOWED_HOSTS', [])

INSTALLED_APPS = [
    'integrator',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
]

ROOT_URLCONF = 'core.urls'

WSGI_APPLICATION = 'core.wsgi.application'

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = False
USE_TZ = True

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(asctime)s %(levelname)s %(name)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'loggers': {
        'integrator': {
            'handlers': ['console'],
            'level': env.str('LOG_LEVEL', 'INFO'),
        },
    },
}

# Celery
CELERY_BROKER_URL = env.str('CELERY_BROKER_URL', 'redis://localhost:6379/0')
CELERY_RESULT_BACKEND = CELERY_BROKER_URL

# Search index (Algolia)
ALGOLIA_APPLICATION_ID = env.str('ALGOLIA_APPLICATION_ID', '')
ALGOLIA_ADMIN_API_KEY = env.str('ALGOLIA_ADMIN_API_KEY', '')
ALGOLIA_PRODUCTS_INDEX = env.str('ALGOLIA_PRODUCTS_INDEX', 'products')
ALGOLIA_CATEGORIES_INDEX = env.str('ALGOLIA_CATEGORIES_INDEX', 'categories')

# Commerce platform API
COMMERCE_API_BASE_URL = env.str('COMMERCE_API_BASE_URL', 'https://api.chec.io/v1')
COMMERCE_API_KEY = env.str('COMMERCE_API_KEY', '')
COMMERCE_API_PAGE_SIZE = env.int('COMMERCE_API_PAGE_SIZE', 200)

# Upper bound on threads used to fan out one page of upserts
SYNC_MAX_WORKERS = env.int('SYNC_MAX_WORKERS', 32)

# Sync providers, swap via env or override in dev.py/prod.py
SYNC_SOURCE_CLASS = env.str('SYNC_SOURCE_CLASS', 'integrator.sources.commerce_source.CommerceApiSource')
SYNC_INDEX_CLIENT_CLASS = env.str('SYNC_INDEX_CLIENT_CLASS', 'integrator.clients.algolia_client.AlgoliaClient')
