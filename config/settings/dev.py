"""
Django development settings.
"""
from .base import *  # noqa: F401, F403

DEBUG = True

# Additional development apps
INSTALLED_APPS += [  # noqa: F405
    'django_extensions',
]

# Development-specific middleware
MIDDLEWARE.insert(0, 'debug_toolbar.middleware.DebugToolbarMiddleware')  # noqa: F405
INSTALLED_APPS.insert(0, 'debug_toolbar')  # noqa: F405

# Debug toolbar settings
INTERNAL_IPS = ['127.0.0.1', 'localhost']

# Allow all hosts in development
ALLOWED_HOSTS = ['*']

# CORS allow all in development
CORS_ALLOW_ALL_ORIGINS = True

# Local memory cache in development; short-lived projections
CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
    }
}
CACHE_NAMESPACE = 'asset_app_dev'
PROJECTION_CACHE_TIMEOUT = 60

# Run image cleanup inline unless a worker is available
CELERY_TASK_ALWAYS_EAGER = config('CELERY_TASK_ALWAYS_EAGER', default=True, cast=bool)  # noqa: F405

# Show SQL queries in console
LOGGING['loggers']['django.db.backends'] = {  # noqa: F405
    'handlers': ['console'],
    'level': 'DEBUG',
    'propagate': False,
}
