"""
Django test settings.
"""
from .base import *  # noqa: F401, F403

DEBUG = False

# Use SQLite for faster tests
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

# Local memory cache in tests
CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
    }
}

# Celery always eager in tests
CELERY_TASK_ALWAYS_EAGER = True
CELERY_TASK_EAGER_PROPAGATES = True

# Isolated projection keys and a deterministic public URL for images
CACHE_NAMESPACE = 'asset_app_test'
AWS_STORAGE_BUCKET_NAME = 'test-bucket'
AWS_S3_PUBLIC_URL = 'http://storage.test'

# Password hasher for faster tests
PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

# Disable logging in tests
LOGGING = {}
