"""
Celery application for the asset tracker.
"""
import os

from celery import Celery

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.dev')

app = Celery('asset_tracker')

# Read CELERY_* settings from Django settings
app.config_from_object('django.conf:settings', namespace='CELERY')

# Load tasks.py from every installed app
app.autodiscover_tasks()
