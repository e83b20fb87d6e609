"""
Assets module configuration.
"""
from django.apps import AppConfig


class AssetsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'modules.assets'
    verbose_name = 'Assets'
