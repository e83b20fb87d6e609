"""
Locations module configuration.
"""
from django.apps import AppConfig


class LocationsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'modules.locations'
    verbose_name = 'Locations'
