"""
Locations URL configuration.
"""
from django.urls import path

from .views import LocationListCreateView, LocationDetailView, LocationAssetsView

app_name = 'locations'

urlpatterns = [
    path('', LocationListCreateView.as_view(), name='location-list-create'),
    path('<str:location_id>/', LocationDetailView.as_view(), name='location-detail'),
    path('<str:location_id>/assets/', LocationAssetsView.as_view(), name='location-assets'),
]
