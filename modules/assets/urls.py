"""
Assets URL configuration.
"""
from django.urls import path

from .views import AssetListCreateView, AssetDetailView

app_name = 'assets'

urlpatterns = [
    path('', AssetListCreateView.as_view(), name='asset-list-create'),
    path('<str:asset_id>/', AssetDetailView.as_view(), name='asset-detail'),
]
