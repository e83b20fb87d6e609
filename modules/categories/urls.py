"""
Categories URL configuration.
"""
from django.urls import path

from .views import (
    CategoryCreateView,
    CategoryDetailView,
    CategoryTreeView,
    CategoryFlatView,
    CategoryParentsView,
    CategoryChildrenView,
    CategoryAssetsView,
)

app_name = 'categories'

urlpatterns = [
    path('', CategoryCreateView.as_view(), name='category-create'),
    path('tree/', CategoryTreeView.as_view(), name='category-tree'),
    path('flat/', CategoryFlatView.as_view(), name='category-flat'),
    path('parents/', CategoryParentsView.as_view(), name='category-parents'),
    path('<str:category_id>/', CategoryDetailView.as_view(), name='category-detail'),
    path('<str:category_id>/children/', CategoryChildrenView.as_view(), name='category-children'),
    path('<str:category_id>/assets/', CategoryAssetsView.as_view(), name='category-assets'),
]
