"""
Locations admin configuration.
"""
from django.contrib import admin

from modules.categories.admin import ScopeListFilter

from .models import LocationModel


@admin.register(LocationModel)
class LocationAdmin(admin.ModelAdmin):
    list_display = ['name', 'owner', 'is_default', 'created_at', 'deleted_at']
    list_filter = [ScopeListFilter, 'is_default']
    list_select_related = ['owner']
    search_fields = ['name', 'owner__email']
    readonly_fields = ['id', 'created_at', 'updated_at']
    raw_id_fields = ['owner']
    ordering = ['-is_default', 'name']

    def get_queryset(self, request):
        return LocationModel.all_objects.select_related('owner')
