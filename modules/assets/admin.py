"""
Assets admin configuration.
"""
from django.contrib import admin

from .models import AssetModel


@admin.register(AssetModel)
class AssetAdmin(admin.ModelAdmin):
    list_display = ['name', 'user', 'category', 'location', 'condition', 'price', 'created_at', 'deleted_at']
    list_filter = ['condition', 'created_at']
    list_select_related = ['user', 'category', 'location']
    search_fields = ['name', 'serial_number', 'user__email']
    readonly_fields = ['id', 'created_at', 'updated_at']
    raw_id_fields = ['user', 'category', 'location']

    fieldsets = (
        (None, {
            'fields': ('name', 'description', 'user', 'category', 'location')
        }),
        ('Details', {
            'fields': ('price', 'condition', 'serial_number', 'purchase_date', 'warranty', 'image')
        }),
        ('Soft Delete', {
            'fields': ('deleted_at',)
        }),
        ('Info', {
            'fields': ('id', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def get_queryset(self, request):
        return AssetModel.all_objects.select_related('user', 'category', 'location')
