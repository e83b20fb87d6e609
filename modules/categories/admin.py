"""
Categories admin configuration.
"""
from django.contrib import admin

from .models import CategoryModel


class ScopeListFilter(admin.SimpleListFilter):
    """System rows have no owner, user rows do."""

    title = 'scope'
    parameter_name = 'scope'

    def lookups(self, request, model_admin):
        return [('system', 'System'), ('user', 'User')]

    def queryset(self, request, queryset):
        if self.value() == 'system':
            return queryset.filter(owner__isnull=True)
        if self.value() == 'user':
            return queryset.filter(owner__isnull=False)
        return queryset


class ChildInline(admin.TabularInline):
    model = CategoryModel
    fk_name = 'parent'
    fields = ['name', 'owner', 'is_default', 'deleted_at']
    raw_id_fields = ['owner']
    extra = 0


@admin.register(CategoryModel)
class CategoryAdmin(admin.ModelAdmin):
    """Admin for categories, including soft-deleted rows."""

    list_display = ['full_path', 'owner', 'is_default', 'level', 'created_at', 'deleted_at']
    list_filter = [ScopeListFilter, 'is_default', ('parent', admin.EmptyFieldListFilter)]
    list_select_related = ['parent', 'owner']
    search_fields = ['name', 'parent__name', 'owner__email']
    readonly_fields = ['id', 'full_path', 'created_at', 'updated_at']
    raw_id_fields = ['parent', 'owner']
    ordering = ['-is_default', 'name']
    inlines = [ChildInline]

    fieldsets = (
        (None, {
            'fields': ('name', 'parent', 'owner', 'is_default', 'full_path')
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
        return CategoryModel.all_objects.select_related('parent', 'owner')
