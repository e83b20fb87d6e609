"""
Asset list filters.
"""
import django_filters
from django.db.models import Q

from .models import AssetModel

SORT_FIELDS = ('name', 'price', 'created_at', 'purchase_date')
SORT_ORDERS = ('asc', 'desc')


class AssetFilter(django_filters.FilterSet):
    """Query parameters accepted by the asset list."""

    search = django_filters.CharFilter(method='filter_search')
    category_id = django_filters.UUIDFilter(field_name='category_id')
    location_id = django_filters.UUIDFilter(field_name='location_id')
    condition = django_filters.ChoiceFilter(choices=AssetModel.Condition.choices)
    min_price = django_filters.NumberFilter(field_name='price', lookup_expr='gte', min_value=0)
    max_price = django_filters.NumberFilter(field_name='price', lookup_expr='lte', min_value=0)

    class Meta:
        model = AssetModel
        fields = ['search', 'category_id', 'location_id', 'condition', 'min_price', 'max_price']

    def filter_search(self, queryset, name, value):
        value = value.strip()
        if not value:
            return queryset
        return queryset.filter(
            Q(name__icontains=value)
            | Q(description__icontains=value)
            | Q(serial_number__icontains=value)
        )


def ordering_for(sort_by: str = None, sort_order: str = None) -> list:
    """Order-by clause for the list; unknown values fall back to newest first."""
    sort_by = sort_by or 'created_at'
    sort_order = sort_order or 'desc'
    if sort_by not in SORT_FIELDS or sort_order not in SORT_ORDERS:
        return ['-created_at', '-id']
    prefix = '-' if sort_order == 'desc' else ''
    return [f'{prefix}{sort_by}', f'{prefix}id']
