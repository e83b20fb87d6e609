"""
Shared DRF pagination.
"""
from django.core.paginator import Page
from rest_framework.exceptions import NotFound
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class StandardPagination(PageNumberPagination):
    """Page/limit pagination wrapped in the standard response envelope."""

    page_size = 10
    page_size_query_param = 'limit'
    max_page_size = 100
    results_key = 'items'

    def get_page_number(self, request, paginator):
        # malformed or non-positive page numbers fall back to the first page
        try:
            number = int(request.query_params.get(self.page_query_param, 1))
        except (TypeError, ValueError):
            number = 1
        return max(number, 1)

    def paginate_queryset(self, queryset, request, view=None):
        """Pages past the end come back empty with the real totals."""
        try:
            return super().paginate_queryset(queryset, request, view=view)
        except NotFound:
            paginator = self.django_paginator_class(queryset, self.get_page_size(request))
            self.page = Page([], self.get_page_number(request, paginator), paginator)
            self.request = request
            return []

    def get_paginated_response(self, data):
        return Response({
            'status': 200,
            'data': {
                self.results_key: data,
                'pagination': {
                    'current_page': self.page.number,
                    'total_items': self.page.paginator.count,
                    'total_pages': self.page.paginator.num_pages,
                    'limit': self.page.paginator.per_page,
                },
            },
        })
