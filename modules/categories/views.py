"""
Categories API views.
"""
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema

from modules.assets.serializers import AssetSerializer

from .services import CategoryService
from .serializers import (
    CategorySerializer,
    CategoryCreateSerializer,
    CategoryUpdateSerializer,
    CategoryTreeSerializer,
)


class CategoryCreateView(APIView):
    """Create categories."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.category_service = CategoryService()

    @extend_schema(
        tags=['Categories'],
        summary='Create category',
        request=CategoryCreateSerializer,
        responses={201: CategorySerializer},
    )
    def post(self, request):
        """Create a custom category, optionally under a parent."""
        serializer = CategoryCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        category = self.category_service.create_category(
            user_id=request.user.id,
            **serializer.validated_data
        )

        return Response({
            'status': 201,
            'message': 'Category created.',
            'data': CategorySerializer(category).data,
        }, status=status.HTTP_201_CREATED)


class CategoryDetailView(APIView):
    """Category detail operations."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.category_service = CategoryService()

    @extend_schema(
        tags=['Categories'],
        summary='Get category',
        responses={200: CategorySerializer},
    )
    def get(self, request, category_id):
        category = self.category_service.get_category_by_id(request.user.id, category_id)
        return Response({
            'status': 200,
            'data': CategorySerializer(category).data,
        })

    @extend_schema(
        tags=['Categories'],
        summary='Update category',
        request=CategoryUpdateSerializer,
        responses={200: CategorySerializer},
    )
    def put(self, request, category_id):
        """Replace name and parent of a custom category."""
        serializer = CategoryUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        category = self.category_service.update_category(
            user_id=request.user.id,
            category_id=category_id,
            **serializer.validated_data
        )

        return Response({
            'status': 200,
            'message': 'Category updated.',
            'data': CategorySerializer(category).data,
        })

    @extend_schema(
        tags=['Categories'],
        summary='Delete category',
    )
    def delete(self, request, category_id):
        """Delete a custom category (soft delete)."""
        self.category_service.delete_category(request.user.id, category_id)
        return Response({
            'status': 200,
            'message': 'Category deleted.',
        })


class CategoryTreeView(APIView):
    """Get category tree structure."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.category_service = CategoryService()

    @extend_schema(
        tags=['Categories'],
        summary='Get category tree',
        responses={200: CategoryTreeSerializer(many=True)},
    )
    def get(self, request):
        tree = self.category_service.get_category_tree(request.user.id)
        return Response({
            'status': 200,
            'data': tree,
        })


class CategoryFlatView(APIView):
    """Get every visible category as a single list."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.category_service = CategoryService()

    @extend_schema(
        tags=['Categories'],
        summary='Get flat category list',
        responses={200: CategorySerializer(many=True)},
    )
    def get(self, request):
        categories = self.category_service.get_category_flat(request.user.id)
        return Response({
            'status': 200,
            'data': categories,
        })


class CategoryParentsView(APIView):
    """Get top-level categories."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.category_service = CategoryService()

    @extend_schema(
        tags=['Categories'],
        summary='Get parent categories',
        responses={200: CategorySerializer(many=True)},
    )
    def get(self, request):
        parents = self.category_service.get_parent_categories(request.user.id)
        return Response({
            'status': 200,
            'data': CategorySerializer(parents, many=True).data,
        })


class CategoryChildrenView(APIView):
    """Get subcategories of a category."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.category_service = CategoryService()

    @extend_schema(
        tags=['Categories'],
        summary='Get subcategories',
        responses={200: CategorySerializer(many=True)},
    )
    def get(self, request, category_id):
        children = self.category_service.get_child_categories(category_id, request.user.id)
        return Response({
            'status': 200,
            'data': CategorySerializer(children, many=True).data,
        })


class CategoryAssetsView(APIView):
    """Get the user's assets in a category."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.category_service = CategoryService()

    @extend_schema(
        tags=['Categories'],
        summary='Get category assets',
    )
    def get(self, request, category_id):
        category, assets = self.category_service.get_category_assets(
            request.user.id, category_id
        )
        return Response({
            'status': 200,
            'data': {
                'category': CategorySerializer(category).data,
                'assets': AssetSerializer(assets, many=True).data,
            },
        })
