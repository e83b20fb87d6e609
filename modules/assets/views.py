"""
Assets API views.
"""
from rest_framework import status
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema, OpenApiParameter

from shared.pagination import StandardPagination

from .filters import SORT_FIELDS, SORT_ORDERS
from .services import AssetService
from .serializers import AssetSerializer, AssetCreateSerializer, AssetUpdateSerializer


class AssetPagination(StandardPagination):
    results_key = 'assets'


class AssetListCreateView(APIView):
    """List and create assets."""

    parser_classes = [MultiPartParser, FormParser, JSONParser]

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.asset_service = AssetService()

    @extend_schema(
        tags=['Assets'],
        summary='List assets',
        parameters=[
            OpenApiParameter(name='page', type=int, required=False),
            OpenApiParameter(name='limit', type=int, required=False, description='Max 100'),
            OpenApiParameter(name='search', type=str, required=False,
                             description='Matches name, description or serial number'),
            OpenApiParameter(name='category_id', type=str, required=False),
            OpenApiParameter(name='location_id', type=str, required=False),
            OpenApiParameter(name='condition', type=str, required=False,
                             enum=['new', 'good', 'fair', 'poor']),
            OpenApiParameter(name='min_price', type=float, required=False),
            OpenApiParameter(name='max_price', type=float, required=False),
            OpenApiParameter(name='sort_by', type=str, required=False, enum=list(SORT_FIELDS)),
            OpenApiParameter(name='sort_order', type=str, required=False, enum=list(SORT_ORDERS)),
        ],
        responses={200: AssetSerializer(many=True)},
    )
    def get(self, request):
        assets = self.asset_service.list_assets(request.user.id, request.query_params.dict())

        paginator = AssetPagination()
        page = paginator.paginate_queryset(assets, request, view=self)
        return paginator.get_paginated_response(AssetSerializer(page, many=True).data)

    @extend_schema(
        tags=['Assets'],
        summary='Create asset',
        request=AssetCreateSerializer,
        responses={201: AssetSerializer},
    )
    def post(self, request):
        serializer = AssetCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = dict(serializer.validated_data)
        image = data.pop('image', None)
        asset = self.asset_service.create_asset(request.user.id, data, image=image)

        return Response({
            'status': 201,
            'message': 'Asset created.',
            'data': AssetSerializer(asset).data,
        }, status=status.HTTP_201_CREATED)


class AssetDetailView(APIView):
    """Asset detail operations."""

    parser_classes = [MultiPartParser, FormParser, JSONParser]

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.asset_service = AssetService()

    @extend_schema(
        tags=['Assets'],
        summary='Get asset',
        responses={200: AssetSerializer},
    )
    def get(self, request, asset_id):
        asset = self.asset_service.get_asset(request.user.id, asset_id)
        return Response({
            'status': 200,
            'data': AssetSerializer(asset).data,
        })

    @extend_schema(
        tags=['Assets'],
        summary='Update asset',
        request=AssetUpdateSerializer,
        responses={200: AssetSerializer},
    )
    def put(self, request, asset_id):
        serializer = AssetUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = dict(serializer.validated_data)
        image = data.pop('image', None)
        asset = self.asset_service.update_asset(request.user.id, asset_id, data, image=image)

        return Response({
            'status': 200,
            'message': 'Asset updated.',
            'data': AssetSerializer(asset).data,
        })

    @extend_schema(
        tags=['Assets'],
        summary='Update asset',
        request=AssetUpdateSerializer,
        responses={200: AssetSerializer},
    )
    def patch(self, request, asset_id):
        return self.put(request, asset_id)

    @extend_schema(
        tags=['Assets'],
        summary='Delete asset',
    )
    def delete(self, request, asset_id):
        self.asset_service.delete_asset(request.user.id, asset_id)
        return Response({
            'status': 200,
            'message': 'Asset deleted.',
        })
