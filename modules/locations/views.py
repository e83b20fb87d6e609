"""
Locations API views.
"""
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema

from modules.assets.serializers import AssetSerializer

from .services import LocationService
from .serializers import LocationSerializer, LocationWriteSerializer


class LocationListCreateView(APIView):
    """List and create locations."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.location_service = LocationService()

    @extend_schema(
        tags=['Locations'],
        summary='List locations',
        responses={200: LocationSerializer(many=True)},
    )
    def get(self, request):
        locations = self.location_service.get_locations(request.user.id)
        return Response({
            'status': 200,
            'data': locations,
        })

    @extend_schema(
        tags=['Locations'],
        summary='Create location',
        request=LocationWriteSerializer,
        responses={201: LocationSerializer},
    )
    def post(self, request):
        serializer = LocationWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        location = self.location_service.create_location(
            request.user.id, serializer.validated_data['name']
        )
        return Response({
            'status': 201,
            'message': 'Location created.',
            'data': LocationSerializer(location).data,
        }, status=status.HTTP_201_CREATED)


class LocationDetailView(APIView):
    """Location detail operations."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.location_service = LocationService()

    @extend_schema(
        tags=['Locations'],
        summary='Get location',
        responses={200: LocationSerializer},
    )
    def get(self, request, location_id):
        location = self.location_service.get_location_by_id(request.user.id, location_id)
        return Response({
            'status': 200,
            'data': LocationSerializer(location).data,
        })

    @extend_schema(
        tags=['Locations'],
        summary='Rename location',
        request=LocationWriteSerializer,
        responses={200: LocationSerializer},
    )
    def put(self, request, location_id):
        serializer = LocationWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        location = self.location_service.update_location(
            request.user.id, location_id, serializer.validated_data['name']
        )
        return Response({
            'status': 200,
            'message': 'Location updated.',
            'data': LocationSerializer(location).data,
        })

    @extend_schema(
        tags=['Locations'],
        summary='Delete location',
    )
    def delete(self, request, location_id):
        self.location_service.delete_location(request.user.id, location_id)
        return Response({
            'status': 200,
            'message': 'Location deleted.',
        })


class LocationAssetsView(APIView):
    """Get the user's assets at a location."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.location_service = LocationService()

    @extend_schema(
        tags=['Locations'],
        summary='Get location assets',
    )
    def get(self, request, location_id):
        location, assets = self.location_service.get_location_assets(
            request.user.id, location_id
        )
        return Response({
            'status': 200,
            'data': {
                'location': LocationSerializer(location).data,
                'assets': AssetSerializer(assets, many=True).data,
            },
        })
