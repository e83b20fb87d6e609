"""
Locations serializers.
"""
from rest_framework import serializers

from .models import LocationModel


class LocationSerializer(serializers.ModelSerializer):
    user_id = serializers.UUIDField(source='owner_id', read_only=True, allow_null=True)
    is_custom = serializers.BooleanField(read_only=True)

    class Meta:
        model = LocationModel
        fields = [
            'id',
            'name',
            'user_id',
            'is_default',
            'is_custom',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class LocationWriteSerializer(serializers.Serializer):
    """Input for creating or renaming a location."""

    name = serializers.CharField(min_length=2, max_length=100)
