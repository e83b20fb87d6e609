"""
Assets serializers.
"""
from decimal import Decimal

from rest_framework import serializers

from .models import AssetModel


class AssetCategorySerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    name = serializers.CharField(read_only=True)
    full_path = serializers.CharField(read_only=True)


class AssetLocationSerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    name = serializers.CharField(read_only=True)


class AssetSerializer(serializers.ModelSerializer):
    """Asset output."""

    user_id = serializers.UUIDField(read_only=True)
    category = AssetCategorySerializer(read_only=True)
    location = AssetLocationSerializer(read_only=True)

    class Meta:
        model = AssetModel
        fields = [
            'id',
            'name',
            'description',
            'price',
            'condition',
            'serial_number',
            'purchase_date',
            'warranty',
            'image',
            'category',
            'location',
            'user_id',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class AssetCreateSerializer(serializers.Serializer):
    """Input for creating an asset (multipart when an image is attached)."""

    name = serializers.CharField(max_length=100)
    description = serializers.CharField(max_length=255, required=False, allow_blank=True)
    category_id = serializers.UUIDField()
    location_id = serializers.UUIDField()
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal('0'))
    condition = serializers.ChoiceField(choices=AssetModel.Condition.choices)
    serial_number = serializers.CharField(max_length=100, required=False, allow_blank=True)
    purchase_date = serializers.DateField(required=False, allow_null=True)
    warranty = serializers.DateField(required=False, allow_null=True)
    image = serializers.ImageField(required=False, write_only=True)


class AssetUpdateSerializer(AssetCreateSerializer):
    """Input for a partial asset update. Every field is optional."""

    name = serializers.CharField(max_length=100, required=False)
    category_id = serializers.UUIDField(required=False)
    location_id = serializers.UUIDField(required=False)
    price = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal('0'), required=False
    )
    condition = serializers.ChoiceField(choices=AssetModel.Condition.choices, required=False)
