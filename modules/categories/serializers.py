"""
Categories serializers.
"""
from rest_framework import serializers

from .models import CategoryModel


class CategorySerializer(serializers.ModelSerializer):
    """Category output, also used for the flat listing."""

    parent_id = serializers.UUIDField(read_only=True, allow_null=True)
    user_id = serializers.UUIDField(source='owner_id', read_only=True, allow_null=True)
    is_custom = serializers.BooleanField(read_only=True)
    is_parent = serializers.BooleanField(read_only=True)
    level = serializers.IntegerField(read_only=True)
    full_path = serializers.CharField(read_only=True)

    class Meta:
        model = CategoryModel
        fields = [
            'id',
            'name',
            'parent_id',
            'user_id',
            'is_default',
            'is_custom',
            'is_parent',
            'level',
            'full_path',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class CategoryTreeSerializer(CategorySerializer):
    """Top-level category with its children.

    Children are passed in through ``context['children']``, keyed by parent id.
    """

    children = serializers.SerializerMethodField()

    class Meta(CategorySerializer.Meta):
        fields = CategorySerializer.Meta.fields + ['children']
        read_only_fields = fields

    def get_children(self, obj):
        children = self.context.get('children', {}).get(obj.id, [])
        return CategorySerializer(children, many=True).data


class CategoryCreateSerializer(serializers.Serializer):
    """Input for creating a category."""

    name = serializers.CharField(min_length=2, max_length=100)
    parent_id = serializers.UUIDField(required=False, allow_null=True)


class CategoryUpdateSerializer(serializers.Serializer):
    """Input for replacing a category; a missing parent_id means top level."""

    name = serializers.CharField(min_length=2, max_length=100)
    parent_id = serializers.UUIDField(required=False, allow_null=True)
