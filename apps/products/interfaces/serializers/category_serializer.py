"""
Category serializers.
"""
from rest_framework import serializers


class CategorySerializer(serializers.Serializer):
    """Serializer for category output."""
    id = serializers.UUIDField(read_only=True)
    name = serializers.CharField(read_only=True)
    slug = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True)
    parent_id = serializers.UUIDField(read_only=True, allow_null=True)
    sort_order = serializers.IntegerField(read_only=True)
    is_active = serializers.BooleanField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)


class CategoryCreateSerializer(serializers.Serializer):
    """Serializer for category creation; the slug defaults to one derived from the name."""
    name = serializers.CharField(min_length=2, max_length=100)
    slug = serializers.SlugField(max_length=120, required=False)
    description = serializers.CharField(required=False, allow_blank=True, default="")
    parent_id = serializers.UUIDField(required=False, allow_null=True, default=None)
    sort_order = serializers.IntegerField(required=False, default=0)


class CategoryListQuerySerializer(serializers.Serializer):
    parent_id = serializers.UUIDField(required=False, allow_null=True, default=None)
