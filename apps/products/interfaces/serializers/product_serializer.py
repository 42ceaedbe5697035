"""
Product serializers.
"""
from rest_framework import serializers

from ...domain.value_objects.dimension_unit import DimensionUnit


class ProductSerializer(serializers.Serializer):
    """Serializer for product output."""
    id = serializers.UUIDField(read_only=True)
    name = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True)
    brand = serializers.CharField(read_only=True)
    sku = serializers.CharField(read_only=True)
    base_amount = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    tax_rate = serializers.DecimalField(max_digits=5, decimal_places=2, read_only=True)
    tax_amount = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    price = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    currency = serializers.CharField(read_only=True)
    stock_quantity = serializers.IntegerField(read_only=True)
    category_id = serializers.UUIDField(read_only=True)
    is_active = serializers.BooleanField(read_only=True)
    is_in_stock = serializers.BooleanField(read_only=True)
    is_variable_dimension = serializers.BooleanField(read_only=True)
    fixed_height = serializers.DecimalField(max_digits=10, decimal_places=2, read_only=True, allow_null=True)
    variable_dimension_rate = serializers.DecimalField(
        max_digits=12, decimal_places=4, read_only=True, allow_null=True
    )
    max_length = serializers.DecimalField(max_digits=10, decimal_places=2, read_only=True, allow_null=True)
    dimension_unit = serializers.CharField(read_only=True, allow_null=True)
    images = serializers.ListField(child=serializers.CharField(), read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)


class ProductCreateSerializer(serializers.Serializer):
    """Serializer for product creation."""
    name = serializers.CharField(min_length=2, max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, default='')
    brand = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')
    sku = serializers.CharField(min_length=3, max_length=100)
    category_id = serializers.UUIDField()
    stock_quantity = serializers.IntegerField(min_value=0)
    currency = serializers.CharField(max_length=3, required=False)
    base_amount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False)
    tax_rate = serializers.DecimalField(max_digits=5, decimal_places=2, min_value=0, default=0)
    is_variable_dimension = serializers.BooleanField(default=False)
    fixed_height = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0, required=False)
    variable_dimension_rate = serializers.DecimalField(
        max_digits=12, decimal_places=4, min_value=0, required=False
    )
    max_length = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0, required=False)
    dimension_unit = serializers.ChoiceField(choices=[u.value for u in DimensionUnit], required=False)
    images = serializers.ListField(child=serializers.URLField(), required=False)

    def validate(self, attrs):
        if attrs.get('is_variable_dimension'):
            missing = [
                name for name in ('fixed_height', 'variable_dimension_rate', 'dimension_unit')
                if attrs.get(name) is None
            ]
            if missing:
                raise serializers.ValidationError(
                    {name: 'Required for variable-dimension products.' for name in missing}
                )
        elif attrs.get('base_amount') is None:
            raise serializers.ValidationError({'base_amount': 'This field is required.'})
        return attrs


class RecommendationSerializer(serializers.Serializer):
    """Serializer for a recommended product."""
    product = ProductSerializer(read_only=True)
    type = serializers.CharField(read_only=True)
    score = serializers.DecimalField(max_digits=3, decimal_places=2, read_only=True)
    reason = serializers.CharField(read_only=True)


class ProductListQuerySerializer(serializers.Serializer):
    category_id = serializers.UUIDField(required=False)
    limit = serializers.IntegerField(min_value=1, max_value=100, default=20)
    offset = serializers.IntegerField(min_value=0, default=0)


class RecommendationQuerySerializer(serializers.Serializer):
    limit = serializers.IntegerField(min_value=1, max_value=20, default=6)
