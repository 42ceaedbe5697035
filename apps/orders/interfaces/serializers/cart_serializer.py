"""
Cart serializers.
"""
from rest_framework import serializers

MONEY = dict(max_digits=12, decimal_places=2, read_only=True)


class PaymentComponentSerializer(serializers.Serializer):
    """Serializer for one payment component."""
    type = serializers.CharField(read_only=True)
    amount = serializers.DecimalField(**MONEY)
    label = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True)
    is_negative = serializers.BooleanField(read_only=True)


class CartTotalsSerializer(serializers.Serializer):
    """Serializer for cart totals output."""
    subtotal = serializers.DecimalField(**MONEY)
    tax_amount = serializers.DecimalField(**MONEY)
    shipping_amount = serializers.DecimalField(**MONEY)
    discount_amount = serializers.DecimalField(**MONEY)
    fee_amount = serializers.DecimalField(**MONEY)
    total_amount = serializers.DecimalField(**MONEY)
    item_count = serializers.IntegerField(read_only=True)
    currency = serializers.CharField(read_only=True)
    components = PaymentComponentSerializer(many=True, read_only=True)


class CartItemSerializer(serializers.Serializer):
    """Serializer for cart item output."""
    id = serializers.UUIDField(read_only=True)
    product_id = serializers.UUIDField(read_only=True)
    product_name = serializers.CharField(read_only=True)
    product_sku = serializers.CharField(read_only=True)
    pricing_mode = serializers.CharField(read_only=True)
    quantity = serializers.IntegerField(read_only=True)
    custom_length = serializers.DecimalField(max_digits=10, decimal_places=2, read_only=True, allow_null=True)
    unit_base_amount = serializers.DecimalField(**MONEY)
    unit_tax_amount = serializers.DecimalField(**MONEY)
    unit_price = serializers.DecimalField(**MONEY)
    line_subtotal = serializers.DecimalField(**MONEY)
    line_total = serializers.DecimalField(**MONEY)


class CartSerializer(serializers.Serializer):
    """Serializer for cart output."""
    id = serializers.UUIDField(read_only=True)
    items = CartItemSerializer(many=True, read_only=True)
    totals = CartTotalsSerializer(read_only=True)


class CartItemCreateSerializer(serializers.Serializer):
    """Serializer for adding item to cart."""
    product_id = serializers.UUIDField()
    quantity = serializers.IntegerField(min_value=1, default=1)
    custom_length = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=0, required=False, allow_null=True
    )


class CartItemUpdateSerializer(serializers.Serializer):
    """Serializer for updating a cart line."""
    quantity = serializers.IntegerField(min_value=0, required=False)
    custom_length = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0, required=False)

    def validate(self, attrs):
        if 'quantity' not in attrs and 'custom_length' not in attrs:
            raise serializers.ValidationError("Provide quantity or custom_length.")
        return attrs


class CartTotalsRequestSerializer(serializers.Serializer):
    """Checkout selections for a totals preview."""
    address_id = serializers.UUIDField(required=False, allow_null=True)
    shipping_method = serializers.CharField(max_length=30, required=False, allow_blank=True, allow_null=True)
    discount_code = serializers.CharField(max_length=30, required=False, allow_blank=True, allow_null=True)
    payment_method = serializers.CharField(max_length=30, required=False, allow_blank=True, allow_null=True)
