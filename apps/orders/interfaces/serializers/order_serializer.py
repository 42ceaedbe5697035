"""
Order serializers.
"""
from rest_framework import serializers

from .cart_serializer import MONEY, PaymentComponentSerializer


class OrderItemSerializer(serializers.Serializer):
    """Serializer for order item output."""
    id = serializers.UUIDField(read_only=True)
    product_id = serializers.UUIDField(read_only=True)
    product_name = serializers.CharField(read_only=True)
    product_sku = serializers.CharField(read_only=True)
    quantity = serializers.IntegerField(read_only=True)
    custom_length = serializers.DecimalField(max_digits=10, decimal_places=2, read_only=True, allow_null=True)
    unit_base_amount = serializers.DecimalField(**MONEY)
    unit_tax_amount = serializers.DecimalField(**MONEY)
    unit_price = serializers.DecimalField(**MONEY)
    total = serializers.DecimalField(**MONEY)


class StatusHistorySerializer(serializers.Serializer):
    status = serializers.CharField(read_only=True)
    previous_status = serializers.CharField(read_only=True, allow_null=True)
    note = serializers.CharField(read_only=True)
    changed_at = serializers.DateTimeField(read_only=True)


class OrderSerializer(serializers.Serializer):
    """Serializer for order output."""
    id = serializers.UUIDField(read_only=True)
    order_number = serializers.CharField(read_only=True)
    status = serializers.CharField(read_only=True)
    payment_method = serializers.CharField(read_only=True)
    shipping_method = serializers.CharField(read_only=True, allow_null=True)
    discount_code = serializers.CharField(read_only=True, allow_null=True)
    payment_reference = serializers.CharField(read_only=True, allow_null=True)
    currency = serializers.CharField(read_only=True)
    subtotal = serializers.DecimalField(**MONEY)
    tax_amount = serializers.DecimalField(**MONEY)
    shipping_amount = serializers.DecimalField(**MONEY)
    discount_amount = serializers.DecimalField(**MONEY)
    fee_amount = serializers.DecimalField(**MONEY)
    total_amount = serializers.DecimalField(**MONEY)
    billing_address_id = serializers.UUIDField(read_only=True)
    shipping_address_id = serializers.UUIDField(read_only=True)
    shipping_address = serializers.CharField(read_only=True)
    customer_notes = serializers.CharField(read_only=True)
    cancellation_reason = serializers.CharField(read_only=True, allow_null=True)
    is_cancellable = serializers.BooleanField(read_only=True)
    items = OrderItemSerializer(many=True, read_only=True)
    payment_components = PaymentComponentSerializer(many=True, read_only=True)
    status_history = StatusHistorySerializer(many=True, read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)


class OrderCreateSerializer(serializers.Serializer):
    """Serializer for creating an order from the cart."""
    billing_address_id = serializers.UUIDField()
    shipping_address_id = serializers.UUIDField()
    payment_method = serializers.CharField(max_length=30)
    shipping_method = serializers.CharField(max_length=30, required=False, allow_blank=True, allow_null=True)
    discount_code = serializers.CharField(max_length=30, required=False, allow_blank=True, allow_null=True)
    customer_notes = serializers.CharField(required=False, allow_blank=True, default='')
    payment_reference = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    expected_total = serializers.DecimalField(max_digits=12, decimal_places=2, required=False, allow_null=True)


class OrderCancelSerializer(serializers.Serializer):
    reason = serializers.CharField(max_length=255)


class OrderPaymentSerializer(serializers.Serializer):
    transaction_id = serializers.CharField(max_length=100)
