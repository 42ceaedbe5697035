"""
Orders admin configuration.
"""
from django.contrib import admin

from ..infrastructure.models.order_model import (
    OrderModel,
    OrderItemModel,
    OrderPaymentComponentModel,
    OrderStatusHistoryModel,
)
from ..infrastructure.models.cart_model import CartModel, CartItemModel


class OrderItemInline(admin.TabularInline):
    """Inline for order items."""
    model = OrderItemModel
    extra = 0
    readonly_fields = (
        'id', 'product_id', 'product_name', 'product_sku', 'quantity',
        'custom_length', 'unit_base_amount', 'unit_tax_amount', 'unit_price',
    )


class OrderPaymentComponentInline(admin.TabularInline):
    model = OrderPaymentComponentModel
    extra = 0
    readonly_fields = ('position', 'type', 'amount', 'label', 'description', 'is_negative')


class OrderStatusHistoryInline(admin.TabularInline):
    model = OrderStatusHistoryModel
    extra = 0
    readonly_fields = ('position', 'status', 'previous_status', 'note', 'changed_at')


@admin.register(OrderModel)
class OrderAdmin(admin.ModelAdmin):
    """Admin configuration for Order model. Monetary fields are read-only."""
    list_display = ('order_number', 'user_id', 'status', 'payment_method', 'total_amount', 'created_at')
    list_filter = ('status', 'payment_method', 'created_at')
    search_fields = ('order_number', 'user_id', 'payment_reference')
    ordering = ('-created_at',)
    readonly_fields = (
        'id', 'order_number', 'subtotal', 'tax_amount', 'shipping_amount',
        'discount_amount', 'fee_amount', 'total_amount', 'created_at', 'updated_at',
    )
    inlines = [OrderItemInline, OrderPaymentComponentInline, OrderStatusHistoryInline]


class CartItemInline(admin.TabularInline):
    """Inline for cart items."""
    model = CartItemModel
    extra = 0


@admin.register(CartModel)
class CartAdmin(admin.ModelAdmin):
    """Admin configuration for Cart model."""
    list_display = ('id', 'user_id', 'created_at', 'updated_at')
    search_fields = ('user_id',)
    ordering = ('-updated_at',)
    readonly_fields = ('id', 'created_at', 'updated_at')
    inlines = [CartItemInline]
