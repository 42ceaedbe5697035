# Serializers
from .cart_serializer import (
    CartSerializer,
    CartItemSerializer,
    CartItemCreateSerializer,
    CartItemUpdateSerializer,
    CartTotalsSerializer,
    CartTotalsRequestSerializer,
    PaymentComponentSerializer,
)
from .order_serializer import (
    OrderSerializer,
    OrderItemSerializer,
    OrderCreateSerializer,
    OrderCancelSerializer,
    OrderPaymentSerializer,
)

__all__ = [
    'CartSerializer',
    'CartItemSerializer',
    'CartItemCreateSerializer',
    'CartItemUpdateSerializer',
    'CartTotalsSerializer',
    'CartTotalsRequestSerializer',
    'PaymentComponentSerializer',
    'OrderSerializer',
    'OrderItemSerializer',
    'OrderCreateSerializer',
    'OrderCancelSerializer',
    'OrderPaymentSerializer',
]
