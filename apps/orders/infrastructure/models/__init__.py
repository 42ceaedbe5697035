# Django models
from .order_model import (
    OrderModel,
    OrderItemModel,
    OrderPaymentComponentModel,
    OrderStatusHistoryModel,
)
from .cart_model import CartModel, CartItemModel

__all__ = [
    'OrderModel',
    'OrderItemModel',
    'OrderPaymentComponentModel',
    'OrderStatusHistoryModel',
    'CartModel',
    'CartItemModel',
]
