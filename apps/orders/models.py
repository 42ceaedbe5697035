# Django discovers models through the app module.
from .infrastructure.models import (  # noqa: F401
    CartModel,
    CartItemModel,
    OrderModel,
    OrderItemModel,
    OrderPaymentComponentModel,
    OrderStatusHistoryModel,
)
