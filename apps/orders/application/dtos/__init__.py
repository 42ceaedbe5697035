# DTOs
from .cart_dto import (
    AddToCartDTO,
    UpdateCartItemDTO,
    RemoveCartItemDTO,
    CartTotalsRequestDTO,
    PaymentComponentDTO,
    CartTotalsDTO,
    CartItemDTO,
    CartDTO,
)
from .order_dto import (
    CreateOrderDTO,
    ListOrdersDTO,
    OrderRefDTO,
    CancelOrderDTO,
    OrderNumberRefDTO,
    RecordPaymentDTO,
    OrderItemDTO,
    OrderDTO,
)

__all__ = [
    'AddToCartDTO',
    'UpdateCartItemDTO',
    'RemoveCartItemDTO',
    'CartTotalsRequestDTO',
    'PaymentComponentDTO',
    'CartTotalsDTO',
    'CartItemDTO',
    'CartDTO',
    'CreateOrderDTO',
    'ListOrdersDTO',
    'OrderRefDTO',
    'CancelOrderDTO',
    'OrderNumberRefDTO',
    'RecordPaymentDTO',
    'OrderItemDTO',
    'OrderDTO',
]
