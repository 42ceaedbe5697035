# Use cases
from .get_cart import GetCartUseCase
from .add_to_cart import AddToCartUseCase
from .update_cart_item import UpdateCartItemUseCase
from .remove_cart_item import RemoveCartItemUseCase
from .clear_cart import ClearCartUseCase
from .calculate_cart_totals import CalculateCartTotalsUseCase
from .create_order_from_cart import CreateOrderFromCartUseCase
from .list_orders import ListOrdersUseCase
from .get_order import GetOrderByNumberUseCase, GetOrderUseCase
from .cancel_order import CancelOrderUseCase
from .order_transitions import DeliverOrderUseCase, RecordPaymentUseCase

__all__ = [
    'GetCartUseCase',
    'AddToCartUseCase',
    'UpdateCartItemUseCase',
    'RemoveCartItemUseCase',
    'ClearCartUseCase',
    'CalculateCartTotalsUseCase',
    'CreateOrderFromCartUseCase',
    'ListOrdersUseCase',
    'GetOrderUseCase',
    'GetOrderByNumberUseCase',
    'CancelOrderUseCase',
    'RecordPaymentUseCase',
    'DeliverOrderUseCase',
]
