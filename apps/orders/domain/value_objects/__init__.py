# Value objects
from .product_snapshot import ProductSnapshot, PricingMode
from .payment_component import PaymentComponent, PaymentComponentType
from .checkout_codes import ShippingMethod, DiscountCode, PaymentMethod
from .order_status import OrderStatus, OrderStatusHistoryEntry
from .order_number import OrderNumber
from .order_totals import OrderTotals
from .shipping_info import ShippingInfo

__all__ = [
    'ProductSnapshot',
    'PricingMode',
    'PaymentComponent',
    'PaymentComponentType',
    'ShippingMethod',
    'DiscountCode',
    'PaymentMethod',
    'OrderStatus',
    'OrderStatusHistoryEntry',
    'OrderNumber',
    'OrderTotals',
    'ShippingInfo',
]
