# Ports
from .payment_gateway import PaymentGateway
from .order_gateway import OrderGateway
from .cart_store import CartStore

__all__ = ['PaymentGateway', 'OrderGateway', 'CartStore']
