# Domain services
from .checkout_flow import CheckoutContext, CheckoutFlow

__all__ = ['CheckoutContext', 'CheckoutFlow']
