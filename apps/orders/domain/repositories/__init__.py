# Repository interfaces
from .order_repository import OrderRepository
from .cart_repository import CartRepository

__all__ = ['OrderRepository', 'CartRepository']
