"""
Cart store port.
"""
from abc import ABC, abstractmethod
from typing import List

from apps.orders.domain.entities.cart_item import CartItem


class CartStore(ABC):
    """The checkout session's view of the customer's cart."""

    @abstractmethod
    def lines(self) -> List[CartItem]:
        pass

    @abstractmethod
    def clear(self) -> None:
        pass
