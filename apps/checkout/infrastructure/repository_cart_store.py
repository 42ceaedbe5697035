"""
Cart store reading the user's persisted cart.
"""
from dataclasses import dataclass
from typing import List

from apps.orders.domain.entities.cart_item import CartItem
from apps.orders.domain.repositories.cart_repository import CartRepository
from ..domain.ports import CartStore


@dataclass
class RepositoryCartStore(CartStore):
    cart_repository: CartRepository
    user_id: str

    def lines(self) -> List[CartItem]:
        cart = self.cart_repository.find_by_user_id(self.user_id)
        return list(cart.items) if cart else []

    def clear(self) -> None:
        cart = self.cart_repository.find_by_user_id(self.user_id)
        if cart is None or cart.is_empty:
            return
        cart.clear()
        self.cart_repository.save(cart)
