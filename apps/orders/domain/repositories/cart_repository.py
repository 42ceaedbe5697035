"""
Cart repository interface.
"""
from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from ..entities.cart import Cart


class CartRepository(ABC):
    """Persistence port for carts; a user has at most one."""

    @abstractmethod
    def save(self, cart: Cart) -> Cart:
        """Store the cart; lines missing from the aggregate are removed."""

    @abstractmethod
    def find_by_id(self, cart_id: UUID) -> Optional[Cart]:
        ...

    @abstractmethod
    def find_by_user_id(self, user_id: str) -> Optional[Cart]:
        ...

    @abstractmethod
    def delete(self, cart_id: UUID) -> bool:
        ...

    def get_or_create_for_user(self, user_id: str) -> Cart:
        """The user's cart, or a new unsaved empty one."""
        return self.find_by_user_id(user_id) or Cart.create(user_id)
