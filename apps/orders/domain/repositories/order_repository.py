"""
Order repository interface.
"""
from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from ..entities.order import Order
from ..value_objects.order_status import OrderStatus


class OrderRepository(ABC):
    """Persistence port for placed orders.

    Items, payment components and totals are written once; later saves
    only change status fields and append to the status history.
    """

    @abstractmethod
    def save(self, order: Order) -> Order:
        ...

    @abstractmethod
    def find_by_id(self, order_id: UUID) -> Optional[Order]:
        ...

    @abstractmethod
    def find_for_user(self, user_id: str, order_id: UUID) -> Optional[Order]:
        """The order, or None when it is missing or owned by another user."""

    @abstractmethod
    def find_by_order_number(self, user_id: str, order_number: str) -> Optional[Order]:
        """Like ``find_for_user`` but keyed by the customer-facing number."""

    @abstractmethod
    def find_by_user_id(
        self,
        user_id: str,
        status: Optional[OrderStatus] = None,
        offset: int = 0,
        limit: int = 20,
    ) -> List[Order]:
        """A user's orders, newest first."""
