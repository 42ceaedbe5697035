"""
Order gateway port.
"""
from abc import ABC, abstractmethod

from ..value_objects.order_submission import CreatedOrder, OrderRequest


class OrderGateway(ABC):
    """Creates the order on the store side."""

    @abstractmethod
    def create_order(self, request: OrderRequest) -> CreatedOrder:
        """
        Create an order from the customer's cart.

        Raises an ``OrderGatewayError`` subclass on failure:
        ``OrderRejectedError``, ``OrderServerError``,
        ``OrderGatewayTimeoutError`` or ``OrderNetworkError``.
        """
        pass
