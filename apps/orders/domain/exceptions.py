"""
Order domain exceptions.
"""
from decimal import Decimal

from shared.domain.exceptions import (
    BusinessRuleViolationError,
    DomainException,
    EntityNotFoundError,
    InvalidOperationError,
)


class OrderNotFoundError(EntityNotFoundError):
    entity_name = "Order"
    not_found_code = "ORDER_NOT_FOUND"


class CartNotFoundError(EntityNotFoundError):
    entity_name = "Cart"
    not_found_code = "CART_NOT_FOUND"


class CartItemNotFoundError(EntityNotFoundError):
    entity_name = "CartItem"
    not_found_code = "CART_ITEM_NOT_FOUND"


class EmptyCartError(DomainException):
    """Raised when trying to checkout an empty cart."""

    def __init__(self):
        super().__init__(
            message="Cannot checkout an empty cart",
            code="EMPTY_CART"
        )


class InvalidOrderStateError(InvalidOperationError):
    """Raised when an order operation is invalid for the current state."""

    def __init__(self, operation: str, current_state: str):
        super().__init__(
            message=f"Cannot {operation} order in '{current_state}' state",
            operation=operation,
            state=current_state,
        )


class TotalsMismatchError(BusinessRuleViolationError):
    """Raised when the total the customer saw differs from the recomputed total."""

    def __init__(self, expected: Decimal, actual: Decimal):
        super().__init__(
            message=f"Order total changed from {expected} to {actual}; please review your order",
            rule="TOTALS_MATCH",
        )
        self.code = "TOTALS_MISMATCH"
        self.expected = expected
        self.actual = actual

    def details(self):
        return {'rule': self.rule, 'expected': self.expected, 'actual': self.actual}
