"""
Events recorded by the Order aggregate.

Use cases pull them after a successful save and publish them to the log.
"""
from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from shared.domain import DomainEvent


@dataclass(frozen=True)
class OrderPlaced(DomainEvent):
    order_id: UUID
    order_number: str
    user_id: str
    total_amount: Decimal
    payment_method: str
    line_count: int


@dataclass(frozen=True)
class OrderStatusChanged(DomainEvent):
    """One transition along the order lifecycle; ``note`` mirrors the history entry."""
    order_id: UUID
    order_number: str
    from_status: str
    to_status: str
    note: str = ""
