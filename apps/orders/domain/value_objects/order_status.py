"""
Order status value objects.
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from shared.domain import ValueObject, utc_now


class OrderStatus(str, Enum):
    ORDER_RAISED = 'ORDER_RAISED'
    PAYMENT_DONE = 'PAYMENT_DONE'
    DELIVERED = 'DELIVERED'
    CANCELLED = 'CANCELLED'


@dataclass(frozen=True)
class OrderStatusHistoryEntry(ValueObject):
    """One recorded status change."""
    status: OrderStatus
    previous_status: Optional[OrderStatus] = None
    note: str = ""
    changed_at: datetime = field(default_factory=utc_now)
