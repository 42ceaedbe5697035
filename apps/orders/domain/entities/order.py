"""
Order entity (Aggregate Root).
"""
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
from uuid import UUID, uuid4

from shared.domain import AggregateRoot, ValidationError
from ..value_objects.checkout_codes import PaymentMethod
from ..value_objects.order_number import OrderNumber
from ..value_objects.order_status import OrderStatus, OrderStatusHistoryEntry
from ..value_objects.order_totals import OrderTotals
from ..value_objects.payment_component import PaymentComponent
from ..value_objects.shipping_info import ShippingInfo
from ..events import OrderPlaced, OrderStatusChanged
from ..exceptions import InvalidOrderStateError
from .cart_item import CartItem
from .order_item import OrderItem

CANCELLABLE_STATUSES = (OrderStatus.ORDER_RAISED, OrderStatus.PAYMENT_DONE)


@dataclass(eq=False)
class Order(AggregateRoot):
    """
    Snapshot of a checkout.

    Items, payment components and totals are fixed when the order is
    created; only the status, payment reference and history move
    afterwards.
    """
    order_number: OrderNumber
    user_id: str
    items: Tuple[OrderItem, ...]
    totals: OrderTotals
    payment_method: PaymentMethod
    billing_address_id: UUID
    shipping_address_id: UUID
    shipping_info: ShippingInfo
    payment_components: Tuple[PaymentComponent, ...] = ()
    shipping_method: Optional[str] = None
    discount_code: Optional[str] = None
    currency: str = "USD"
    customer_notes: str = ""
    payment_reference: Optional[str] = None
    cancellation_reason: Optional[str] = None
    status: OrderStatus = OrderStatus.ORDER_RAISED
    status_history: List[OrderStatusHistoryEntry] = field(default_factory=list)

    def __post_init__(self):
        self.items = tuple(self.items)
        self.payment_components = tuple(self.payment_components)

    @classmethod
    def create(
        cls,
        user_id: str,
        cart_items: List[CartItem],
        totals: OrderTotals,
        payment_components: List[PaymentComponent],
        payment_method: PaymentMethod,
        billing_address_id: UUID,
        shipping_address_id: UUID,
        shipping_info: ShippingInfo,
        shipping_method: Optional[str] = None,
        discount_code: Optional[str] = None,
        currency: str = "USD",
        customer_notes: str = "",
    ) -> 'Order':
        """Factory method to create a new order from cart lines."""
        order_id = uuid4()
        order = cls(
            id=order_id,
            order_number=OrderNumber.generate(),
            user_id=str(user_id),
            items=tuple(OrderItem.from_cart_item(order_id, item, currency) for item in cart_items),
            totals=totals,
            payment_components=tuple(payment_components),
            payment_method=payment_method,
            billing_address_id=billing_address_id,
            shipping_address_id=shipping_address_id,
            shipping_info=shipping_info,
            shipping_method=shipping_method,
            discount_code=discount_code,
            currency=currency,
            customer_notes=customer_notes,
        )
        order.status_history.append(
            OrderStatusHistoryEntry(status=OrderStatus.ORDER_RAISED, note="Order created")
        )
        order.record_event(
            OrderPlaced(
                order_id=order.id,
                order_number=order.order_number.value,
                user_id=order.user_id,
                total_amount=totals.total_amount,
                payment_method=payment_method.value,
                line_count=len(order.items),
            )
        )
        return order

    def record_payment(self, transaction_id: str) -> None:
        """Attach the gateway payment reference and mark the order paid."""
        if not transaction_id or not transaction_id.strip():
            raise ValidationError("Transaction id is required", field="transaction_id")
        if self.status != OrderStatus.ORDER_RAISED:
            raise InvalidOrderStateError("record payment for", self.status.value)
        self.payment_reference = transaction_id.strip()
        self._change_status(OrderStatus.PAYMENT_DONE, f"Payment {self.payment_reference} received")

    def mark_delivered(self) -> None:
        """Mark the order as delivered."""
        if self.status != OrderStatus.PAYMENT_DONE:
            raise InvalidOrderStateError("deliver", self.status.value)
        self._change_status(OrderStatus.DELIVERED, "Order delivered")

    def cancel(self, reason: str) -> None:
        """Cancel the order."""
        if not reason or not reason.strip():
            raise ValidationError("Cancellation reason is required", field="reason")
        if self.status not in CANCELLABLE_STATUSES:
            raise InvalidOrderStateError("cancel", self.status.value)
        self.cancellation_reason = reason.strip()
        self._change_status(OrderStatus.CANCELLED, self.cancellation_reason)

    def _change_status(self, new_status: OrderStatus, note: str = "") -> None:
        """Change order status and emit event."""
        old_status = self.status
        self.status = new_status
        self.status_history.append(
            OrderStatusHistoryEntry(status=new_status, previous_status=old_status, note=note)
        )
        self.touch()
        self.record_event(
            OrderStatusChanged(
                order_id=self.id,
                order_number=self.order_number.value,
                from_status=old_status.value,
                to_status=new_status.value,
                note=note,
            )
        )

    @property
    def is_cancellable(self) -> bool:
        """Check if the order can be cancelled."""
        return self.status in CANCELLABLE_STATUSES

    @property
    def total_amount(self):
        return self.totals.total_amount

    @property
    def item_count(self) -> int:
        """Get the total number of items."""
        return sum(item.quantity for item in self.items)
