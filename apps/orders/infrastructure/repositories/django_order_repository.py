"""
Django ORM implementation of OrderRepository.
"""
import logging
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from django.db import transaction

from ...domain.entities.order import Order
from ...domain.entities.order_item import OrderItem
from ...domain.repositories.order_repository import OrderRepository
from ...domain.value_objects.checkout_codes import PaymentMethod
from ...domain.value_objects.order_number import OrderNumber
from ...domain.value_objects.order_status import OrderStatus, OrderStatusHistoryEntry
from ...domain.value_objects.order_totals import OrderTotals
from ...domain.value_objects.payment_component import PaymentComponent, PaymentComponentType
from ...domain.value_objects.shipping_info import ShippingInfo
from ..models.order_model import (
    OrderModel,
    OrderItemModel,
    OrderPaymentComponentModel,
    OrderStatusHistoryModel,
)

logger = logging.getLogger(__name__)


class DjangoOrderRepository(OrderRepository):
    """Django ORM based order repository implementation."""

    def save(self, order: Order) -> Order:
        """
        Save an order.

        Items and payment components are written once, when the order is
        first stored; later saves only update status fields and history.
        """
        with transaction.atomic():
            totals = order.totals
            info = order.shipping_info
            model, created = OrderModel.objects.update_or_create(
                id=order.id,
                defaults={
                    'order_number': order.order_number.value,
                    'user_id': order.user_id,
                    'status': order.status.value,
                    'payment_method': order.payment_method.value,
                    'shipping_method': order.shipping_method or '',
                    'discount_code': order.discount_code or '',
                    'payment_reference': order.payment_reference or '',
                    'customer_notes': order.customer_notes,
                    'cancellation_reason': order.cancellation_reason or '',
                    'currency': order.currency,
                    'subtotal': totals.subtotal,
                    'tax_amount': totals.tax_amount,
                    'shipping_amount': totals.shipping_amount,
                    'discount_amount': totals.discount_amount,
                    'fee_amount': totals.fee_amount,
                    'total_amount': totals.total_amount,
                    'billing_address_id': order.billing_address_id,
                    'shipping_address_id': order.shipping_address_id,
                    'shipping_street': info.street,
                    'shipping_street2': info.street2,
                    'shipping_city': info.city,
                    'shipping_state': info.state,
                    'shipping_postal_code': info.postal_code,
                    'shipping_country': info.country,
                    'created_at': order.created_at,
                }
            )

            if created:
                OrderItemModel.objects.bulk_create([
                    OrderItemModel(
                        id=item.id,
                        order=model,
                        position=position,
                        product_id=item.product_id,
                        product_name=item.product_name,
                        product_sku=item.product_sku,
                        quantity=item.quantity,
                        unit_base_amount=item.unit_base_amount,
                        unit_tax_amount=item.unit_tax_amount,
                        unit_price=item.unit_price,
                        custom_length=item.custom_length,
                        currency=item.currency,
                    )
                    for position, item in enumerate(order.items)
                ])
                OrderPaymentComponentModel.objects.bulk_create([
                    OrderPaymentComponentModel(
                        order=model,
                        position=position,
                        type=component.type.value,
                        amount=component.amount,
                        label=component.label,
                        description=component.description,
                        is_negative=component.is_negative,
                    )
                    for position, component in enumerate(order.payment_components)
                ])

            stored = model.status_history.count()
            OrderStatusHistoryModel.objects.bulk_create([
                OrderStatusHistoryModel(
                    order=model,
                    position=position,
                    status=entry.status.value,
                    previous_status=entry.previous_status.value if entry.previous_status else '',
                    note=entry.note,
                    changed_at=entry.changed_at,
                )
                for position, entry in enumerate(order.status_history)
                if position >= stored
            ])

            if created:
                logger.info(f"Order stored: {order.order_number} total={totals.total_amount}")
            return self._to_entity(self._query().get(id=model.id))

    def find_by_id(self, order_id: UUID) -> Optional[Order]:
        """Find an order by ID."""
        try:
            return self._to_entity(self._query().get(id=order_id))
        except OrderModel.DoesNotExist:
            return None

    def find_for_user(self, user_id: str, order_id: UUID) -> Optional[Order]:
        model = self._query().filter(id=order_id, user_id=str(user_id)).first()
        return self._to_entity(model) if model else None

    def find_by_order_number(self, user_id: str, order_number: str) -> Optional[Order]:
        model = self._query().filter(order_number=order_number, user_id=str(user_id)).first()
        return self._to_entity(model) if model else None

    def find_by_user_id(
        self,
        user_id: str,
        status: Optional[OrderStatus] = None,
        offset: int = 0,
        limit: int = 20,
    ) -> List[Order]:
        """Find orders by user ID, newest first."""
        queryset = self._query().filter(user_id=str(user_id))
        if status:
            queryset = queryset.filter(status=status.value)
        models = queryset.order_by('-created_at')[offset:offset + limit]
        return [self._to_entity(model) for model in models]

    @staticmethod
    def _query():
        return OrderModel.objects.prefetch_related('items', 'payment_components', 'status_history')

    def _to_entity(self, model: OrderModel) -> Order:
        """Convert Django model to domain entity."""
        return Order(
            id=model.id,
            order_number=OrderNumber(value=model.order_number),
            user_id=model.user_id,
            items=tuple(
                OrderItem(
                    id=item.id,
                    order_id=model.id,
                    product_id=item.product_id,
                    product_name=item.product_name,
                    product_sku=item.product_sku,
                    quantity=item.quantity,
                    unit_base_amount=Decimal(str(item.unit_base_amount)),
                    unit_tax_amount=Decimal(str(item.unit_tax_amount)),
                    unit_price=Decimal(str(item.unit_price)),
                    custom_length=item.custom_length,
                    currency=item.currency,
                    created_at=item.created_at,
                    updated_at=item.created_at,
                )
                for item in model.items.all()
            ),
            totals=OrderTotals(
                subtotal=model.subtotal,
                tax_amount=model.tax_amount,
                shipping_amount=model.shipping_amount,
                discount_amount=model.discount_amount,
                fee_amount=model.fee_amount,
                total_amount=model.total_amount,
            ),
            payment_components=tuple(
                PaymentComponent(
                    type=PaymentComponentType(component.type),
                    amount=component.amount,
                    label=component.label,
                    description=component.description,
                    is_negative=component.is_negative,
                )
                for component in model.payment_components.all()
            ),
            payment_method=PaymentMethod(model.payment_method),
            billing_address_id=model.billing_address_id,
            shipping_address_id=model.shipping_address_id,
            shipping_info=ShippingInfo(
                street=model.shipping_street,
                street2=model.shipping_street2,
                city=model.shipping_city,
                state=model.shipping_state,
                postal_code=model.shipping_postal_code,
                country=model.shipping_country,
            ),
            shipping_method=model.shipping_method or None,
            discount_code=model.discount_code or None,
            currency=model.currency,
            customer_notes=model.customer_notes,
            payment_reference=model.payment_reference or None,
            cancellation_reason=model.cancellation_reason or None,
            status=OrderStatus(model.status),
            status_history=[
                OrderStatusHistoryEntry(
                    status=OrderStatus(entry.status),
                    previous_status=OrderStatus(entry.previous_status) if entry.previous_status else None,
                    note=entry.note,
                    changed_at=entry.changed_at,
                )
                for entry in model.status_history.all()
            ],
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
