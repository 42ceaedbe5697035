"""
Django ORM implementation of CartRepository.
"""
import logging
from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.db import transaction

from ...domain.entities.cart import Cart
from ...domain.entities.cart_item import CartItem
from ...domain.repositories.cart_repository import CartRepository
from ...domain.value_objects.product_snapshot import ProductSnapshot
from ..models.cart_model import CartModel, CartItemModel

logger = logging.getLogger(__name__)


class DjangoCartRepository(CartRepository):
    """Django ORM based cart repository implementation."""

    def save(self, cart: Cart) -> Cart:
        """Save a cart and replace its lines with the aggregate's lines."""
        with transaction.atomic():
            model, _ = CartModel.objects.update_or_create(
                id=cart.id,
                defaults={'user_id': cart.user_id},
            )
            kept_ids = [item.id for item in cart.items]
            CartItemModel.objects.filter(cart=model).exclude(id__in=kept_ids).delete()
            for position, item in enumerate(cart.items):
                snapshot = item.product
                CartItemModel.objects.update_or_create(
                    id=item.id,
                    defaults={
                        'cart': model,
                        'position': position,
                        'quantity': item.quantity,
                        'custom_length': item.custom_length,
                        'product_id': snapshot.product_id,
                        'product_name': snapshot.name,
                        'product_sku': snapshot.sku,
                        'base_amount': snapshot.base_amount,
                        'tax_rate': snapshot.tax_rate,
                        'tax_amount': snapshot.tax_amount,
                        'is_variable_dimension': snapshot.is_variable_dimension,
                        'fixed_height': snapshot.fixed_height,
                        'variable_dimension_rate': snapshot.variable_dimension_rate,
                        'max_length': snapshot.max_length,
                    }
                )
            logger.debug(f"Saved cart {cart.id} with {len(cart.items)} lines")
            return self._to_entity(model)

    def find_by_id(self, cart_id: UUID) -> Optional[Cart]:
        """Find a cart by ID."""
        try:
            model = CartModel.objects.prefetch_related('items').get(id=cart_id)
            return self._to_entity(model)
        except CartModel.DoesNotExist:
            return None

    def find_by_user_id(self, user_id: str) -> Optional[Cart]:
        """Find a cart by user ID."""
        try:
            model = CartModel.objects.prefetch_related('items').get(user_id=str(user_id))
            return self._to_entity(model)
        except CartModel.DoesNotExist:
            return None

    def delete(self, cart_id: UUID) -> bool:
        """Delete a cart."""
        deleted, _ = CartModel.objects.filter(id=cart_id).delete()
        return deleted > 0

    def _to_entity(self, model: CartModel) -> Cart:
        """Convert Django model to domain entity."""
        return Cart(
            id=model.id,
            user_id=model.user_id,
            items=[self._item_to_entity(model.id, item) for item in model.items.all()],
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @staticmethod
    def _item_to_entity(cart_id: UUID, model: CartItemModel) -> CartItem:
        snapshot = ProductSnapshot(
            product_id=model.product_id,
            name=model.product_name,
            sku=model.product_sku,
            base_amount=Decimal(str(model.base_amount)),
            tax_rate=Decimal(str(model.tax_rate)),
            tax_amount=Decimal(str(model.tax_amount)),
            is_variable_dimension=model.is_variable_dimension,
            fixed_height=model.fixed_height,
            variable_dimension_rate=model.variable_dimension_rate,
            max_length=model.max_length,
        )
        return CartItem(
            id=model.id,
            cart_id=cart_id,
            product=snapshot,
            quantity=model.quantity,
            custom_length=model.custom_length,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
