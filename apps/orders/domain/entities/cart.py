"""
Cart entity (Aggregate Root).
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from shared.domain import AggregateRoot, ValidationError
from ..exceptions import CartItemNotFoundError
from ..value_objects.product_snapshot import ProductSnapshot
from .cart_item import CartItem, is_whole_count


@dataclass(eq=False)
class Cart(AggregateRoot):
    """Shopping cart entity."""
    user_id: str
    items: List[CartItem] = field(default_factory=list)

    @classmethod
    def create(cls, user_id: str) -> 'Cart':
        """Create a new cart for a user."""
        return cls(user_id=str(user_id))

    def add_item(
        self,
        product: ProductSnapshot,
        quantity: int = 1,
        custom_length: Optional[Decimal] = None,
    ) -> CartItem:
        """Add a line, or merge into the line with the same product and length."""
        candidate = CartItem(
            cart_id=self.id,
            product=product,
            quantity=quantity,
            custom_length=custom_length,
        )
        existing = self._find_by_key(candidate)
        if existing:
            existing.product = product
            existing.change_quantity(existing.quantity + quantity)
            self.touch()
            return existing
        self.items.append(candidate)
        self.touch()
        return candidate

    def update_item_quantity(self, item_id: UUID, quantity: int) -> None:
        """Update the quantity of a line; zero or less removes it."""
        item = self.get_item(item_id)
        if not is_whole_count(quantity):
            raise ValidationError("Quantity must be a whole number", field="quantity")
        if quantity <= 0:
            self.remove_item(item_id)
            return
        item.change_quantity(quantity)
        self.touch()

    def update_item_dimension(self, item_id: UUID, custom_length: Decimal) -> CartItem:
        """Change the custom length of a variable-dimension line."""
        item = self.get_item(item_id)
        item.change_length(custom_length)
        duplicate = next(
            (other for other in self.items if other is not item and other.line_key == item.line_key),
            None,
        )
        if duplicate:
            duplicate.change_quantity(duplicate.quantity + item.quantity)
            self.items = [i for i in self.items if i is not item]
            item = duplicate
        self.touch()
        return item

    def remove_item(self, item_id: UUID) -> None:
        """Remove a line from the cart."""
        item = self.get_item(item_id)
        self.items = [i for i in self.items if i is not item]
        self.touch()

    def clear(self) -> None:
        """Clear all items from the cart."""
        self.items = []
        self.touch()

    def get_item(self, item_id: UUID) -> CartItem:
        for item in self.items:
            if item.id == item_id:
                return item
        raise CartItemNotFoundError(str(item_id))

    def _find_by_key(self, candidate: CartItem) -> Optional[CartItem]:
        for item in self.items:
            if item.line_key == candidate.line_key:
                return item
        return None

    @property
    def subtotal(self) -> Decimal:
        return sum((item.line_subtotal for item in self.items), Decimal('0'))

    @property
    def item_count(self) -> int:
        """Get the total number of items."""
        return sum(item.quantity for item in self.items)

    @property
    def is_empty(self) -> bool:
        """Check if the cart is empty."""
        return len(self.items) == 0
