"""
Product entity (Aggregate Root).
"""
from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional
from uuid import UUID

from shared.domain import AggregateRoot, quantize, to_decimal
from ..value_objects.dimension_unit import DimensionUnit
from ..value_objects.sku import SKU
from ..value_objects.stock import Stock
from ..events import ProductCreated, ProductPriceUpdated, StockUpdated
from ..exceptions import InsufficientStockError, InvalidDimensionError, InvalidProductError

HUNDRED = Decimal('100')


def compute_tax_amount(base_amount: Decimal, tax_rate: Decimal) -> Decimal:
    """Per-unit tax for a percentage rate, rounded half-up to cents."""
    return (base_amount * tax_rate / HUNDRED).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)


@dataclass(eq=False)
class Product(AggregateRoot):
    """Product entity representing a sellable item.

    Fixed-price products carry a pre-tax ``base_amount`` and a percentage
    ``tax_rate``; the per-unit ``tax_amount`` and display ``price`` derive
    from them. Variable-dimension (cut-to-size) products are priced as
    ``fixed_height x custom_length x variable_dimension_rate`` and the
    rate already includes tax.
    """
    name: str
    sku: SKU
    base_amount: Decimal
    tax_rate: Decimal
    stock: Stock
    category_id: UUID
    description: str = ""
    brand: str = ""
    currency: str = "USD"
    is_active: bool = True
    is_variable_dimension: bool = False
    fixed_height: Optional[Decimal] = None
    variable_dimension_rate: Optional[Decimal] = None
    max_length: Optional[Decimal] = None
    dimension_unit: Optional[DimensionUnit] = None
    images: List[str] = field(default_factory=list)

    def __post_init__(self):
        self.base_amount = to_decimal(self.base_amount)
        self.tax_rate = to_decimal(self.tax_rate)
        self._validate()

    def _validate(self) -> None:
        """Validate product data."""
        if not self.name or len(self.name) < 2:
            raise InvalidProductError("Product name must be at least 2 characters")
        if self.base_amount < 0:
            raise InvalidProductError("Base amount must be non-negative")
        if self.tax_rate < 0:
            raise InvalidProductError("Tax rate must be non-negative")
        if self.is_variable_dimension:
            if self.fixed_height is None or self.variable_dimension_rate is None:
                raise InvalidProductError(
                    "Variable-dimension products need a fixed height and a dimension rate"
                )
            if self.fixed_height <= 0 or self.variable_dimension_rate < 0:
                raise InvalidProductError("Fixed height must be positive and rate non-negative")

    @classmethod
    def create(
        cls,
        name: str,
        sku: str,
        base_amount: Decimal,
        tax_rate: Decimal,
        stock_quantity: int,
        category_id: UUID,
        description: str = "",
        brand: str = "",
        currency: str = "USD",
        images: Optional[List[str]] = None,
    ) -> 'Product':
        """Factory method to create a fixed-price product."""
        product = cls(
            name=name,
            sku=SKU(value=sku),
            base_amount=base_amount,
            tax_rate=tax_rate,
            stock=Stock(quantity=stock_quantity),
            category_id=category_id,
            description=description,
            brand=brand,
            currency=currency,
            images=images or [],
        )
        product._record_created()
        return product

    @classmethod
    def create_variable_dimension(
        cls,
        name: str,
        sku: str,
        fixed_height: Decimal,
        variable_dimension_rate: Decimal,
        dimension_unit: DimensionUnit,
        stock_quantity: int,
        category_id: UUID,
        max_length: Optional[Decimal] = None,
        description: str = "",
        brand: str = "",
        currency: str = "USD",
    ) -> 'Product':
        """Factory method to create a cut-to-size product."""
        product = cls(
            name=name,
            sku=SKU(value=sku),
            base_amount=Decimal('0'),
            tax_rate=Decimal('0'),
            stock=Stock(quantity=stock_quantity),
            category_id=category_id,
            description=description,
            brand=brand,
            currency=currency,
            is_variable_dimension=True,
            fixed_height=to_decimal(fixed_height),
            variable_dimension_rate=to_decimal(variable_dimension_rate),
            max_length=to_decimal(max_length) if max_length is not None else None,
            dimension_unit=dimension_unit,
        )
        product._record_created()
        return product

    def _record_created(self) -> None:
        self.record_event(
            ProductCreated(
                product_id=self.id,
                sku=self.sku.value,
                price=self.price,
                is_variable_dimension=self.is_variable_dimension,
            )
        )

    @property
    def tax_amount(self) -> Decimal:
        """Per-unit tax amount."""
        return compute_tax_amount(self.base_amount, self.tax_rate)

    @property
    def price(self) -> Decimal:
        """Per-unit display price including tax."""
        return self.base_amount + self.tax_amount

    def update_price_components(self, base_amount: Decimal, tax_rate: Decimal) -> None:
        """Change the pre-tax amount and tax rate."""
        base_amount = to_decimal(base_amount)
        tax_rate = to_decimal(tax_rate)
        if base_amount < 0 or tax_rate < 0:
            raise InvalidProductError("Base amount and tax rate must be non-negative")
        self.base_amount = base_amount
        self.tax_rate = tax_rate
        self.touch()
        self.record_event(
            ProductPriceUpdated(
                product_id=self.id,
                base_amount=self.base_amount,
                tax_rate=self.tax_rate,
                price=self.price,
            )
        )

    def validate_custom_length(self, custom_length: Optional[Decimal]) -> Decimal:
        """Return the custom length as Decimal or raise InvalidDimensionError."""
        if not self.is_variable_dimension:
            raise InvalidDimensionError(f"Product '{self.name}' is not sold by dimension")
        if custom_length is None:
            raise InvalidDimensionError("Custom length is required for variable-dimension products")
        custom_length = to_decimal(custom_length)
        if custom_length <= 0:
            raise InvalidDimensionError("Custom length must be greater than 0")
        if self.max_length is not None and custom_length > self.max_length:
            unit = self.dimension_unit.symbol if self.dimension_unit else ''
            raise InvalidDimensionError(
                f"Custom length cannot exceed maximum length of {self.max_length} {unit}".rstrip()
            )
        return custom_length

    def price_for_length(self, custom_length: Decimal) -> Decimal:
        """Unit price for a custom length; the dimension rate already includes tax."""
        custom_length = self.validate_custom_length(custom_length)
        return quantize(self.fixed_height * custom_length * self.variable_dimension_rate)

    def reserve_stock(self, quantity: int) -> None:
        """Decrease stock by the given quantity."""
        if not self.stock.covers(quantity):
            raise InsufficientStockError(
                product_id=str(self.id),
                requested=quantity,
                available=self.stock.quantity,
            )
        self._adjust_stock(-quantity)

    def release_stock(self, quantity: int) -> None:
        """Return previously reserved stock."""
        self._adjust_stock(quantity)

    def _adjust_stock(self, delta: int) -> None:
        self.stock = self.stock.adjusted(delta)
        self.touch()
        self.record_event(StockUpdated(product_id=self.id, delta=delta, on_hand=self.stock.quantity))

    def deactivate(self) -> None:
        """Take the product off sale; carts can no longer add it."""
        self.is_active = False
        self.touch()

    @property
    def is_in_stock(self) -> bool:
        """Check if product is in stock."""
        return self.stock.is_available

    @property
    def is_purchasable(self) -> bool:
        return self.is_active and self.is_in_stock
