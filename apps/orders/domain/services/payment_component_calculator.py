"""
Payment component calculation.

Tax, shipping, discount and processing fee are derived from the cart
lines and the checkout codes only. Nothing here reads the database or
keeps state between calls.
"""
import logging
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List, Optional, Sequence

from shared.domain import Money, ValidationError, quantize, to_decimal
from ..value_objects.checkout_codes import DiscountCode, PaymentMethod, ShippingMethod
from ..value_objects.payment_component import PaymentComponent, PaymentComponentType
from ..value_objects.product_snapshot import PricingMode

logger = logging.getLogger(__name__)

ZERO = Decimal('0')
HUNDRED = Decimal('100')

FREE_SHIPPING_THRESHOLD = Decimal('50.00')
STANDARD_SHIPPING_RATE = Decimal('9.99')
EXPRESS_SHIPPING_RATE = Decimal('19.99')

COD_FEE = Decimal('2.99')
INTERNATIONAL_CARD_FEE_RATE = Decimal('0.03')

# code -> (percentage of subtotal, flat amount, label, description)
DISCOUNTS = {
    DiscountCode.SAVE10: (Decimal('0.10'), None, "Save 10% Discount", "10% discount on your order"),
    DiscountCode.SAVE20: (Decimal('0.20'), None, "Save 20% Discount", "20% discount on your order"),
    DiscountCode.FIRST15: (Decimal('0.15'), None, "First Customer Discount", "15% discount for first-time customers"),
    DiscountCode.FLAT5: (None, Decimal('5.00'), "$5 Off Discount", "$5 flat discount on your order"),
    DiscountCode.FLAT10: (None, Decimal('10.00'), "$10 Off Discount", "$10 flat discount on your order"),
}

SHIPPING_OPTIONS = {
    ShippingMethod.EXPRESS: (
        EXPRESS_SHIPPING_RATE, "Express Shipping", "Express delivery within 2-3 business days"
    ),
    ShippingMethod.OVERNIGHT: (
        EXPRESS_SHIPPING_RATE, "Overnight Shipping", "Overnight delivery by next business day"
    ),
}
STANDARD_SHIPPING = (
    STANDARD_SHIPPING_RATE, "Standard Shipping", "Standard delivery within 5-7 business days"
)


def _is_blank(code: Optional[str]) -> bool:
    return code is None or not str(code).strip()


@dataclass(frozen=True)
class PaymentComponentBreakdown:
    """Every component computed for one set of inputs."""
    tax: PaymentComponent
    shipping: PaymentComponent
    discount: Optional[PaymentComponent] = None
    fee: Optional[PaymentComponent] = None

    @property
    def components(self) -> List[PaymentComponent]:
        """Components to show: tax and shipping always, discount and fee when non-zero."""
        shown = [self.tax, self.shipping]
        for optional in (self.discount, self.fee):
            if optional is not None and not optional.is_zero:
                shown.append(optional)
        return shown

    @property
    def discount_amount(self) -> Decimal:
        return self.discount.amount if self.discount else ZERO

    @property
    def fee_amount(self) -> Decimal:
        return self.fee.amount if self.fee else ZERO


class PaymentComponentCalculator:
    """
    Computes tax, shipping, discount and processing fee components.

    ``lines`` are cart lines exposing ``pricing_mode``, ``quantity``,
    ``unit_base_amount`` and ``unit_tax_amount``. ``address`` is anything
    with a ``state`` attribute, or None.
    """

    def __init__(self, currency: str = "USD"):
        self.currency = currency

    def subtotal(self, lines: Iterable) -> Decimal:
        """Sum of line base amounts, before tax."""
        total = Money.zero(self.currency)
        for line in lines:
            self._check_line(line)
            total = total.add(self._money(line.unit_base_amount).multiply(line.quantity))
        return total.rounded().amount

    def calculate_tax(self, lines: Sequence, address=None) -> PaymentComponent:
        lines = list(lines)
        tax_money = Money.zero(self.currency)
        base_money = Money.zero(self.currency)
        for line in lines:
            self._check_line(line)
            if line.pricing_mode is PricingMode.VARIABLE_DIMENSION:
                continue
            tax_money = tax_money.add(self._money(line.unit_tax_amount).multiply(line.quantity))
            base_money = base_money.add(self._money(line.unit_base_amount).multiply(line.quantity))
        tax, base = tax_money.amount, base_money.amount

        if lines and all(line.pricing_mode is PricingMode.VARIABLE_DIMENSION for line in lines):
            logger.debug("Tax calculation: every line is variable-dimension, tax included")
            return PaymentComponent(
                type=PaymentComponentType.TAX,
                amount=ZERO,
                label="Tax included in pricing",
                description="Tax is included in the dimension rate",
            )

        rate = (tax / base * HUNDRED) if base else ZERO
        whole = rate.quantize(Decimal('1'), rounding=ROUND_HALF_UP)
        one_place = rate.quantize(Decimal('0.1'), rounding=ROUND_HALF_UP)
        state = self._state_of(address)
        if state:
            label = f"{state} Tax ({whole}%)"
            description = f"State tax for {state} at {one_place}%"
        else:
            label = f"Tax ({whole}%)"
            description = "Standard tax rate applied"

        logger.debug(f"Tax calculation result: rate={rate}, amount={tax}, label={label}")
        return PaymentComponent(
            type=PaymentComponentType.TAX,
            amount=tax,
            label=label,
            description=description,
        )

    def calculate_shipping(
        self,
        subtotal: Decimal,
        address=None,
        shipping_method: Optional[str] = None,
    ) -> PaymentComponent:
        subtotal = self._check_subtotal(subtotal)
        if subtotal >= FREE_SHIPPING_THRESHOLD:
            threshold = Money(FREE_SHIPPING_THRESHOLD, self.currency).formatted
            return PaymentComponent(
                type=PaymentComponentType.SHIPPING,
                amount=ZERO,
                label="Free Shipping",
                description=f"Free shipping on orders over {threshold}",
            )

        method = ShippingMethod.parse(shipping_method)
        amount, label, description = SHIPPING_OPTIONS.get(method, STANDARD_SHIPPING)
        logger.debug(f"Shipping calculation result: method={method}, amount={amount}")
        return PaymentComponent(
            type=PaymentComponentType.SHIPPING,
            amount=amount,
            label=label,
            description=description,
        )

    def calculate_discount(self, subtotal: Decimal, discount_code: Optional[str] = None) -> PaymentComponent:
        subtotal = self._check_subtotal(subtotal)
        code = DiscountCode.parse(discount_code)
        if code is None:
            if not _is_blank(discount_code):
                logger.debug(f"Unknown discount code ignored: {discount_code}")
            return PaymentComponent(
                type=PaymentComponentType.DISCOUNT,
                amount=ZERO,
                label="Discount",
                description="No discount applied",
                is_negative=True,
            )

        percentage, flat, label, description = DISCOUNTS[code]
        amount = subtotal * percentage if percentage is not None else flat
        # a flat discount on a small cart never takes the subtotal below zero
        amount = min(quantize(amount), subtotal)
        logger.debug(f"Discount calculation result: code={code.name}, amount={amount}")
        return PaymentComponent(
            type=PaymentComponentType.DISCOUNT,
            amount=amount,
            label=label,
            description=description,
            is_negative=True,
        )

    def calculate_processing_fee(
        self,
        subtotal: Decimal,
        payment_method: Optional[str] = None,
    ) -> PaymentComponent:
        subtotal = self._check_subtotal(subtotal)
        method = PaymentMethod.parse(payment_method)
        if method is PaymentMethod.CASH_ON_DELIVERY:
            amount, label, description = (
                COD_FEE, "Cash on Delivery Fee", "Additional fee for cash on delivery service"
            )
        elif method is PaymentMethod.INTERNATIONAL_CARD:
            amount, label, description = (
                subtotal * INTERNATIONAL_CARD_FEE_RATE,
                "International Card Fee",
                "3% fee for international card transactions",
            )
        else:
            amount, label, description = ZERO, "Processing Fee", "No processing fee"

        logger.debug(f"Processing fee calculation result: method={method}, amount={amount}")
        return PaymentComponent(
            type=PaymentComponentType.FEE,
            amount=amount,
            label=label,
            description=description,
        )

    def calculate_all_components(
        self,
        lines: Sequence,
        address=None,
        shipping_method: Optional[str] = None,
        discount_code: Optional[str] = None,
        payment_method: Optional[str] = None,
    ) -> PaymentComponentBreakdown:
        lines = list(lines)
        subtotal = self.subtotal(lines)
        return PaymentComponentBreakdown(
            tax=self.calculate_tax(lines, address),
            shipping=self.calculate_shipping(subtotal, address, shipping_method),
            discount=None if _is_blank(discount_code) else self.calculate_discount(subtotal, discount_code),
            fee=None if _is_blank(payment_method) else self.calculate_processing_fee(subtotal, payment_method),
        )

    def _money(self, amount) -> Money:
        return Money(amount if amount is not None else ZERO, self.currency)

    @staticmethod
    def _check_line(line) -> None:
        if line.quantity is None or line.quantity < 0:
            raise ValidationError("Line quantity must not be negative", field="quantity")
        if line.unit_base_amount is None or to_decimal(line.unit_base_amount) < 0:
            raise ValidationError("Line price must not be negative", field="unit_base_amount")

    @staticmethod
    def _check_subtotal(subtotal: Decimal) -> Decimal:
        if subtotal is None:
            raise ValidationError("Subtotal is required", field="subtotal")
        subtotal = to_decimal(subtotal)
        if subtotal < 0:
            raise ValidationError("Subtotal must not be negative", field="subtotal")
        return subtotal

    @staticmethod
    def _state_of(address) -> str:
        if address is None:
            return ""
        return (getattr(address, 'state', '') or '').strip().upper()
