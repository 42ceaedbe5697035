"""
Tests for payment component calculation and cart totals.
"""
from decimal import Decimal

import pytest

from apps.orders.domain.services import PaymentComponentCalculator, calculate_cart_totals
from apps.orders.domain.value_objects import PaymentComponent, PaymentComponentType
from shared.domain import Money, ValidationError
from tests.builders import make_address, make_line, make_variable_line


@pytest.fixture
def calculator():
    return PaymentComponentCalculator()


class TestTax:

    def test_sums_unit_tax_times_quantity(self, calculator):
        lines = [make_line('10.00', '0.80', quantity=2), make_line('5.50', '0.44')]

        tax = calculator.calculate_tax(lines)

        assert tax.type is PaymentComponentType.TAX
        assert tax.amount == Decimal('2.04')

    def test_label_names_the_state_and_effective_rate(self, calculator):
        lines = [make_line('10.00', '0.80', quantity=2), make_line('5.50', '0.44')]

        tax = calculator.calculate_tax(lines, make_address(state='ca'))

        assert tax.label == "CA Tax (8%)"
        assert tax.description == "State tax for CA at 8.0%"

    def test_label_without_address(self, calculator):
        tax = calculator.calculate_tax([make_line('10.00', '0.80')])

        assert tax.label == "Tax (8%)"
        assert tax.description == "Standard tax rate applied"

    def test_variable_dimension_only_cart_has_tax_included(self, calculator):
        tax = calculator.calculate_tax([make_variable_line(), make_variable_line(length='4')])

        assert tax.amount == Decimal('0.00')
        assert tax.label == "Tax included in pricing"

    def test_mixed_cart_taxes_fixed_lines_only(self, calculator):
        lines = [make_line('20.00', '1.60'), make_variable_line(length='4', quantity=3)]

        tax = calculator.calculate_tax(lines)

        assert tax.amount == Decimal('1.60')
        assert tax.label == "Tax (8%)"

    def test_rejects_negative_price(self, calculator):
        line = make_line('10.00', '0.80')
        object.__setattr__(line.product, 'base_amount', Decimal('-1'))

        with pytest.raises(ValidationError):
            calculator.calculate_tax([line])


class TestShipping:

    @pytest.mark.parametrize('subtotal,expected', [
        ('0.00', '9.99'),
        ('49.99', '9.99'),
        ('50.00', '0.00'),
        ('120.00', '0.00'),
    ])
    def test_free_shipping_threshold(self, calculator, subtotal, expected):
        assert calculator.calculate_shipping(Decimal(subtotal)).amount == Decimal(expected)

    def test_free_shipping_label(self, calculator):
        shipping = calculator.calculate_shipping(Decimal('75'))

        assert shipping.label == "Free Shipping"
        assert shipping.description == "Free shipping on orders over $50.00"

    def test_express_and_overnight(self, calculator):
        express = calculator.calculate_shipping(Decimal('30'), shipping_method='EXPRESS')
        overnight = calculator.calculate_shipping(Decimal('30'), shipping_method='overnight')

        assert express.amount == Decimal('19.99')
        assert express.label == "Express Shipping"
        assert overnight.amount == Decimal('19.99')
        assert overnight.label == "Overnight Shipping"

    def test_unknown_method_falls_back_to_standard(self, calculator):
        shipping = calculator.calculate_shipping(Decimal('30'), shipping_method='drone')

        assert shipping.amount == Decimal('9.99')
        assert shipping.label == "Standard Shipping"

    def test_rejects_negative_subtotal(self, calculator):
        with pytest.raises(ValidationError):
            calculator.calculate_shipping(Decimal('-0.01'))


class TestDiscount:

    @pytest.mark.parametrize('code,subtotal,expected', [
        ('SAVE10', '80.00', '8.00'),
        ('save20', '80.00', '16.00'),
        ('FIRST15', '33.33', '5.00'),
        ('FLAT5', '80.00', '5.00'),
        ('FLAT10', '80.00', '10.00'),
    ])
    def test_known_codes(self, calculator, code, subtotal, expected):
        discount = calculator.calculate_discount(Decimal(subtotal), code)

        assert discount.amount == Decimal(expected)
        assert discount.is_negative

    def test_flat_discount_is_capped_at_subtotal(self, calculator):
        assert calculator.calculate_discount(Decimal('6.00'), 'FLAT10').amount == Decimal('6.00')

    def test_unknown_code_is_a_zero_discount(self, calculator):
        discount = calculator.calculate_discount(Decimal('80'), 'BOGUS')

        assert discount.amount == Decimal('0.00')
        assert discount.description == "No discount applied"


class TestProcessingFee:

    def test_cash_on_delivery(self, calculator):
        fee = calculator.calculate_processing_fee(Decimal('20'), 'cod')

        assert fee.amount == Decimal('2.99')
        assert fee.label == "Cash on Delivery Fee"

    def test_international_card_is_three_percent(self, calculator):
        assert calculator.calculate_processing_fee(Decimal('100'), 'international_card').amount == Decimal('3.00')

    def test_domestic_methods_are_free(self, calculator):
        for method in ('razorpay_card', 'upi', 'wallet', 'net_banking', None):
            assert calculator.calculate_processing_fee(Decimal('100'), method).amount == Decimal('0.00')


class TestAllComponents:

    def test_tax_and_shipping_always_shown(self, calculator):
        breakdown = calculator.calculate_all_components([make_line('10.00', '0.80')])

        assert [c.type for c in breakdown.components] == [
            PaymentComponentType.TAX,
            PaymentComponentType.SHIPPING,
        ]

    def test_discount_and_fee_shown_when_non_zero(self, calculator):
        breakdown = calculator.calculate_all_components(
            [make_line('10.00', '0.80', quantity=2)],
            discount_code='SAVE10',
            payment_method='cod',
        )

        assert [c.type for c in breakdown.components] == [
            PaymentComponentType.TAX,
            PaymentComponentType.SHIPPING,
            PaymentComponentType.DISCOUNT,
            PaymentComponentType.FEE,
        ]

    def test_zero_discount_and_fee_are_hidden(self, calculator):
        breakdown = calculator.calculate_all_components(
            [make_line('10.00', '0.80')],
            discount_code='BOGUS',
            payment_method='razorpay_card',
        )

        assert len(breakdown.components) == 2
        assert breakdown.discount_amount == Decimal('0.00')
        assert breakdown.fee_amount == Decimal('0.00')


class TestCartTotals:

    def test_small_cart_pays_standard_shipping(self):
        totals = calculate_cart_totals([make_line('10.00', '0.80', quantity=2)])

        assert totals.subtotal == Decimal('20.00')
        assert totals.tax_amount == Decimal('1.60')
        assert totals.shipping_amount == Decimal('9.99')
        assert totals.total_amount == Decimal('31.59')
        assert totals.item_count == 2

    def test_discount_and_fee(self):
        totals = calculate_cart_totals(
            [make_line('10.00', '0.80', quantity=2)],
            discount_code='SAVE10',
            payment_method='cash_on_delivery',
        )

        assert totals.discount_amount == Decimal('2.00')
        assert totals.fee_amount == Decimal('2.99')
        assert totals.total_amount == Decimal('32.58')

    def test_large_cart_ships_free(self):
        totals = calculate_cart_totals(
            [make_line('30.00', '3.00', quantity=2)],
            payment_method='international_card',
        )

        assert totals.shipping_amount == Decimal('0.00')
        assert totals.fee_amount == Decimal('1.80')
        assert totals.total_amount == Decimal('67.80')

    def test_variable_dimension_lines(self):
        totals = calculate_cart_totals([make_variable_line('2', '1.25', '3.5', quantity=2)])

        assert totals.subtotal == Decimal('17.50')
        assert totals.tax_amount == Decimal('0.00')
        assert totals.total_amount == Decimal('27.49')

    def test_empty_cart(self):
        totals = calculate_cart_totals([])

        assert totals.subtotal == Decimal('0.00')
        assert totals.shipping_amount == Decimal('9.99')
        assert totals.item_count == 0

    @pytest.mark.parametrize('discount,method', [
        (None, None),
        ('SAVE20', 'cod'),
        ('FLAT10', 'international_card'),
        ('FIRST15', 'upi'),
    ])
    def test_components_add_up_to_the_total(self, discount, method):
        lines = [make_line('12.49', '1.00', quantity=3), make_variable_line(length='2.2')]

        totals = calculate_cart_totals(lines, discount_code=discount, payment_method=method)

        assert totals.total_amount == (
            totals.subtotal + totals.tax_amount + totals.shipping_amount
            + totals.fee_amount - totals.discount_amount
        )
        assert totals.subtotal + sum(c.effective_amount for c in totals.components) == totals.total_amount

    def test_as_order_totals(self):
        totals = calculate_cart_totals([make_line('10.00', '0.80')])

        assert totals.as_order_totals().total_amount == totals.total_amount


class TestValueObjects:

    def test_payment_component_rejects_negative_amount(self):
        with pytest.raises(ValidationError):
            PaymentComponent(type=PaymentComponentType.TAX, amount=Decimal('-1'), label="Tax")

    def test_payment_component_rounds_half_up(self):
        component = PaymentComponent(type=PaymentComponentType.FEE, amount=Decimal('0.125'), label="Fee")

        assert component.amount == Decimal('0.13')

    def test_money_formatting(self):
        assert Money(Decimal('1234.5')).formatted == "$1,234.50"
        assert Money(Decimal('10'), 'gbp').formatted == "GBP 10.00"

    def test_money_currency_mismatch(self):
        with pytest.raises(ValueError):
            Money(Decimal('1'), 'USD').add(Money(Decimal('1'), 'EUR'))

    def test_money_arithmetic_stays_decimal(self):
        line = Money(0.1).multiply(3)

        assert line.amount == Decimal('0.3')
        assert Money.zero('usd').add(line).subtract(Money('0.05')).rounded() == Money(Decimal('0.25'))
        assert Money('2.675').rounded().amount == Decimal('2.68')
        assert Money.zero().is_zero
        with pytest.raises(ValueError):
            Money('1', 'USD').subtract(Money('1', 'INR'))
