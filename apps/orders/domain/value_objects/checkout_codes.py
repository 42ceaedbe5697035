"""
Codes accepted at checkout: shipping methods, discount codes and payment methods.

Parsing is case-insensitive and returns None for blank or unknown input.
"""
from enum import Enum
from typing import Optional


class _CodeEnum(str, Enum):

    @classmethod
    def parse(cls, code: Optional[str]):
        if code is None:
            return None
        if isinstance(code, cls):
            return code
        normalized = str(code).strip().lower()
        if not normalized:
            return None
        normalized = cls._aliases().get(normalized, normalized)
        for member in cls:
            if member.value == normalized:
                return member
        return None

    @classmethod
    def _aliases(cls) -> dict:
        return {}


class ShippingMethod(_CodeEnum):
    STANDARD = 'standard'
    GROUND = 'ground'
    EXPRESS = 'express'
    OVERNIGHT = 'overnight'


class DiscountCode(_CodeEnum):
    SAVE10 = 'save10'
    SAVE20 = 'save20'
    FIRST15 = 'first15'
    FLAT5 = 'flat5'
    FLAT10 = 'flat10'


class PaymentMethod(_CodeEnum):
    RAZORPAY_CARD = 'razorpay_card'
    RAZORPAY_UPI = 'razorpay_upi'
    NET_BANKING = 'net_banking'
    WALLET = 'wallet'
    INTERNATIONAL_CARD = 'international_card'
    CASH_ON_DELIVERY = 'cash_on_delivery'

    @classmethod
    def _aliases(cls) -> dict:
        return {
            'cod': 'cash_on_delivery',
            'card': 'razorpay_card',
            'cards': 'razorpay_card',
            'upi': 'razorpay_upi',
        }

    @property
    def requires_capture(self) -> bool:
        """Whether an external gateway must collect payment before the order is created."""
        return self is not PaymentMethod.CASH_ON_DELIVERY
