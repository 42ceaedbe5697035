"""
Address type value object.
"""
from enum import Enum


class AddressType(str, Enum):
    SHIPPING = 'SHIPPING'
    BILLING = 'BILLING'
    OTHER = 'OTHER'
