# Value objects
from .address_type import AddressType

__all__ = ['AddressType']
