# Repository implementations
from .django_address_repository import DjangoAddressRepository

__all__ = ['DjangoAddressRepository']
