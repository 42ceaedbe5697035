# Django models
from .address_model import AddressModel

__all__ = ['AddressModel']
