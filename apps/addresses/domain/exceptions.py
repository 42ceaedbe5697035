"""
Address domain exceptions.
"""
from shared.domain.exceptions import EntityNotFoundError, ValidationError


class AddressNotFoundError(EntityNotFoundError):
    entity_name = "Address"
    not_found_code = "ADDRESS_NOT_FOUND"


class InvalidAddressError(ValidationError):
    """Raised when address data is incomplete."""

    def __init__(self, message: str, field: str = None):
        super().__init__(message=message, field=field or "address")


__all__ = ['AddressNotFoundError', 'InvalidAddressError']
