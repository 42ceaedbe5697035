"""
Helpers shared by the address use cases.
"""
from uuid import UUID

from ...domain.entities.address import Address
from ...domain.exceptions import AddressNotFoundError
from ...domain.repositories.address_repository import AddressRepository


def get_owned_address(repository: AddressRepository, user_id: str, address_id: UUID) -> Address:
    """Load an address, treating another user's address as missing."""
    address = repository.find_by_id(address_id)
    if address is None or address.user_id != str(user_id):
        raise AddressNotFoundError(str(address_id))
    return address
