"""
Address DTOs.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from ...domain.entities.address import Address
from ...domain.value_objects.address_type import AddressType


@dataclass
class AddressCreateDTO:
    """DTO for address creation."""
    user_id: str
    street: str
    city: str
    state: str
    postal_code: str
    country: str
    street2: str = ""
    type: AddressType = AddressType.SHIPPING
    is_default: bool = False


@dataclass
class AddressUpdateDTO:
    """DTO for a partial address update."""
    user_id: str
    address_id: UUID
    street: Optional[str] = None
    street2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    type: Optional[AddressType] = None
    is_default: Optional[bool] = None


@dataclass
class AddressRefDTO:
    """Identifies one address of one user."""
    user_id: str
    address_id: UUID


@dataclass
class AddressDTO:
    """DTO for address output."""
    id: UUID
    street: str
    street2: str
    city: str
    state: str
    postal_code: str
    country: str
    type: str
    is_default: bool
    full_address: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, address: Address) -> 'AddressDTO':
        """Create DTO from entity."""
        return cls(
            id=address.id,
            street=address.street,
            street2=address.street2,
            city=address.city,
            state=address.state,
            postal_code=address.postal_code,
            country=address.country,
            type=address.type.value,
            is_default=address.is_default,
            full_address=address.full_address,
            created_at=address.created_at,
            updated_at=address.updated_at,
        )
