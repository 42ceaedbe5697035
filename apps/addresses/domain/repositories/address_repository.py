"""
Address repository interface.
"""
from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from ..entities.address import Address


class AddressRepository(ABC):
    """Abstract repository for Address aggregate."""

    @abstractmethod
    def save(self, address: Address) -> Address:
        """Save an address."""
        pass

    @abstractmethod
    def find_by_id(self, address_id: UUID) -> Optional[Address]:
        """Find an address by ID."""
        pass

    @abstractmethod
    def find_by_user_id(self, user_id: str) -> List[Address]:
        """All addresses of a user in creation order."""
        pass

    @abstractmethod
    def exists_for_user(self, user_id: str) -> bool:
        """Check whether the user has any address."""
        pass

    @abstractmethod
    def set_default(self, user_id: str, address_id: UUID) -> Address:
        """Make one address the user's only default in a single step."""
        pass

    @abstractmethod
    def delete(self, address_id: UUID) -> bool:
        """Delete an address."""
        pass
