"""
Django ORM implementation of AddressRepository.
"""
import logging
from typing import List, Optional
from uuid import UUID

from django.db import transaction

from shared.domain import utc_now
from ...domain.entities.address import Address
from ...domain.exceptions import AddressNotFoundError
from ...domain.repositories.address_repository import AddressRepository
from ...domain.value_objects.address_type import AddressType
from ..models.address_model import AddressModel

logger = logging.getLogger(__name__)


class DjangoAddressRepository(AddressRepository):
    """Django ORM based address repository implementation."""

    def save(self, address: Address) -> Address:
        """Save an address entity."""
        with transaction.atomic():
            model, created = AddressModel.objects.update_or_create(
                id=address.id,
                defaults={
                    'user_id': address.user_id,
                    'street': address.street,
                    'street2': address.street2,
                    'city': address.city,
                    'state': address.state,
                    'postal_code': address.postal_code,
                    'country': address.country,
                    'type': address.type.value,
                    'is_default': address.is_default,
                    'created_at': address.created_at,
                }
            )
            return self._to_entity(model)

    def find_by_id(self, address_id: UUID) -> Optional[Address]:
        """Find an address by ID."""
        try:
            model = AddressModel.objects.get(id=address_id)
            return self._to_entity(model)
        except AddressModel.DoesNotExist:
            return None

    def find_by_user_id(self, user_id: str) -> List[Address]:
        """All addresses of a user in creation order."""
        models = AddressModel.objects.filter(user_id=str(user_id)).order_by('created_at')
        return [self._to_entity(model) for model in models]

    def exists_for_user(self, user_id: str) -> bool:
        return AddressModel.objects.filter(user_id=str(user_id)).exists()

    def set_default(self, user_id: str, address_id: UUID) -> Address:
        """Unset every other default and set this one inside one transaction."""
        with transaction.atomic():
            updated = (
                AddressModel.objects
                .filter(id=address_id, user_id=str(user_id))
                .update(is_default=True, updated_at=utc_now())
            )
            if not updated:
                raise AddressNotFoundError(str(address_id))
            (
                AddressModel.objects
                .filter(user_id=str(user_id), is_default=True)
                .exclude(id=address_id)
                .update(is_default=False, updated_at=utc_now())
            )
            logger.debug(f"Default address for user {user_id} set to {address_id}")
            return self._to_entity(AddressModel.objects.get(id=address_id))

    def delete(self, address_id: UUID) -> bool:
        """Delete an address."""
        deleted, _ = AddressModel.objects.filter(id=address_id).delete()
        return deleted > 0

    def _to_entity(self, model: AddressModel) -> Address:
        """Convert Django model to domain entity."""
        return Address(
            id=model.id,
            user_id=model.user_id,
            street=model.street,
            street2=model.street2,
            city=model.city,
            state=model.state,
            postal_code=model.postal_code,
            country=model.country,
            type=AddressType(model.type),
            is_default=model.is_default,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
