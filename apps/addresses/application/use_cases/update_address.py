"""
Update address use case.
"""
import logging
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from ...domain.repositories.address_repository import AddressRepository
from ...domain.services.default_address_policy import choose_replacement_default
from ..dtos.address_dto import AddressDTO, AddressUpdateDTO
from .base import get_owned_address

logger = logging.getLogger(__name__)


@dataclass
class UpdateAddressUseCase(UseCase[AddressUpdateDTO, AddressDTO]):
    """
    Partial update of an address.

    ``is_default=True`` promotes the address; ``is_default=False`` on the
    current default hands the flag to the oldest other address. A user's
    only address stays the default.
    """

    address_repository: AddressRepository

    def execute(self, input_dto: AddressUpdateDTO) -> UseCaseResult[AddressDTO]:
        repository = self.address_repository
        address = get_owned_address(repository, input_dto.user_id, input_dto.address_id)

        address.update(
            street=input_dto.street,
            street2=input_dto.street2,
            city=input_dto.city,
            state=input_dto.state,
            postal_code=input_dto.postal_code,
            country=input_dto.country,
            type=input_dto.type,
        )
        saved = repository.save(address)

        if input_dto.is_default is True and not saved.is_default:
            saved = repository.set_default(input_dto.user_id, saved.id)
        elif input_dto.is_default is False and saved.is_default:
            others = [a for a in repository.find_by_user_id(input_dto.user_id) if a.id != saved.id]
            replacement = choose_replacement_default(others)
            if replacement is None:
                logger.info(f"Kept only address {saved.id} as default for user {input_dto.user_id}")
            else:
                repository.set_default(input_dto.user_id, replacement.id)
                saved = repository.find_by_id(saved.id)

        return UseCaseResult.ok(AddressDTO.from_entity(saved))
