"""
Create address use case.
"""
import logging
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from ...domain.entities.address import Address
from ...domain.repositories.address_repository import AddressRepository
from ...domain.services.default_address_policy import should_be_default_on_create
from ..dtos.address_dto import AddressCreateDTO, AddressDTO

logger = logging.getLogger(__name__)


@dataclass
class CreateAddressUseCase(UseCase[AddressCreateDTO, AddressDTO]):
    """Use case for adding an address; the first one is always the default."""

    address_repository: AddressRepository

    def execute(self, input_dto: AddressCreateDTO) -> UseCaseResult[AddressDTO]:
        has_existing = self.address_repository.exists_for_user(input_dto.user_id)
        make_default = should_be_default_on_create(has_existing, input_dto.is_default)

        address = Address.create(
            user_id=input_dto.user_id,
            street=input_dto.street,
            street2=input_dto.street2,
            city=input_dto.city,
            state=input_dto.state,
            postal_code=input_dto.postal_code,
            country=input_dto.country,
            type=input_dto.type,
            is_default=False,
        )
        saved = self.address_repository.save(address)

        if make_default:
            saved = self.address_repository.set_default(input_dto.user_id, saved.id)
            logger.info(f"Address {saved.id} is now the default for user {input_dto.user_id}")

        return UseCaseResult.ok(AddressDTO.from_entity(saved))
