"""
Delete address use case.
"""
import logging
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from ...domain.repositories.address_repository import AddressRepository
from ...domain.services.default_address_policy import choose_replacement_default
from ..dtos.address_dto import AddressRefDTO
from .base import get_owned_address

logger = logging.getLogger(__name__)


@dataclass
class DeleteAddressUseCase(UseCase[AddressRefDTO, None]):
    """Delete an address, promoting the oldest remaining one if it was the default."""

    address_repository: AddressRepository

    def execute(self, input_dto: AddressRefDTO) -> UseCaseResult[None]:
        repository = self.address_repository
        address = get_owned_address(repository, input_dto.user_id, input_dto.address_id)

        repository.delete(address.id)

        if address.is_default:
            replacement = choose_replacement_default(repository.find_by_user_id(input_dto.user_id))
            if replacement is not None:
                repository.set_default(input_dto.user_id, replacement.id)
                logger.info(f"Promoted address {replacement.id} to default for user {input_dto.user_id}")

        return UseCaseResult.ok()
