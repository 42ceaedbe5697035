"""
Get address use case.
"""
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from ...domain.repositories.address_repository import AddressRepository
from ..dtos.address_dto import AddressDTO, AddressRefDTO
from .base import get_owned_address


@dataclass
class GetAddressUseCase(UseCase[AddressRefDTO, AddressDTO]):

    address_repository: AddressRepository

    def execute(self, input_dto: AddressRefDTO) -> UseCaseResult[AddressDTO]:
        address = get_owned_address(self.address_repository, input_dto.user_id, input_dto.address_id)
        return UseCaseResult.ok(AddressDTO.from_entity(address))
