"""
List addresses use case.
"""
from dataclasses import dataclass
from typing import List

from shared.application import UseCase, UseCaseResult
from ...domain.repositories.address_repository import AddressRepository
from ..dtos.address_dto import AddressDTO


@dataclass
class ListAddressesUseCase(UseCase[str, List[AddressDTO]]):
    """All addresses of a user in creation order."""

    address_repository: AddressRepository

    def execute(self, input_dto: str) -> UseCaseResult[List[AddressDTO]]:
        addresses = self.address_repository.find_by_user_id(input_dto)
        return UseCaseResult.ok([AddressDTO.from_entity(a) for a in addresses])
