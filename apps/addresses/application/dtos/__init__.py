# DTOs
from .address_dto import AddressCreateDTO, AddressUpdateDTO, AddressRefDTO, AddressDTO

__all__ = ['AddressCreateDTO', 'AddressUpdateDTO', 'AddressRefDTO', 'AddressDTO']
