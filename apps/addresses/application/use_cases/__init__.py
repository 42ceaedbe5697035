# Use cases
from .list_addresses import ListAddressesUseCase
from .get_address import GetAddressUseCase
from .create_address import CreateAddressUseCase
from .update_address import UpdateAddressUseCase
from .delete_address import DeleteAddressUseCase
from .set_default_address import SetDefaultAddressUseCase

__all__ = [
    'ListAddressesUseCase',
    'GetAddressUseCase',
    'CreateAddressUseCase',
    'UpdateAddressUseCase',
    'DeleteAddressUseCase',
    'SetDefaultAddressUseCase',
]
