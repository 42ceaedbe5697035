# Domain services
from .default_address_policy import (
    should_be_default_on_create,
    choose_replacement_default,
    select_checkout_address,
)

__all__ = [
    'should_be_default_on_create',
    'choose_replacement_default',
    'select_checkout_address',
]
