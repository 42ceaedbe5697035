"""
Default address policy.

A user with at least one address has exactly one default. The first
address a user creates is the default whatever the caller asked for, and
when the default goes away the oldest remaining address takes over.
"""
from typing import Optional, Sequence
from uuid import UUID

from ..entities.address import Address


def should_be_default_on_create(has_existing: bool, requested: bool) -> bool:
    """Whether a new address starts out as the default."""
    return not has_existing or bool(requested)


def choose_replacement_default(remaining: Sequence[Address]) -> Optional[Address]:
    """The address to promote when the default is removed or demoted."""
    if not remaining:
        return None
    return sorted(remaining, key=lambda address: address.created_at)[0]


def select_checkout_address(
    addresses: Sequence[Address],
    selected_id: Optional[UUID] = None,
) -> Optional[Address]:
    """Pre-selection for checkout: the explicit choice, else the default, else the first."""
    if not addresses:
        return None
    if selected_id is not None:
        for address in addresses:
            if address.id == selected_id:
                return address
    for address in addresses:
        if address.is_default:
            return address
    return addresses[0]
