"""
Address entity (Aggregate Root).
"""
from dataclasses import dataclass
from typing import Optional

from shared.domain import AggregateRoot
from ..exceptions import InvalidAddressError
from ..value_objects.address_type import AddressType

REQUIRED_FIELDS = ('street', 'city', 'state', 'postal_code', 'country')
MAX_POSTAL_CODE_LENGTH = 10


@dataclass(eq=False)
class Address(AggregateRoot):
    """A postal address owned by a user."""
    user_id: str
    street: str
    city: str
    state: str
    postal_code: str
    country: str
    street2: str = ""
    type: AddressType = AddressType.SHIPPING
    is_default: bool = False

    def __post_init__(self):
        self.user_id = str(self.user_id)
        self.type = AddressType(self.type)
        self._validate()

    def _validate(self) -> None:
        for name in REQUIRED_FIELDS:
            value = getattr(self, name)
            if value is None or not str(value).strip():
                raise InvalidAddressError(f"{name.replace('_', ' ').capitalize()} is required", field=name)
            setattr(self, name, str(value).strip())
        if len(self.postal_code) > MAX_POSTAL_CODE_LENGTH:
            raise InvalidAddressError("Postal code is too long", field="postal_code")
        self.street2 = (self.street2 or "").strip()

    @classmethod
    def create(
        cls,
        user_id: str,
        street: str,
        city: str,
        state: str,
        postal_code: str,
        country: str,
        street2: str = "",
        type: AddressType = AddressType.SHIPPING,
        is_default: bool = False,
    ) -> 'Address':
        """Factory method to create an address; the default flag is decided by the caller's policy."""
        return cls(
            user_id=user_id,
            street=street,
            street2=street2,
            city=city,
            state=state,
            postal_code=postal_code,
            country=country,
            type=type,
            is_default=is_default,
        )

    def update(
        self,
        street: Optional[str] = None,
        street2: Optional[str] = None,
        city: Optional[str] = None,
        state: Optional[str] = None,
        postal_code: Optional[str] = None,
        country: Optional[str] = None,
        type: Optional[AddressType] = None,
    ) -> None:
        """Change the fields that were given; None leaves a field as it is."""
        changes = {
            'street': street,
            'street2': street2,
            'city': city,
            'state': state,
            'postal_code': postal_code,
            'country': country,
            'type': AddressType(type) if type is not None else None,
        }
        previous = {name: getattr(self, name) for name in changes}
        for name, value in changes.items():
            if value is not None:
                setattr(self, name, value)
        try:
            self._validate()
        except InvalidAddressError:
            for name, value in previous.items():
                setattr(self, name, value)
            raise
        self.touch()

    @property
    def full_address(self) -> str:
        lines = [self.street]
        if self.street2:
            lines.append(self.street2)
        lines.append(f"{self.city}, {self.state} {self.postal_code}")
        lines.append(self.country)
        return ", ".join(lines)
