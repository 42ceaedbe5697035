"""
Shipping info value object.
"""
from dataclasses import dataclass

from shared.domain import ValueObject


@dataclass(frozen=True)
class ShippingInfo(ValueObject):
    """Copy of the shipping address taken when the order is placed."""
    street: str
    city: str
    state: str = ""
    postal_code: str = ""
    country: str = ""
    street2: str = ""

    @classmethod
    def from_address(cls, address) -> 'ShippingInfo':
        return cls(
            street=address.street,
            street2=address.street2 or "",
            city=address.city,
            state=address.state or "",
            postal_code=address.postal_code or "",
            country=address.country or "",
        )

    @property
    def full_address(self) -> str:
        """Get the full address string."""
        lines = [self.street]
        if self.street2:
            lines.append(self.street2)
        region = " ".join(part for part in (self.state, self.postal_code) if part)
        lines.append(f"{self.city}, {region}" if region else self.city)
        if self.country:
            lines.append(self.country)
        return ", ".join(lines)
