"""
SKU value object.
"""
import re
from dataclasses import dataclass

from shared.domain import ValueObject
from ..exceptions import InvalidSKUError

SKU_PATTERN = re.compile(r'^[A-Z0-9][A-Z0-9_\-]{2,63}$')


@dataclass(frozen=True)
class SKU(ValueObject):
    """Stock keeping unit, stored upper-case."""
    value: str

    def __post_init__(self):
        normalized = (self.value or '').strip().upper()
        if not SKU_PATTERN.match(normalized):
            raise InvalidSKUError(self.value)
        object.__setattr__(self, 'value', normalized)

    def __str__(self) -> str:
        return self.value
