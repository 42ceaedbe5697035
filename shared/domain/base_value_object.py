"""
Value object base.
"""
from abc import ABC
from dataclasses import dataclass


@dataclass(frozen=True)
class ValueObject(ABC):
    """Immutable, identity-free value; equality and hashing are field-wise."""
