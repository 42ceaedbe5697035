"""
Domain event base class.

Aggregates record events while they change; the application layer
drains them after the aggregate is saved.
"""
from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any, Dict
from uuid import UUID, uuid4

from .clock import utc_now

_ENVELOPE_FIELDS = frozenset({'event_id', 'occurred_at'})


@dataclass(frozen=True)
class DomainEvent:
    """Something that happened to an aggregate."""
    event_id: UUID = field(default_factory=uuid4, kw_only=True)
    occurred_at: datetime = field(default_factory=utc_now, kw_only=True)

    @property
    def event_type(self) -> str:
        return self.__class__.__name__

    def payload(self) -> Dict[str, Any]:
        """Event fields without the id and timestamp envelope."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name not in _ENVELOPE_FIELDS
        }
