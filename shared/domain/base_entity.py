"""
Entities and aggregate roots.

Entities are compared by id. Subclasses are ``@dataclass(eq=False)`` so
the identity comparison below is kept; the base fields are keyword-only
so subclasses may declare required fields.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Tuple
from uuid import UUID, uuid4

from .clock import utc_now
from .domain_event import DomainEvent


@dataclass(eq=False)
class BaseEntity:
    id: UUID = field(default_factory=uuid4, kw_only=True)
    created_at: datetime = field(default_factory=utc_now, kw_only=True)
    updated_at: datetime = field(default_factory=utc_now, kw_only=True)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, BaseEntity) and type(self) is type(other) and self.id == other.id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id))

    def touch(self) -> None:
        """Mark the entity as modified now."""
        self.updated_at = utc_now()


@dataclass(eq=False)
class AggregateRoot(BaseEntity):
    """Entity that owns a consistency boundary and records domain events."""
    _pending_events: List[DomainEvent] = field(default_factory=list, repr=False, kw_only=True)

    def record_event(self, event: DomainEvent) -> None:
        self._pending_events.append(event)

    def pull_events(self) -> List[DomainEvent]:
        """Return the recorded events and forget them."""
        events, self._pending_events = self._pending_events, []
        return events

    @property
    def pending_events(self) -> Tuple[DomainEvent, ...]:
        return tuple(self._pending_events)
