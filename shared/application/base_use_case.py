"""
Base use case classes.

Use cases raise domain exceptions for rule violations; a returned
result is always a success.
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar

from shared.domain import AggregateRoot, DomainEvent

logger = logging.getLogger(__name__)

InputDTO = TypeVar('InputDTO')
OutputDTO = TypeVar('OutputDTO')


@dataclass
class UseCaseResult(Generic[OutputDTO]):
    """Output of a use case and the domain events it published."""
    data: Optional[OutputDTO] = None
    events: List[DomainEvent] = field(default_factory=list)

    @classmethod
    def ok(cls, data: OutputDTO = None, events: List[DomainEvent] = None) -> 'UseCaseResult[OutputDTO]':
        return cls(data=data, events=list(events or []))


class UseCase(ABC, Generic[InputDTO, OutputDTO]):

    @abstractmethod
    def execute(self, input_dto: InputDTO) -> UseCaseResult[OutputDTO]:
        """Execute the use case."""

    @staticmethod
    def publish_events(aggregate: AggregateRoot) -> List[DomainEvent]:
        """Drain the events an aggregate recorded and log each one."""
        events = aggregate.pull_events()
        for event in events:
            logger.info(f"{event.event_type} {event.payload()}")
        return events
