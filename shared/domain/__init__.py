# Shared domain module
from .base_entity import BaseEntity, AggregateRoot
from .clock import utc_now
from .base_value_object import ValueObject
from .domain_event import DomainEvent
from .money import Money, quantize, to_decimal
from .exceptions import (
    DomainException,
    EntityNotFoundError,
    ValidationError,
    BusinessRuleViolationError,
    InvalidOperationError,
    InsufficientStockError,
    ExternalServiceError,
)

__all__ = [
    'BaseEntity',
    'AggregateRoot',
    'utc_now',
    'ValueObject',
    'DomainEvent',
    'Money',
    'quantize',
    'to_decimal',
    'DomainException',
    'EntityNotFoundError',
    'ValidationError',
    'BusinessRuleViolationError',
    'InvalidOperationError',
    'InsufficientStockError',
    'ExternalServiceError',
]
