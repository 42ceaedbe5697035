"""
Domain exceptions.

Every exception carries a human-readable ``message`` and a stable
``code``; ``details()`` adds the fields an API error body exposes.
"""
from typing import Any, Dict


class DomainException(Exception):
    """Base exception for domain layer."""

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def details(self) -> Dict[str, Any]:
        return {}


class EntityNotFoundError(DomainException):
    """An entity is missing or belongs to someone else.

    Subclasses only name the entity and their error code.
    """
    entity_name = "Entity"
    not_found_code = "ENTITY_NOT_FOUND"

    def __init__(self, entity_id: str):
        super().__init__(
            message=f"{self.entity_name} with id '{entity_id}' not found",
            code=self.not_found_code,
        )
        self.entity_id = entity_id

    def details(self):
        return {'entity': self.entity_name, 'entity_id': self.entity_id}


class ValidationError(DomainException):
    """Malformed input or an invalid value; ``field`` names the culprit when known."""

    def __init__(self, message: str, field: str = None):
        super().__init__(message=message, code="VALIDATION_ERROR")
        self.field = field

    def details(self):
        return {'field': self.field}


class BusinessRuleViolationError(DomainException):

    def __init__(self, message: str, rule: str = None):
        super().__init__(message=message, code="BUSINESS_RULE_VIOLATION")
        self.rule = rule

    def details(self):
        return {'rule': self.rule}


class InsufficientStockError(DomainException):

    def __init__(self, product_id: str, requested: int, available: int):
        super().__init__(
            message=f"Insufficient stock for product '{product_id}': requested {requested}, available {available}",
            code="INSUFFICIENT_STOCK",
        )
        self.product_id = product_id
        self.requested = requested
        self.available = available

    def details(self):
        return {'product_id': self.product_id, 'requested': self.requested, 'available': self.available}


class InvalidOperationError(DomainException):
    """The operation is not allowed in the current state."""

    def __init__(self, message: str, operation: str = None, state: str = None):
        super().__init__(message=message, code="INVALID_OPERATION")
        self.operation = operation
        self.state = state

    def details(self):
        return {'operation': self.operation, 'state': self.state}


class ExternalServiceError(DomainException):
    """A collaborator outside this process failed."""

    def __init__(self, message: str, service: str, code: str = None, retryable: bool = True):
        super().__init__(message=message, code=code or "EXTERNAL_SERVICE_ERROR")
        self.service = service
        self.retryable = retryable

    def details(self):
        return {'service': self.service, 'retryable': self.retryable}
