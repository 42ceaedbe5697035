"""
DRF exception handler that renders domain exceptions as JSON errors.
"""
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from shared.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    ValidationError,
    BusinessRuleViolationError,
    InsufficientStockError,
    InvalidOperationError,
    ExternalServiceError,
)

logger = logging.getLogger(__name__)

# First match wins.
STATUS_BY_EXCEPTION = (
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (InsufficientStockError, status.HTTP_400_BAD_REQUEST),
    (BusinessRuleViolationError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (InvalidOperationError, status.HTTP_409_CONFLICT),
)


def status_for(exc: DomainException) -> int:
    if isinstance(exc, ExternalServiceError):
        return status.HTTP_503_SERVICE_UNAVAILABLE if exc.retryable else status.HTTP_502_BAD_GATEWAY
    for exc_class, status_code in STATUS_BY_EXCEPTION:
        if isinstance(exc, exc_class):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def custom_exception_handler(exc, context):
    """Map domain exceptions to ``{error, code, ...details}`` responses."""
    if not isinstance(exc, DomainException):
        return exception_handler(exc, context)

    status_code = status_for(exc)
    if status_code >= 500:
        view = context.get('view')
        logger.warning(f"{exc.code} in {view.__class__.__name__ if view else 'unknown view'}: {exc.message}")
    body = {'error': exc.message, 'code': exc.code}
    body.update(exc.details())
    return Response(body, status=status_code)
