"""
Product domain exceptions.
"""
from shared.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    ValidationError,
    InsufficientStockError,
)


class InvalidProductError(ValidationError):
    """Raised when product data is invalid."""

    def __init__(self, message: str):
        super().__init__(message=message, field="product")


class InvalidSKUError(ValidationError):
    """Raised when SKU format is invalid."""

    def __init__(self, sku: str):
        super().__init__(message=f"Invalid SKU format: '{sku}'", field="sku")
        self.sku = sku


class InvalidDimensionError(ValidationError):
    """Raised when a custom length is unusable for a variable-dimension product."""

    def __init__(self, message: str):
        super().__init__(message=message, field="custom_length")


class ProductNotFoundError(EntityNotFoundError):
    entity_name = "Product"
    not_found_code = "PRODUCT_NOT_FOUND"


class CategoryNotFoundError(EntityNotFoundError):
    entity_name = "Category"
    not_found_code = "CATEGORY_NOT_FOUND"


class InvalidCategoryError(ValidationError):
    """Raised when category data is invalid or its slug is already taken."""

    def __init__(self, message: str, field: str = "category"):
        super().__init__(message=message, field=field)


class ProductUnavailableError(DomainException):
    """Raised when an inactive product is added to a cart."""

    def __init__(self, identifier: str):
        super().__init__(
            message=f"Product '{identifier}' is not available",
            code="PRODUCT_UNAVAILABLE"
        )
        self.identifier = identifier


__all__ = [
    'InvalidProductError',
    'InvalidSKUError',
    'InvalidDimensionError',
    'ProductNotFoundError',
    'ProductUnavailableError',
    'CategoryNotFoundError',
    'InvalidCategoryError',
    'InsufficientStockError',
]
