"""Domain exceptions for the product catalog."""

from __future__ import annotations


class CatalogError(Exception):
    """Root exception for the entire product catalog."""


class DomainError(CatalogError):
    """Base class for business-rule violations (out-of-policy values)."""


class InvalidPriceError(DomainError):
    """Raised when a product price is negative or above the catalog maximum."""


class InvalidWeightError(DomainError):
    """Raised when a product weight is negative or above the catalog maximum."""


class RequiredFieldError(CatalogError):
    """Raised when a mandatory text field is missing or blank.

    Kept outside :class:`DomainError` so callers can tell a malformed
    payload apart from an out-of-policy value.
    """

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(message)
