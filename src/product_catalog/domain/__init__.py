from .aggregate import ID, AggregateRoot
from .exceptions import (
    CatalogError,
    DomainError,
    InvalidPriceError,
    InvalidWeightError,
    RequiredFieldError,
)
from .product import DECIMAL_PLACES, MAX_PRICE, MAX_WEIGHT, Product

__all__ = [
    "ID",
    "AggregateRoot",
    "Product",
    "MAX_PRICE",
    "MAX_WEIGHT",
    "DECIMAL_PLACES",
    # Exceptions
    "CatalogError",
    "DomainError",
    "InvalidPriceError",
    "InvalidWeightError",
    "RequiredFieldError",
]
