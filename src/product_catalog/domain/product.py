"""Product aggregate.

A product is only ever built through :meth:`Product.create`, which checks
the catalog's business rules before an instance exists. The same rules run
again as a model validator, so rehydrating a product from storage (or
constructing it directly) cannot produce an instance that violates them.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any
from uuid import UUID

from pydantic import model_validator

from .aggregate import AggregateRoot
from .exceptions import InvalidPriceError, InvalidWeightError, RequiredFieldError

MAX_PRICE = Decimal("10000")
MAX_WEIGHT = Decimal("80")
# Storage keeps two decimal places for both price and weight.
DECIMAL_PLACES = 2
_QUANTUM = Decimal(1).scaleb(-DECIMAL_PLACES)


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """Coerce a numeric input to ``Decimal`` without binary float noise."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def _validate_business_rules(price: Decimal, weight: Decimal) -> None:
    if price > MAX_PRICE:
        raise InvalidPriceError(f"Price cannot exceed ${MAX_PRICE}")
    if weight > MAX_WEIGHT:
        raise InvalidWeightError(f"Weight cannot exceed {MAX_WEIGHT}kg")
    if price < 0:
        raise InvalidPriceError("Price cannot be negative")
    if weight < 0:
        raise InvalidWeightError("Weight cannot be negative")
    if price != price.quantize(_QUANTUM):
        raise InvalidPriceError(
            f"Price cannot have more than {DECIMAL_PLACES} decimal places"
        )
    if weight != weight.quantize(_QUANTUM):
        raise InvalidWeightError(
            f"Weight cannot have more than {DECIMAL_PLACES} decimal places"
        )


def _validate_required_fields(name: Any, description: Any) -> None:
    if name is None or not str(name).strip():
        raise RequiredFieldError("name", "Name is required")
    if description is None or not str(description).strip():
        raise RequiredFieldError("description", "Description is required")


class Product(AggregateRoot[UUID]):
    """A product in the catalog."""

    name: str
    description: str
    price: Decimal
    weight: Decimal

    @model_validator(mode="after")
    def _check_invariants(self) -> Product:
        _validate_business_rules(self.price, self.weight)
        _validate_required_fields(self.name, self.description)
        return self

    @classmethod
    def create(
        cls,
        id: UUID,  # noqa: A002
        name: str,
        description: str,
        price: Decimal | int | float | str,
        weight: Decimal | int | float | str,
    ) -> Product:
        """Validate the inputs and build a new product.

        Raises:
            InvalidPriceError: price is negative or above ``MAX_PRICE``.
            InvalidWeightError: weight is negative or above ``MAX_WEIGHT``.
            RequiredFieldError: name or description is missing or blank.
        """
        price = to_decimal(price)
        weight = to_decimal(weight)
        _validate_business_rules(price, weight)
        _validate_required_fields(name, description)
        return cls(
            id=id, name=name, description=description, price=price, weight=weight
        )
