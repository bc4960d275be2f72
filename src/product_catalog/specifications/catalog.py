"""
Named product specifications for common catalog queries.

Each function returns a :class:`Specification` of a fixed shape::

    spec = by_price_range(400, 1000)
    products = await repository.get_by_specification(spec)

Defaults match the domain layer (``expensive_products`` at 1000,
``lightweight_products`` at 5kg, ``affordable_and_lightweight`` at
500 / 5kg). Explicit arguments always take precedence.
"""

from __future__ import annotations

from decimal import Decimal

from ..domain.product import Product, to_decimal
from .ast import AllOf, AnyOf, Clause
from .base import Specification
from .operators import SpecificationOperator

Number = Decimal | int | float | str

NAME = "name"
DESCRIPTION = "description"
PRICE = "price"
WEIGHT = "weight"


def by_price_range(min_price: Number, max_price: Number) -> Specification[Product]:
    """Products priced within ``[min_price, max_price]``, cheapest first."""
    return Specification(
        criteria=Clause(
            PRICE,
            SpecificationOperator.BETWEEN,
            (to_decimal(min_price), to_decimal(max_price)),
        ),
        order_by=PRICE,
    )


def by_weight_range(min_weight: Number, max_weight: Number) -> Specification[Product]:
    """Products weighing within ``[min_weight, max_weight]``, lightest first."""
    return Specification(
        criteria=Clause(
            WEIGHT,
            SpecificationOperator.BETWEEN,
            (to_decimal(min_weight), to_decimal(max_weight)),
        ),
        order_by=WEIGHT,
    )


def by_name_or_description(search_term: str) -> Specification[Product]:
    """Case-insensitive substring search over name and description."""
    return Specification(
        criteria=AnyOf(
            Clause(NAME, SpecificationOperator.ICONTAINS, search_term),
            Clause(DESCRIPTION, SpecificationOperator.ICONTAINS, search_term),
        ),
        order_by=NAME,
    )


def expensive_products(threshold: Number = Decimal("1000")) -> Specification[Product]:
    return Specification(
        criteria=Clause(PRICE, SpecificationOperator.GE, to_decimal(threshold)),
        order_by_descending=PRICE,
    )


def lightweight_products(max_weight: Number = Decimal("5")) -> Specification[Product]:
    return Specification(
        criteria=Clause(WEIGHT, SpecificationOperator.LE, to_decimal(max_weight)),
        order_by=WEIGHT,
    )


def affordable_and_lightweight(
    max_price: Number = Decimal("500"),
    max_weight: Number = Decimal("5"),
) -> Specification[Product]:
    """Intersection of a price ceiling and a weight ceiling, cheapest first."""
    return Specification(
        criteria=AllOf(
            Clause(PRICE, SpecificationOperator.LE, to_decimal(max_price)),
            Clause(WEIGHT, SpecificationOperator.LE, to_decimal(max_weight)),
        ),
        order_by=PRICE,
    )


def with_pagination(page_number: int, page_size: int) -> Specification[Product]:
    """Every product, ordered by name, windowed to one 1-based page."""
    return Specification[Product](order_by=NAME).for_page(page_number, page_size)
