"""Request and response models for the catalog use cases."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import TYPE_CHECKING, Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, computed_field

if TYPE_CHECKING:
    from ..domain.product import Product

T = TypeVar("T")


class CreateProductRequest(BaseModel):
    """Input for creating a product.

    Price (at most 10000) and weight (at most 80kg) bounds are enforced by
    :meth:`Product.create` so the caller always gets the catalog's own
    error messages.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    price: Decimal
    weight: Decimal


class PaginationRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    page_number: int = Field(default=1, ge=1)
    page_size: int = Field(default=10, ge=1, le=100)


class ProductResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: UUID
    name: str
    description: str
    price: Decimal
    weight: Decimal

    @classmethod
    def from_entity(cls, product: Product) -> ProductResponse:
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            weight=product.weight,
        )


class PagedResponse(BaseModel, Generic[T]):
    """
    One page of items plus navigation metadata.

    ``total_pages``, ``has_previous_page`` and ``has_next_page`` are
    computed from ``total_count``, ``page_number`` and ``page_size`` on
    every access and serialised alongside the stored fields.
    """

    model_config = ConfigDict(frozen=True)

    items: list[T]
    page_number: int = Field(ge=1)
    page_size: int = Field(ge=1)
    total_count: int = Field(ge=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_previous_page(self) -> bool:
        return self.page_number > 1

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_next_page(self) -> bool:
        return self.page_number < self.total_pages
