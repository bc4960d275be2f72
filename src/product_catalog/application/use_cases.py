"""Catalog use cases: create, list and search products."""

from __future__ import annotations

import logging
import uuid
from decimal import Decimal
from typing import TYPE_CHECKING

from ..domain.product import Product
from ..specifications import catalog
from .dto import PagedResponse, ProductResponse

if TYPE_CHECKING:
    from ..ports.repository import IProductRepository
    from ..specifications.base import Specification
    from .dto import CreateProductRequest, PaginationRequest

logger = logging.getLogger("product_catalog.use_cases")


class CreateProductUseCase:
    def __init__(self, repository: IProductRepository) -> None:
        self._repository = repository

    async def execute(self, request: CreateProductRequest) -> ProductResponse:
        """Validate and store a new product under a fresh UUID.

        Domain errors from :meth:`Product.create` propagate unchanged.
        """
        product = Product.create(
            uuid.uuid4(),
            request.name,
            request.description,
            request.price,
            request.weight,
        )
        saved = await self._repository.save(product)
        logger.info("Created product %s (%s)", saved.id, saved.name)
        return ProductResponse.from_entity(saved)


class GetAllProductsUseCase:
    def __init__(self, repository: IProductRepository) -> None:
        self._repository = repository

    async def execute(
        self, request: PaginationRequest
    ) -> PagedResponse[ProductResponse]:
        products, total_count = await self._repository.get_all(
            request.page_number, request.page_size
        )
        return PagedResponse[ProductResponse](
            items=[ProductResponse.from_entity(p) for p in products],
            page_number=request.page_number,
            page_size=request.page_size,
            total_count=total_count,
        )


class SearchProductsUseCase:
    """Query products through the named catalog specifications."""

    def __init__(self, repository: IProductRepository) -> None:
        self._repository = repository

    async def _run(self, spec: Specification[Product]) -> list[ProductResponse]:
        products = await self._repository.get_by_specification(spec)
        return [ProductResponse.from_entity(p) for p in products]

    async def search_by_price_range(
        self, min_price: Decimal, max_price: Decimal
    ) -> list[ProductResponse]:
        return await self._run(catalog.by_price_range(min_price, max_price))

    async def search_by_weight_range(
        self, min_weight: Decimal, max_weight: Decimal
    ) -> list[ProductResponse]:
        return await self._run(catalog.by_weight_range(min_weight, max_weight))

    async def search_by_name_or_description(
        self, search_term: str
    ) -> list[ProductResponse]:
        return await self._run(catalog.by_name_or_description(search_term))

    async def get_expensive_products(
        self, threshold: Decimal = Decimal("1000")
    ) -> list[ProductResponse]:
        return await self._run(catalog.expensive_products(threshold))

    async def get_lightweight_products(
        self, max_weight: Decimal = Decimal("5")
    ) -> list[ProductResponse]:
        return await self._run(catalog.lightweight_products(max_weight))

    async def get_affordable_and_lightweight_products(
        self,
        max_price: Decimal = Decimal("500"),
        max_weight: Decimal = Decimal("5"),
    ) -> list[ProductResponse]:
        return await self._run(
            catalog.affordable_and_lightweight(max_price, max_weight)
        )

    async def search_with_pagination(
        self,
        specification: Specification[Product],
        request: PaginationRequest,
    ) -> PagedResponse[ProductResponse]:
        (
            products,
            total_count,
        ) = await self._repository.get_by_specification_with_pagination(
            specification, request.page_number, request.page_size
        )
        return PagedResponse[ProductResponse](
            items=[ProductResponse.from_entity(p) for p in products],
            page_number=request.page_number,
            page_size=request.page_size,
            total_count=total_count,
        )
