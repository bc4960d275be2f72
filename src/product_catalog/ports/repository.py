"""Product repository protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from uuid import UUID

    from ..domain.product import Product
    from ..specifications.base import Specification


@runtime_checkable
class IProductRepository(Protocol):
    """
    Storage contract for products.

    Implementations are interchangeable: the in-memory and SQLAlchemy
    repositories return the same items in the same order for the same
    data and specification. "Not found" is never an error: single lookups
    return ``None`` and queries return empty lists.

    Paged methods return ``(items, total_count)`` where ``total_count`` is
    the number of matches before the page window is applied::

        items, total = await repo.get_by_specification_with_pagination(
            catalog.by_price_range(100, 500), page_number=2, page_size=10
        )
    """

    async def get_by_id(self, product_id: UUID) -> Product | None: ...

    async def save(self, product: Product) -> Product:
        """Insert, or overwrite the record with the same id; echo the input."""
        ...

    async def delete(self, product_id: UUID) -> bool: ...

    async def get_all(
        self, page_number: int, page_size: int
    ) -> tuple[list[Product], int]: ...

    async def get_by_specification(
        self, specification: Specification[Product]
    ) -> list[Product]: ...

    async def get_by_specification_with_pagination(
        self,
        specification: Specification[Product],
        page_number: int,
        page_size: int,
    ) -> tuple[list[Product], int]:
        """Criteria and order from ``specification``; window from the args."""
        ...

    async def count_by_specification(
        self, specification: Specification[Product]
    ) -> int: ...
