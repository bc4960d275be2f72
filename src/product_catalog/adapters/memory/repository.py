"""Dict-backed product storage."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ...domain.product import Product
from ...ports.repository import IProductRepository
from ...specifications.base import Specification
from ...specifications.memory import InMemorySpecificationEvaluator

if TYPE_CHECKING:
    from collections.abc import Iterable
    from uuid import UUID

logger = logging.getLogger("product_catalog.memory")


class InMemoryProductRepository(IProductRepository):
    """In-memory implementation of :class:`IProductRepository`.

    Stores products in a dict keyed by ``id``. Insertion order is the
    store-default order; overwriting an existing id keeps its original
    position. Every read or write is a single dict operation with no
    ``await`` in between, so concurrent coroutines never see a partial
    write, and queries evaluate against a snapshot of the values.
    """

    def __init__(
        self,
        products: Iterable[Product] | None = None,
        *,
        evaluator: InMemorySpecificationEvaluator[Product] | None = None,
    ) -> None:
        self._store: dict[UUID, Product] = {}
        self._evaluator = evaluator or InMemorySpecificationEvaluator()
        for product in products or []:
            self._store[product.id] = product

    def _snapshot(self) -> list[Product]:
        return list(self._store.values())

    # -- CRUD ---------------------------------------------------------------

    async def get_by_id(self, product_id: UUID) -> Product | None:
        return self._store.get(product_id)

    async def save(self, product: Product) -> Product:
        self._store[product.id] = product
        logger.debug("Saved product %s", product.id)
        return product

    async def delete(self, product_id: UUID) -> bool:
        return self._store.pop(product_id, None) is not None

    async def get_all(
        self, page_number: int, page_size: int
    ) -> tuple[list[Product], int]:
        snapshot = self._snapshot()
        spec = Specification[Product]().for_page(page_number, page_size)
        return self._evaluator.evaluate(snapshot, spec), len(snapshot)

    # -- specification queries ----------------------------------------------

    async def get_by_specification(
        self, specification: Specification[Product]
    ) -> list[Product]:
        return self._evaluator.evaluate(self._snapshot(), specification)

    async def get_by_specification_with_pagination(
        self,
        specification: Specification[Product],
        page_number: int,
        page_size: int,
    ) -> tuple[list[Product], int]:
        paged = specification.for_page(page_number, page_size)
        matched = self._evaluator.filter(self._snapshot(), specification)
        return self._evaluator.evaluate(matched, paged), len(matched)

    async def count_by_specification(
        self, specification: Specification[Product]
    ) -> int:
        return self._evaluator.count(self._snapshot(), specification)

    # ── Test helpers ─────────────────────────────────────────────

    def clear(self) -> None:
        self._store.clear()

    def __len__(self) -> int:
        return len(self._store)
