"""Persisted specification evaluation: push criteria, order and paging to SQL."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import select

from .compiler import apply_specification, count_statement

if TYPE_CHECKING:
    from collections.abc import Collection

    from sqlalchemy import Select
    from sqlalchemy.ext.asyncio import AsyncSession

    from ...specifications.base import Specification
    from .strategy import SQLAlchemyOperatorRegistry

logger = logging.getLogger("product_catalog.sqlalchemy")


class SQLAlchemySpecificationEvaluator:
    """
    Run specifications as SQL against one mapped model.

    Filtering, ordering, ``OFFSET``/``LIMIT`` and ``count(*)`` all execute
    in the database; nothing is post-filtered in Python. Results follow
    the same semantics as
    :class:`~product_catalog.specifications.memory.InMemorySpecificationEvaluator`
    provided ``tie_breaker`` reflects insertion order.
    """

    def __init__(
        self,
        model: type[Any],
        *,
        fields: Collection[str] | None = None,
        tie_breaker: Any | None = None,
        registry: SQLAlchemyOperatorRegistry | None = None,
    ) -> None:
        self.model = model
        self._fields = fields
        self._tie_breaker = tie_breaker
        self._registry = registry

    def select(self, spec: Specification[Any]) -> Select[Any]:
        return apply_specification(
            select(self.model),
            self.model,
            spec,
            registry=self._registry,
            fields=self._fields,
            tie_breaker=self._tie_breaker,
        )

    async def evaluate(
        self, session: AsyncSession, spec: Specification[Any]
    ) -> list[Any]:
        """Return the mapped rows for ``spec``, ordered and paged."""
        result = await session.scalars(self.select(spec))
        rows = list(result.all())
        logger.debug("Evaluated %s in SQL: %d row(s)", spec.to_dict(), len(rows))
        return rows

    async def count(self, session: AsyncSession, spec: Specification[Any]) -> int:
        stmt = count_statement(
            self.model, spec, registry=self._registry, fields=self._fields
        )
        return int(await session.scalar(stmt) or 0)
