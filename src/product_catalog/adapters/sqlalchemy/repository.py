from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from ...domain.product import Product
from ...ports.repository import IProductRepository
from ...specifications.base import Specification
from .evaluator import SQLAlchemySpecificationEvaluator
from .models import ENTITY_FIELDS, ProductModel
from .uow import SQLAlchemyUnitOfWork

if TYPE_CHECKING:
    from uuid import UUID

    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

    from .strategy import SQLAlchemyOperatorRegistry

logger = logging.getLogger("product_catalog.sqlalchemy")

_UPSERT_INSERTS = {"sqlite": sqlite_insert, "postgresql": postgresql_insert}


class SQLAlchemyProductRepository(IProductRepository):
    """
    Implementation of :class:`IProductRepository` using SQLAlchemy.

    Separates the domain entity (:class:`Product`, a frozen Pydantic
    aggregate) from the persistence model (:class:`ProductModel`). Each
    call runs in its own :class:`SQLAlchemyUnitOfWork`; there are no
    multi-call transactions. Database errors (connectivity, constraint
    violations) propagate unchanged.

    Usage::

        engine = create_async_engine("sqlite+aiosqlite:///catalog.db")
        repo = SQLAlchemyProductRepository(async_sessionmaker(engine))
        await repo.save(product)
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        *,
        registry: SQLAlchemyOperatorRegistry | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._evaluator = SQLAlchemySpecificationEvaluator(
            ProductModel,
            fields=ENTITY_FIELDS,
            tie_breaker=ProductModel.position,
            registry=registry,
        )

    def _uow(self) -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(self._session_factory)

    # -- mapping --------------------------------------------------------------

    @staticmethod
    def to_model(entity: Product) -> ProductModel:
        """Convert domain entity to SQLAlchemy model."""
        return ProductModel(**{f: getattr(entity, f) for f in ENTITY_FIELDS})

    @staticmethod
    def from_model(model: ProductModel) -> Product:
        """Convert SQLAlchemy model to domain entity (business rules re-checked)."""
        return Product.model_validate(model, from_attributes=True)

    # -- CRUD ---------------------------------------------------------------

    async def get_by_id(self, product_id: UUID) -> Product | None:
        async with self._uow() as uow:
            model = await uow.session.scalar(
                select(ProductModel).where(ProductModel.id == product_id)
            )
            return None if model is None else self.from_model(model)

    async def save(self, product: Product) -> Product:
        """
        Insert or overwrite by ``id`` in one statement where the dialect has
        an upsert, so concurrent saves of one id resolve last-write-wins.
        An overwritten row keeps its ``position``.
        """
        values = {field: getattr(product, field) for field in ENTITY_FIELDS}
        async with self._uow() as uow:
            session = uow.session
            dialect_insert = _UPSERT_INSERTS.get(session.get_bind().dialect.name)
            if dialect_insert is None:
                await self._select_then_write(session, product)
            else:
                stmt = dialect_insert(ProductModel).values(**values)
                await session.execute(
                    stmt.on_conflict_do_update(
                        index_elements=["id"],
                        set_={f: stmt.excluded[f] for f in ENTITY_FIELDS if f != "id"},
                    )
                )
        logger.debug("Saved product %s", product.id)
        return product

    async def _select_then_write(self, session: AsyncSession, product: Product) -> None:
        existing = await session.scalar(
            select(ProductModel).where(ProductModel.id == product.id)
        )
        if existing is None:
            session.add(self.to_model(product))
        else:
            for field in ENTITY_FIELDS:
                setattr(existing, field, getattr(product, field))

    async def delete(self, product_id: UUID) -> bool:
        async with self._uow() as uow:
            result = await uow.session.execute(
                delete(ProductModel).where(ProductModel.id == product_id)
            )
            return bool(result.rowcount)

    async def get_all(
        self, page_number: int, page_size: int
    ) -> tuple[list[Product], int]:
        everything = Specification[Product]()
        return await self._paged(
            everything, everything.for_page(page_number, page_size)
        )

    # -- specification queries ----------------------------------------------

    async def get_by_specification(
        self, specification: Specification[Product]
    ) -> list[Product]:
        async with self._uow() as uow:
            rows = await self._evaluator.evaluate(uow.session, specification)
            return [self.from_model(m) for m in rows]

    async def get_by_specification_with_pagination(
        self,
        specification: Specification[Product],
        page_number: int,
        page_size: int,
    ) -> tuple[list[Product], int]:
        return await self._paged(
            specification, specification.for_page(page_number, page_size)
        )

    async def count_by_specification(
        self, specification: Specification[Product]
    ) -> int:
        async with self._uow() as uow:
            return await self._evaluator.count(uow.session, specification)

    async def _paged(
        self, specification: Specification[Product], paged: Specification[Product]
    ) -> tuple[list[Product], int]:
        async with self._uow() as uow:
            total = await self._evaluator.count(uow.session, specification)
            rows = await self._evaluator.evaluate(uow.session, paged)
            return [self.from_model(m) for m in rows], total
