"""Shared fixtures: product builders and both repository backends."""

from __future__ import annotations

import uuid
from collections.abc import AsyncGenerator, Callable
from decimal import Decimal

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from product_catalog.adapters.memory import InMemoryProductRepository
from product_catalog.adapters.sqlalchemy import (
    SQLAlchemyProductRepository,
    create_catalog_engine,
    create_schema,
)
from product_catalog.domain import Product

ProductFactory = Callable[..., Product]


@pytest.fixture
def make_product() -> ProductFactory:
    """Build a valid product; every field can be overridden by keyword."""

    def _make(
        name: str = "Widget",
        price: Decimal | str | int = Decimal("10"),
        weight: Decimal | str | int = Decimal("1"),
        description: str | None = None,
        id: uuid.UUID | None = None,  # noqa: A002
    ) -> Product:
        return Product.create(
            id or uuid.uuid4(),
            name,
            description if description is not None else f"{name} description",
            price,
            weight,
        )

    return _make


# ---------------------------------------------------------------------------
# SQLAlchemy
# ---------------------------------------------------------------------------


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    eng = create_catalog_engine("sqlite+aiosqlite:///:memory:")
    await create_schema(eng)
    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest.fixture
def sql_repository(
    session_factory: async_sessionmaker[AsyncSession],
) -> SQLAlchemyProductRepository:
    return SQLAlchemyProductRepository(session_factory)


@pytest.fixture
def memory_repository() -> InMemoryProductRepository:
    return InMemoryProductRepository()


@pytest.fixture(params=["memory", "sqlalchemy"])
def repository(
    request: pytest.FixtureRequest,
    memory_repository: InMemoryProductRepository,
    sql_repository: SQLAlchemyProductRepository,
) -> InMemoryProductRepository | SQLAlchemyProductRepository:
    """Each repository test runs once per backend."""
    if request.param == "memory":
        return memory_repository
    return sql_repository
