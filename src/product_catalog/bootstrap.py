"""Startup wiring: pick and build the configured product repository.

Usage::

    runtime = await create_runtime(get_settings())
    use_case = CreateProductUseCase(runtime.repository)
    ...
    await runtime.close()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import async_sessionmaker

from .adapters.memory import InMemoryProductRepository
from .adapters.sqlalchemy import (
    SQLAlchemyProductRepository,
    create_catalog_engine,
    create_schema,
)
from .config import StorageBackend

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncEngine

    from .config import Settings
    from .ports.repository import IProductRepository

logger = logging.getLogger("product_catalog.bootstrap")


def configure_logging(settings: Settings) -> None:
    """Apply the configured level to the ``product_catalog`` logger tree."""
    logging.getLogger("product_catalog").setLevel(settings.log_level)


@dataclass
class CatalogRuntime:
    """The selected repository plus the resources it owns."""

    repository: IProductRepository
    engine: AsyncEngine | None = None

    async def close(self) -> None:
        if self.engine is not None:
            await self.engine.dispose()
            logger.info("Disposed database engine")


async def create_runtime(settings: Settings) -> CatalogRuntime:
    """Build the repository named by ``settings.storage_backend``."""
    configure_logging(settings)

    if settings.storage_backend is StorageBackend.MEMORY:
        logger.info("Using in-memory product repository")
        return CatalogRuntime(repository=InMemoryProductRepository())

    engine = create_catalog_engine(
        settings.database_url, echo=settings.database_echo
    )
    await create_schema(engine)
    logger.info("Using SQLAlchemy product repository at %s", engine.url)
    return CatalogRuntime(
        repository=SQLAlchemyProductRepository(
            async_sessionmaker(engine, expire_on_commit=False)
        ),
        engine=engine,
    )


async def create_product_repository(settings: Settings) -> IProductRepository:
    """Shortcut for callers that do not manage the engine lifecycle."""
    return (await create_runtime(settings)).repository
