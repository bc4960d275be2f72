"""
SQLAlchemy persistence for the product catalog.

Public API:
    - ``SQLAlchemyProductRepository``: the persisted repository
    - ``SQLAlchemySpecificationEvaluator``: runs specifications as SQL
    - ``build_sqla_filter`` / ``apply_specification`` / ``count_statement``
      for specification-to-SQL compilation
    - ``DEFAULT_SQLA_REGISTRY`` / ``SQLAlchemyOperator`` /
      ``SQLAlchemyOperatorRegistry``: extension points for operators
    - ``create_catalog_engine`` / ``create_schema``: build the engine and
      create the catalog tables on it
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .compiler import apply_specification, build_sqla_filter, count_statement
from .engine import create_catalog_engine
from .evaluator import SQLAlchemySpecificationEvaluator
from .models import Base, ProductModel
from .operators import DEFAULT_SQLA_REGISTRY
from .repository import SQLAlchemyProductRepository
from .strategy import SQLAlchemyOperator, SQLAlchemyOperatorRegistry
from .uow import SQLAlchemyUnitOfWork

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncEngine


async def create_schema(engine: AsyncEngine) -> None:
    """Create every catalog table that does not exist yet."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


__all__ = [
    "SQLAlchemyProductRepository",
    "SQLAlchemySpecificationEvaluator",
    "SQLAlchemyUnitOfWork",
    "Base",
    "ProductModel",
    "build_sqla_filter",
    "apply_specification",
    "count_statement",
    "create_schema",
    "create_catalog_engine",
    "DEFAULT_SQLA_REGISTRY",
    "SQLAlchemyOperator",
    "SQLAlchemyOperatorRegistry",
]
