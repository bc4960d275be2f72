"""
SQLAlchemy operator implementations and default registry.

Usage::

    from product_catalog.adapters.sqlalchemy.operators import (
        DEFAULT_SQLA_REGISTRY,
    )

    expr = DEFAULT_SQLA_REGISTRY.apply(SpecificationOperator.EQ, column, value)
"""

from __future__ import annotations

from ..strategy import SQLAlchemyOperatorRegistry
from .comparison import BetweenOperator, ComparisonOperator, comparison_operators
from .string import IContainsOperator


def build_default_sqla_registry() -> SQLAlchemyOperatorRegistry:
    """Create a registry with all built-in SQLAlchemy operators."""
    return SQLAlchemyOperatorRegistry(
        *comparison_operators(),
        BetweenOperator(),
        IContainsOperator(),
    )


DEFAULT_SQLA_REGISTRY: SQLAlchemyOperatorRegistry = build_default_sqla_registry()

__all__ = [
    "DEFAULT_SQLA_REGISTRY",
    "build_default_sqla_registry",
    "BetweenOperator",
    "ComparisonOperator",
    "IContainsOperator",
]
