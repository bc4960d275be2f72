"""
In-memory operator implementations.

Usage::

    from product_catalog.specifications.operators_memory import (
        build_default_registry,
    )

    registry = build_default_registry()
    result = registry.evaluate(SpecificationOperator.EQ, actual, expected)
"""

from __future__ import annotations

from ..evaluator import MemoryOperatorRegistry
from .comparison import (
    BetweenOperator,
    ComparisonOperator,
    as_operand,
    comparison_operators,
)
from .string import IContainsOperator


def build_default_registry() -> MemoryOperatorRegistry:
    """
    Create a registry with all built-in operators.

    Example:
        >>> registry = build_default_registry()
        >>> registry.evaluate(SpecificationOperator.GE, Decimal("10"), 5)
        True
    """
    return MemoryOperatorRegistry(
        *comparison_operators(),
        BetweenOperator(),
        IContainsOperator(),
    )


__all__ = [
    "build_default_registry",
    "BetweenOperator",
    "ComparisonOperator",
    "IContainsOperator",
    "as_operand",
]
