"""
In-process specification evaluation.

Applies a :class:`Specification` to an already materialised sequence:
criteria as a filter, ordering as a sort, paging as a slice. The input
order is the store-default order; Python's sort is stable (including with
``reverse=True``), so candidates that tie on the sort key keep their
input order.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .exceptions import FieldNotFoundError
from .operators import SpecificationOperator
from .operators_memory import build_default_registry

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .base import Specification
    from .evaluator import MemoryOperatorRegistry

T = TypeVar("T")

logger = logging.getLogger("product_catalog.specifications")


class InMemorySpecificationEvaluator(Generic[T]):
    """
    Evaluate specifications against Python objects.

    Walks the criteria's ``to_dict()`` tree and delegates each leaf to a
    :class:`MemoryOperatorRegistry` (strategy pattern), mirroring the SQL
    compiler so both backends read the same representation.
    """

    def __init__(self, registry: MemoryOperatorRegistry | None = None) -> None:
        self._registry = registry or build_default_registry()

    # -- public API ----------------------------------------------------------

    def is_satisfied_by(self, spec: Specification[Any], candidate: T) -> bool:
        if spec.criteria is None:
            return True
        return self._matches(spec.criteria.to_dict(), candidate)

    def filter(self, items: Iterable[T], spec: Specification[Any]) -> list[T]:
        """Return the items matching the criteria, input order preserved."""
        if spec.criteria is None:
            return list(items)
        data = spec.criteria.to_dict()
        return [item for item in items if self._matches(data, item)]

    def evaluate(self, items: Iterable[T], spec: Specification[Any]) -> list[T]:
        """Filter, order, then page ``items`` according to ``spec``."""
        matched = self.filter(items, spec)

        ordering = spec.ordering
        if ordering is not None:
            field, descending = ordering
            matched = sorted(
                matched,
                key=lambda item: self._resolve_field(item, field),
                reverse=descending,
            )

        if spec.is_paging_enabled:
            matched = matched[spec.skip : spec.skip + spec.take]

        logger.debug(
            "Evaluated %s in memory: %d result(s)", spec.to_dict(), len(matched)
        )
        return matched

    def count(self, items: Iterable[T], spec: Specification[Any]) -> int:
        """Number of criteria matches; ordering and paging are ignored."""
        return len(self.filter(items, spec))

    # -- tree walking --------------------------------------------------------

    def _matches(self, data: dict[str, Any], candidate: T) -> bool:
        op_str = data["op"]

        if op_str == SpecificationOperator.AND:
            return all(self._matches(c, candidate) for c in data["conditions"])
        if op_str == SpecificationOperator.OR:
            return any(self._matches(c, candidate) for c in data["conditions"])

        actual_val = self._resolve_field(candidate, data["attr"])
        return self._registry.evaluate(
            SpecificationOperator(op_str), actual_val, data.get("val")
        )

    @staticmethod
    def _resolve_field(obj: Any, attr: str) -> Any:
        try:
            return getattr(obj, attr)
        except AttributeError as exc:
            available = list(getattr(type(obj), "model_fields", {}))
            raise FieldNotFoundError(attr, type(obj).__name__, available) from exc
