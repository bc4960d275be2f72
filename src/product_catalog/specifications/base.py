"""Specification: criteria, ordering and an optional paging window."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from ..domain.aggregate import AggregateRoot
from .exceptions import SpecificationError

if TYPE_CHECKING:
    from .ast import Criteria

T = TypeVar("T", bound=AggregateRoot[Any])


@dataclass(frozen=True)
class Specification(Generic[T]):
    """
    Immutable query description over a single aggregate type.

    Attributes:
        criteria: Filter tree; ``None`` matches every candidate.
        order_by: Field to sort ascending by.
        order_by_descending: Field to sort descending by. Mutually
            exclusive with ``order_by``; with neither set, results come
            back in store-default (insertion) order.
        is_paging_enabled: When ``False``, ``skip`` and ``take`` are
            ignored and all matches are returned.
        skip: 0-based offset into the ordered matches.
        take: Maximum number of results.
    """

    criteria: Criteria | None = None
    order_by: str | None = None
    order_by_descending: str | None = None
    is_paging_enabled: bool = False
    skip: int = 0
    take: int = 0

    def __post_init__(self) -> None:
        if self.order_by is not None and self.order_by_descending is not None:
            raise SpecificationError(
                "A specification can order ascending or descending, not both "
                f"(got order_by={self.order_by!r}, "
                f"order_by_descending={self.order_by_descending!r})"
            )
        if self.is_paging_enabled:
            if self.skip < 0:
                raise SpecificationError(f"skip must be >= 0, got {self.skip}")
            if self.take < 1:
                raise SpecificationError(f"take must be >= 1, got {self.take}")

    # -- ordering ------------------------------------------------------------

    @property
    def ordering(self) -> tuple[str, bool] | None:
        """``(field, descending)`` for the declared sort key, if any."""
        if self.order_by is not None:
            return self.order_by, False
        if self.order_by_descending is not None:
            return self.order_by_descending, True
        return None

    # -- paging --------------------------------------------------------------

    def with_paging(self, skip: int, take: int) -> Specification[T]:
        """Return a copy with the paging window set; criteria and order kept."""
        return replace(self, is_paging_enabled=True, skip=skip, take=take)

    def for_page(self, page_number: int, page_size: int) -> Specification[T]:
        """Return a copy windowed to the 1-based ``page_number``."""
        if page_number < 1:
            raise SpecificationError(f"page_number must be >= 1, got {page_number}")
        if page_size < 1:
            raise SpecificationError(f"page_size must be >= 1, got {page_size}")
        return self.with_paging((page_number - 1) * page_size, page_size)

    def without_paging(self) -> Specification[T]:
        """Return a copy with paging disabled."""
        return replace(self, is_paging_enabled=False, skip=0, take=0)

    # -- serialisation -------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.criteria is not None:
            result["criteria"] = self.criteria.to_dict()
        if self.order_by is not None:
            result["order_by"] = self.order_by
        if self.order_by_descending is not None:
            result["order_by_descending"] = self.order_by_descending
        if self.is_paging_enabled:
            result["skip"] = self.skip
            result["take"] = self.take
        return result
