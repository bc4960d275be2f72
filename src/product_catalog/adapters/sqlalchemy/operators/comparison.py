"""Comparison and inclusive-range operators compiled to SQL."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any, cast

from sqlalchemy import Numeric

from ....domain.product import to_decimal
from ....specifications.exceptions import SpecificationError
from ....specifications.operators import COMPARISONS, SpecificationOperator
from ..strategy import SQLAlchemyOperator

if TYPE_CHECKING:
    from sqlalchemy.sql.elements import ColumnElement


def as_operand(column: Any, value: Any) -> Any:
    """Bind numeric clause values as ``Decimal``, as the in-memory side does."""
    if (
        value is not None
        and isinstance(getattr(column, "type", None), Numeric)
        and not isinstance(value, Decimal)
    ):
        return to_decimal(value)
    return value


class ComparisonOperator(SQLAlchemyOperator):
    def __init__(self, op: SpecificationOperator) -> None:
        if op not in COMPARISONS:
            raise SpecificationError(f"'{op.value}' is not a comparison operator")
        self._op = op
        self._compare = COMPARISONS[op]

    @property
    def name(self) -> SpecificationOperator:
        return self._op

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast(
            "ColumnElement[bool]", self._compare(column, as_operand(column, value))
        )


class BetweenOperator(SQLAlchemyOperator):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.BETWEEN

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        low, high = (as_operand(column, v) for v in value)
        return cast("ColumnElement[bool]", column.between(low, high))


def comparison_operators() -> list[SQLAlchemyOperator]:
    return [ComparisonOperator(op) for op in COMPARISONS]
