"""Comparison and inclusive-range operators over catalog values."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from ...domain.product import to_decimal
from ..evaluator import MemoryOperator
from ..exceptions import SpecificationError
from ..operators import COMPARISONS, SpecificationOperator


def as_operand(field_value: Any, condition_value: Any) -> Any:
    """
    Bring a clause value to the type of the field it is compared with.

    Prices and weights are ``Decimal``; a clause written with ``int``,
    ``float`` or ``str`` is converted through :func:`to_decimal`, so
    ``0.1`` compares as ``Decimal("0.1")`` and ``"300"`` as a number.
    """
    if isinstance(field_value, Decimal) and not isinstance(condition_value, Decimal):
        return to_decimal(condition_value)
    return condition_value


class ComparisonOperator(MemoryOperator):
    """One of ``=``, ``!=``, ``>``, ``<``, ``>=``, ``<=``.

    A missing (``None``) field never satisfies an ordering comparison,
    matching SQL ``NULL`` semantics.
    """

    def __init__(self, op: SpecificationOperator) -> None:
        if op not in COMPARISONS:
            raise SpecificationError(f"'{op.value}' is not a comparison operator")
        self._op = op
        self._compare = COMPARISONS[op]

    @property
    def name(self) -> SpecificationOperator:
        return self._op

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            if self._op in (SpecificationOperator.EQ, SpecificationOperator.NE):
                return bool(self._compare(None, condition_value))
            return False
        operand = as_operand(field_value, condition_value)
        return bool(self._compare(field_value, operand))


class BetweenOperator(MemoryOperator):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.BETWEEN

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        low, high = (as_operand(field_value, v) for v in condition_value)
        return bool(low <= field_value <= high)


def comparison_operators() -> list[MemoryOperator]:
    return [ComparisonOperator(op) for op in COMPARISONS]
