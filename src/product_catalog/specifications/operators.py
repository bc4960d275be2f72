import operator
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any


class SpecificationOperator(str, Enum):
    """Supported operators for specification criteria."""

    # Standard comparison
    EQ = "="
    NE = "!="
    GT = ">"
    LT = "<"
    GE = ">="
    LE = "<="

    # Range (inclusive on both ends)
    BETWEEN = "between"

    # String operations
    ICONTAINS = "icontains"

    # Logical operators
    AND = "and"
    OR = "or"


LOGICAL_OPERATORS: frozenset[SpecificationOperator] = frozenset(
    {SpecificationOperator.AND, SpecificationOperator.OR}
)

# Python values and SQLAlchemy columns both overload these, so one table
# serves every backend.
COMPARISONS: Mapping[SpecificationOperator, Callable[[Any, Any], Any]] = {
    SpecificationOperator.EQ: operator.eq,
    SpecificationOperator.NE: operator.ne,
    SpecificationOperator.GT: operator.gt,
    SpecificationOperator.LT: operator.lt,
    SpecificationOperator.GE: operator.ge,
    SpecificationOperator.LE: operator.le,
}


def fold_case(value: str) -> str:
    """Case folding used by ``icontains`` in memory and in SQL."""
    return value.lower()
