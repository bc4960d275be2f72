"""
Criteria tree: a small tagged-variant filter AST.

A criteria tree is built from :class:`Clause` leaves (field, operator,
value) joined by :class:`AllOf` / :class:`AnyOf` nodes. Nodes carry no
evaluation logic of their own: every backend walks the same
``to_dict()`` representation through its own operator registry, so the
in-memory and SQL evaluators interpret one shape the same way.

Serialised form::

    {"op": "and", "conditions": [
        {"op": "<=", "attr": "price", "val": Decimal("500")},
        {"op": "<=", "attr": "weight", "val": Decimal("5")},
    ]}
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from .exceptions import OperatorNotFoundError, SpecificationError
from .operators import LOGICAL_OPERATORS, SpecificationOperator


@dataclass(frozen=True)
class Clause:
    """Compare one attribute of the candidate against a fixed value."""

    field: str
    operator: SpecificationOperator
    value: Any

    def __post_init__(self) -> None:
        if not self.field:
            raise SpecificationError("Clause requires a field name")
        try:
            op = SpecificationOperator(self.operator)
        except ValueError as exc:
            raise OperatorNotFoundError(
                str(self.operator), [m.value for m in SpecificationOperator]
            ) from exc
        if op in LOGICAL_OPERATORS:
            raise SpecificationError(
                f"Logical operator '{op.value}' cannot be used in a clause"
            )
        if op is SpecificationOperator.BETWEEN:
            try:
                low, high = self.value
            except (TypeError, ValueError) as exc:
                raise SpecificationError(
                    f"'between' on '{self.field}' expects a (low, high) pair"
                ) from exc
            object.__setattr__(self, "value", (low, high))
        object.__setattr__(self, "operator", op)

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": self.operator.value,
            "attr": self.field,
            "val": self.value,
        }


@dataclass(frozen=True, init=False)
class AllOf:
    """Logical AND of its conditions."""

    conditions: tuple[Criteria, ...]

    def __init__(self, *conditions: Criteria) -> None:
        if not conditions:
            raise SpecificationError("AllOf requires at least one condition")
        object.__setattr__(self, "conditions", conditions)

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": SpecificationOperator.AND.value,
            "conditions": [c.to_dict() for c in self.conditions],
        }


@dataclass(frozen=True, init=False)
class AnyOf:
    """Logical OR of its conditions."""

    conditions: tuple[Criteria, ...]

    def __init__(self, *conditions: Criteria) -> None:
        if not conditions:
            raise SpecificationError("AnyOf requires at least one condition")
        object.__setattr__(self, "conditions", conditions)

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": SpecificationOperator.OR.value,
            "conditions": [c.to_dict() for c in self.conditions],
        }


Criteria = Union[Clause, AllOf, AnyOf]
