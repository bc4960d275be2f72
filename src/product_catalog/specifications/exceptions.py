"""
Specification exception hierarchy with fuzzy-match suggestions.

Raised only for programming errors while building or evaluating a
specification (conflicting ordering, invalid paging window, unknown
operator or field). A query that matches nothing is never an error.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any

from ..domain.exceptions import CatalogError


class SpecificationError(CatalogError):
    """Base exception for all specification errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class OperatorNotFoundError(SpecificationError):
    """
    Operator has no registered strategy in an evaluator registry.

    Provides fuzzy-matched suggestions for likely intended operators.
    """

    def __init__(self, operator: str, valid_operators: list[str]) -> None:
        self.operator = operator
        self.valid_operators = valid_operators
        self.suggestions = get_close_matches(operator, valid_operators, n=3, cutoff=0.6)

        message = f"Unknown operator: '{operator}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        message += f" Valid operators: {', '.join(sorted(valid_operators))}"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "OPERATOR_NOT_FOUND",
            "operator": self.operator,
            "suggestions": self.suggestions,
            "valid_operators": sorted(self.valid_operators),
        }


class FieldNotFoundError(SpecificationError):
    """
    Criteria or ordering references a field the target does not have.

    Example error message::

        Invalid field 'prise' on 'Product'. Did you mean: price?
    """

    def __init__(
        self,
        invalid_field: str,
        model_name: str,
        available_fields: list[str],
    ) -> None:
        self.invalid_field = invalid_field
        self.model_name = model_name
        self.available_fields = available_fields
        self.suggestions = get_close_matches(
            invalid_field, available_fields, n=3, cutoff=0.6
        )

        message = f"Invalid field '{invalid_field}' on '{model_name}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "FIELD_NOT_FOUND",
            "field": self.invalid_field,
            "model": self.model_name,
            "suggestions": self.suggestions,
            "available_fields": sorted(self.available_fields),
        }
