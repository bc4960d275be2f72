"""String operators: icontains."""

from __future__ import annotations

from typing import Any

from ..evaluator import MemoryOperator
from ..operators import SpecificationOperator, fold_case


class IContainsOperator(MemoryOperator):
    """Case-insensitive substring match; ``%`` and ``_`` are literal."""

    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.ICONTAINS

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        return fold_case(str(condition_value)) in fold_case(str(field_value))
