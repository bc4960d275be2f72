"""SQL counterpart of the in-memory operator strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from ...specifications.evaluator import OperatorRegistry

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement

    from ...specifications.operators import SpecificationOperator


class SQLAlchemyOperator(ABC):
    """Compile one operator into a boolean SQL expression on a column."""

    @property
    @abstractmethod
    def name(self) -> SpecificationOperator: ...

    @abstractmethod
    def apply(self, column: Any, value: Any) -> ColumnElement[bool]: ...


class SQLAlchemyOperatorRegistry(OperatorRegistry[SQLAlchemyOperator]):
    def apply(
        self, name: SpecificationOperator, column: Any, value: Any
    ) -> ColumnElement[bool]:
        """
        Raises:
            OperatorNotFoundError: If nothing is registered for ``name``.
        """
        return self.lookup(name).apply(column, value)
