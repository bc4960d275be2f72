"""
Operator strategies and the registry that dispatches to them.

Both backends look up leaf operators the same way: an
:class:`OperatorRegistry` keyed by :class:`SpecificationOperator`. The
in-memory backend registers :class:`MemoryOperator` strategies; the SQL
backend subclasses the registry for its own strategy type.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, Protocol, TypeVar

from .exceptions import OperatorNotFoundError
from .operators import SpecificationOperator


class NamedOperator(Protocol):
    @property
    def name(self) -> SpecificationOperator: ...


S = TypeVar("S", bound=NamedOperator)


class OperatorRegistry(Generic[S]):
    """Strategies keyed by the operator they implement; last one wins."""

    def __init__(self, *operators: S) -> None:
        self._operators: dict[SpecificationOperator, S] = {}
        for operator in operators:
            self.register(operator)

    def register(self, operator: S) -> None:
        self._operators[operator.name] = operator

    @property
    def supported_operators(self) -> frozenset[SpecificationOperator]:
        return frozenset(self._operators)

    def lookup(self, name: SpecificationOperator) -> S:
        """
        Return the strategy for ``name``.

        Raises:
            OperatorNotFoundError: If nothing is registered for ``name``.
        """
        try:
            return self._operators[name]
        except KeyError:
            raise OperatorNotFoundError(
                str(getattr(name, "value", name)),
                [m.value for m in self._operators],
            ) from None


class MemoryOperator(ABC):
    """Evaluate one operator against a value read from a Python object."""

    @property
    @abstractmethod
    def name(self) -> SpecificationOperator: ...

    @abstractmethod
    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        """``True`` when ``field_value`` satisfies the clause's value."""


class MemoryOperatorRegistry(OperatorRegistry[MemoryOperator]):
    """
    Usage::

        registry = MemoryOperatorRegistry(IContainsOperator())
        registry.evaluate(SpecificationOperator.ICONTAINS, "Café", "CAF")
    """

    def evaluate(
        self, name: SpecificationOperator, field_value: Any, condition_value: Any
    ) -> bool:
        return self.lookup(name).evaluate(field_value, condition_value)
