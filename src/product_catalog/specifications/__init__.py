from . import catalog
from .ast import AllOf, AnyOf, Clause, Criteria
from .base import Specification
from .evaluator import MemoryOperator, MemoryOperatorRegistry
from .exceptions import (
    FieldNotFoundError,
    OperatorNotFoundError,
    SpecificationError,
)
from .memory import InMemorySpecificationEvaluator
from .operators import SpecificationOperator
from .operators_memory import build_default_registry

__all__ = [
    # Core types
    "SpecificationOperator",
    "Specification",
    "Clause",
    "AllOf",
    "AnyOf",
    "Criteria",
    # Named specifications
    "catalog",
    # Evaluator / strategy
    "InMemorySpecificationEvaluator",
    "MemoryOperator",
    "MemoryOperatorRegistry",
    "build_default_registry",
    # Exceptions
    "SpecificationError",
    "OperatorNotFoundError",
    "FieldNotFoundError",
]
