"""
Compile a :class:`Specification` into SQLAlchemy statements.

Uses the strategy pattern: each operator is an isolated class in
``operators/``, registered in a ``SQLAlchemyOperatorRegistry``.
``build_sqla_filter`` walks the criteria's ``to_dict()`` tree, the same
representation the in-memory evaluator walks, and delegates leaf-node
compilation to the registry.

``apply_specification`` adds the filter, ordering and paging window to a
``Select``; ``count_statement`` builds the matching ``count(*)``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import ColumnElement, Select, and_, asc, desc, func, or_, select

from ...specifications.exceptions import FieldNotFoundError
from ...specifications.operators import SpecificationOperator
from .operators import DEFAULT_SQLA_REGISTRY

if TYPE_CHECKING:
    from collections.abc import Collection

    from ...specifications.base import Specification
    from .strategy import SQLAlchemyOperatorRegistry

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def build_sqla_filter(
    model: type[Any],
    data: dict[str, Any],
    *,
    registry: SQLAlchemyOperatorRegistry | None = None,
    fields: Collection[str] | None = None,
) -> ColumnElement[bool]:
    """
    Build a SQLAlchemy filter expression from a criteria dictionary.

    Args:
        model: The SQLAlchemy model class.
        data: Criteria dictionary (produced by ``criteria.to_dict()``).
        registry: Optional custom operator registry.  Falls back to
            ``DEFAULT_SQLA_REGISTRY``.
        fields: Optional whitelist of queryable attribute names.

    Returns:
        SQLAlchemy Boolean expression.
    """
    reg = registry or DEFAULT_SQLA_REGISTRY
    return _compile_node(model, data, reg, fields)


def apply_specification(
    stmt: Select[Any],
    model: type[Any],
    spec: Specification[Any],
    *,
    registry: SQLAlchemyOperatorRegistry | None = None,
    fields: Collection[str] | None = None,
    tie_breaker: Any | None = None,
) -> Select[Any]:
    """
    Apply criteria, ordering and paging from ``spec`` to ``stmt``.

    ``tie_breaker`` is appended (ascending) after the declared sort key,
    or used alone when the specification declares none, so the result
    order is total.
    """
    if spec.criteria is not None:
        stmt = stmt.where(
            build_sqla_filter(
                model, spec.criteria.to_dict(), registry=registry, fields=fields
            )
        )
    stmt = _apply_ordering(stmt, model, spec, fields, tie_breaker)
    return _apply_limit_offset(stmt, spec)


def count_statement(
    model: type[Any],
    spec: Specification[Any],
    *,
    registry: SQLAlchemyOperatorRegistry | None = None,
    fields: Collection[str] | None = None,
) -> Select[Any]:
    """``SELECT count(*)`` over the criteria; ordering and paging ignored."""
    stmt = select(func.count()).select_from(model)
    if spec.criteria is not None:
        stmt = stmt.where(
            build_sqla_filter(
                model, spec.criteria.to_dict(), registry=registry, fields=fields
            )
        )
    return stmt


# ---------------------------------------------------------------------------
# Internal compilation
# ---------------------------------------------------------------------------


def _apply_ordering(
    stmt: Select[Any],
    model: type[Any],
    spec: Specification[Any],
    fields: Collection[str] | None,
    tie_breaker: Any | None,
) -> Select[Any]:
    order_clauses: list[Any] = []
    ordering = spec.ordering
    if ordering is not None:
        field_name, descending = ordering
        col = _resolve_column(model, field_name, fields)
        order_clauses.append(desc(col) if descending else asc(col))
    if tie_breaker is not None:
        order_clauses.append(asc(tie_breaker))

    if order_clauses:
        return stmt.order_by(*order_clauses)
    return stmt


def _apply_limit_offset(stmt: Select[Any], spec: Specification[Any]) -> Select[Any]:
    if not spec.is_paging_enabled:
        return stmt
    return stmt.offset(spec.skip).limit(spec.take)


def _compile_node(
    model: type[Any],
    data: dict[str, Any],
    registry: SQLAlchemyOperatorRegistry,
    fields: Collection[str] | None,
) -> ColumnElement[bool]:
    op_str = data.get("op", "")

    if op_str == SpecificationOperator.AND:
        return and_(
            *[_compile_node(model, c, registry, fields) for c in data["conditions"]]
        )
    if op_str == SpecificationOperator.OR:
        return or_(
            *[_compile_node(model, c, registry, fields) for c in data["conditions"]]
        )

    column = _resolve_column(model, data["attr"], fields)
    return registry.apply(SpecificationOperator(op_str), column, data.get("val"))


def _resolve_column(
    model: type[Any], attr: str, fields: Collection[str] | None
) -> Any:
    available = (
        list(fields) if fields is not None else list(model.__table__.columns.keys())
    )
    if attr not in available:
        raise FieldNotFoundError(attr, model.__name__, available)
    return getattr(model, attr)
