"""String operators for SQLAlchemy."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from ....specifications.operators import SpecificationOperator
from ..strategy import SQLAlchemyOperator

if TYPE_CHECKING:
    from sqlalchemy.sql.elements import ColumnElement


class IContainsOperator(SQLAlchemyOperator):
    """
    ``lower(col) LIKE '%' || lower(:val) || '%'`` with wildcards escaped.

    On SQLite, engines from :func:`create_catalog_engine` replace ``lower``
    with :func:`fold_case` so non-ASCII text folds as it does in memory.
    """

    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.ICONTAINS

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", column.icontains(value, autoescape=True))
