"""Specification-to-SQL compilation."""

from __future__ import annotations

from decimal import Decimal

import pytest
from sqlalchemy import select

from product_catalog.adapters.sqlalchemy import (
    ProductModel,
    SQLAlchemyOperatorRegistry,
    apply_specification,
    build_sqla_filter,
    count_statement,
)
from product_catalog.adapters.sqlalchemy.models import ENTITY_FIELDS
from product_catalog.domain import Product
from product_catalog.specifications import (
    Clause,
    FieldNotFoundError,
    OperatorNotFoundError,
    Specification,
    SpecificationOperator,
    catalog,
)


def _sql(stmt) -> str:
    return " ".join(str(stmt.compile()).split())


def test_build_sqla_filter_basic():
    data = {"op": "=", "attr": "name", "val": "Laptop"}
    expr = build_sqla_filter(ProductModel, data)
    assert str(expr.compile()) == "products.name = :name_1"


def test_build_sqla_filter_between():
    spec = catalog.by_price_range(400, 1000)
    expr = build_sqla_filter(ProductModel, spec.criteria.to_dict())
    compiled = expr.compile()
    assert str(compiled) == "products.price BETWEEN :price_1 AND :price_2"
    assert compiled.params == {"price_1": Decimal("400"), "price_2": Decimal("1000")}


def test_build_sqla_filter_and():
    expr = build_sqla_filter(
        ProductModel, catalog.affordable_and_lightweight().criteria.to_dict()
    )
    compiled = str(expr.compile())
    assert "products.price <= :price_1" in compiled
    assert " AND " in compiled
    assert "products.weight <= :weight_1" in compiled


def test_build_sqla_filter_icontains_or():
    expr = build_sqla_filter(
        ProductModel, catalog.by_name_or_description("50%").criteria.to_dict()
    )
    compiled = expr.compile()
    sql = str(compiled)
    assert "lower(products.name) LIKE" in sql
    assert "lower(products.description) LIKE" in sql
    assert " OR " in sql
    assert "ESCAPE '/'" in sql
    # wildcard in the search term is escaped, not passed through
    assert "50/%" in compiled.params.values()


def test_apply_specification_orders_with_tie_breaker():
    stmt = apply_specification(
        select(ProductModel),
        ProductModel,
        catalog.expensive_products(),
        tie_breaker=ProductModel.position,
    )
    assert "ORDER BY products.price DESC, products.position ASC" in _sql(stmt)


def test_apply_specification_default_order_is_tie_breaker():
    stmt = apply_specification(
        select(ProductModel),
        ProductModel,
        Specification[Product](),
        tie_breaker=ProductModel.position,
    )
    sql = _sql(stmt)
    assert "ORDER BY products.position ASC" in sql
    assert "WHERE" not in sql


def test_apply_specification_paging():
    stmt = apply_specification(
        select(ProductModel), ProductModel, catalog.with_pagination(3, 10)
    )
    compiled = stmt.compile()
    sql = " ".join(str(compiled).split())
    assert "ORDER BY products.name ASC" in sql
    assert "LIMIT" in sql
    assert "OFFSET" in sql
    assert sorted(compiled.params.values()) == [10, 20]


def test_count_statement_ignores_order_and_paging():
    spec = catalog.lightweight_products().for_page(2, 5)
    sql = _sql(count_statement(ProductModel, spec))
    assert "count(*)" in sql
    assert "products.weight <= :weight_1" in sql
    assert "ORDER BY" not in sql
    assert "LIMIT" not in sql


def test_field_whitelist_hides_position():
    data = {"op": ">", "attr": "position", "val": 1}
    with pytest.raises(FieldNotFoundError):
        build_sqla_filter(ProductModel, data, fields=ENTITY_FIELDS)


def test_unknown_order_field():
    spec = Specification[Product](order_by="prise")
    with pytest.raises(FieldNotFoundError) as exc:
        apply_specification(
            select(ProductModel), ProductModel, spec, fields=ENTITY_FIELDS
        )
    assert exc.value.suggestions == ["price"]


def test_empty_registry_raises_operator_not_found():
    clause = Clause("price", SpecificationOperator.GT, 1)
    with pytest.raises(OperatorNotFoundError):
        build_sqla_filter(
            ProductModel, clause.to_dict(), registry=SQLAlchemyOperatorRegistry()
        )
