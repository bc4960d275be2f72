"""Shape of the named catalog specifications."""

from __future__ import annotations

from decimal import Decimal

from product_catalog.specifications import (
    AllOf,
    AnyOf,
    Clause,
    SpecificationOperator,
    catalog,
)


class TestCatalogSpecifications:
    def test_by_price_range(self):
        spec = catalog.by_price_range(400, "1000")
        assert spec.criteria == Clause(
            "price", SpecificationOperator.BETWEEN, (Decimal("400"), Decimal("1000"))
        )
        assert spec.ordering == ("price", False)
        assert spec.is_paging_enabled is False

    def test_by_weight_range(self):
        spec = catalog.by_weight_range(3, 20.5)
        assert spec.criteria == Clause(
            "weight", SpecificationOperator.BETWEEN, (Decimal("3"), Decimal("20.5"))
        )
        assert spec.ordering == ("weight", False)

    def test_by_name_or_description(self):
        spec = catalog.by_name_or_description("Lap")
        assert spec.criteria == AnyOf(
            Clause("name", SpecificationOperator.ICONTAINS, "Lap"),
            Clause("description", SpecificationOperator.ICONTAINS, "Lap"),
        )
        assert spec.ordering == ("name", False)

    def test_expensive_products_default_threshold(self):
        spec = catalog.expensive_products()
        assert spec.criteria == Clause(
            "price", SpecificationOperator.GE, Decimal("1000")
        )
        assert spec.ordering == ("price", True)

    def test_expensive_products_explicit_threshold_wins(self):
        spec = catalog.expensive_products(2000)
        assert spec.criteria.value == Decimal("2000")

    def test_lightweight_products(self):
        spec = catalog.lightweight_products()
        assert spec.criteria == Clause("weight", SpecificationOperator.LE, Decimal("5"))
        assert spec.ordering == ("weight", False)

    def test_affordable_and_lightweight(self):
        spec = catalog.affordable_and_lightweight()
        assert spec.criteria == AllOf(
            Clause("price", SpecificationOperator.LE, Decimal("500")),
            Clause("weight", SpecificationOperator.LE, Decimal("5")),
        )
        assert spec.ordering == ("price", False)

    def test_affordable_and_lightweight_explicit_arguments(self):
        spec = catalog.affordable_and_lightweight(1000, 2)
        values = [c.value for c in spec.criteria.conditions]
        assert values == [Decimal("1000"), Decimal("2")]

    def test_with_pagination(self):
        spec = catalog.with_pagination(3, 10)
        assert spec.criteria is None
        assert spec.ordering == ("name", False)
        assert spec.is_paging_enabled is True
        assert (spec.skip, spec.take) == (20, 10)
