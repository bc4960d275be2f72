from __future__ import annotations

import dataclasses
from decimal import Decimal

import pytest

from product_catalog.domain import Product
from product_catalog.specifications import (
    AllOf,
    AnyOf,
    Clause,
    OperatorNotFoundError,
    Specification,
    SpecificationError,
    SpecificationOperator,
)


class TestClause:
    def test_operator_coerced_from_string(self):
        clause = Clause("price", ">=", Decimal("10"))
        assert clause.operator is SpecificationOperator.GE

    def test_unknown_operator_suggests(self):
        with pytest.raises(OperatorNotFoundError) as exc:
            Clause("name", "icontain", "x")
        assert "icontains" in exc.value.suggestions

    def test_logical_operator_rejected(self):
        with pytest.raises(SpecificationError, match="Logical operator"):
            Clause("price", SpecificationOperator.AND, 1)

    def test_empty_field_rejected(self):
        with pytest.raises(SpecificationError):
            Clause("", SpecificationOperator.EQ, 1)

    def test_between_normalised_to_tuple(self):
        clause = Clause("price", SpecificationOperator.BETWEEN, [1, 5])
        assert clause.value == (1, 5)

    @pytest.mark.parametrize("value", [5, [1, 2, 3], None])
    def test_between_requires_pair(self, value):
        with pytest.raises(SpecificationError, match="pair"):
            Clause("price", SpecificationOperator.BETWEEN, value)

    def test_to_dict(self):
        assert Clause("name", SpecificationOperator.EQ, "x").to_dict() == {
            "op": "=",
            "attr": "name",
            "val": "x",
        }


class TestCompositeCriteria:
    def test_all_of_to_dict(self):
        node = AllOf(
            Clause("price", SpecificationOperator.LE, 500),
            Clause("weight", SpecificationOperator.LE, 5),
        )
        assert node.to_dict() == {
            "op": "and",
            "conditions": [
                {"op": "<=", "attr": "price", "val": 500},
                {"op": "<=", "attr": "weight", "val": 5},
            ],
        }

    def test_any_of_nests(self):
        node = AnyOf(
            Clause("name", SpecificationOperator.ICONTAINS, "a"),
            AllOf(Clause("price", SpecificationOperator.GT, 1)),
        )
        data = node.to_dict()
        assert data["op"] == "or"
        assert data["conditions"][1]["op"] == "and"

    @pytest.mark.parametrize("node_cls", [AllOf, AnyOf])
    def test_empty_rejected(self, node_cls):
        with pytest.raises(SpecificationError):
            node_cls()

    def test_immutable(self):
        node = AllOf(Clause("price", SpecificationOperator.GT, 1))
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.conditions = ()  # type: ignore[misc]


class TestSpecification:
    def test_defaults(self):
        spec = Specification[Product]()
        assert spec.criteria is None
        assert spec.ordering is None
        assert spec.is_paging_enabled is False
        assert spec.to_dict() == {}

    def test_both_orderings_rejected(self):
        with pytest.raises(SpecificationError, match="not both"):
            Specification[Product](order_by="name", order_by_descending="price")

    def test_ordering_property(self):
        assert Specification[Product](order_by="name").ordering == ("name", False)
        assert Specification[Product](order_by_descending="price").ordering == (
            "price",
            True,
        )

    def test_paging_window_validated_only_when_enabled(self):
        Specification[Product](skip=-1, take=0)
        with pytest.raises(SpecificationError, match="take"):
            Specification[Product](is_paging_enabled=True, skip=0, take=0)
        with pytest.raises(SpecificationError, match="skip"):
            Specification[Product](is_paging_enabled=True, skip=-1, take=5)

    @pytest.mark.parametrize(
        ("page_number", "page_size", "skip"),
        [(1, 10, 0), (2, 5, 5), (3, 7, 14)],
    )
    def test_for_page(self, page_number, page_size, skip):
        spec = Specification[Product](order_by="name").for_page(page_number, page_size)
        assert spec.is_paging_enabled is True
        assert spec.skip == skip
        assert spec.take == page_size

    @pytest.mark.parametrize(("page_number", "page_size"), [(0, 10), (1, 0), (-1, 5)])
    def test_for_page_rejects_non_positive(self, page_number, page_size):
        with pytest.raises(SpecificationError):
            Specification[Product]().for_page(page_number, page_size)

    def test_with_paging_keeps_criteria_and_order(self):
        criteria = Clause("price", SpecificationOperator.GE, 1)
        base = Specification[Product](criteria=criteria, order_by_descending="price")

        paged = base.with_paging(10, 5)

        assert paged.criteria is criteria
        assert paged.order_by_descending == "price"
        assert (paged.skip, paged.take) == (10, 5)
        # the original is untouched
        assert base.is_paging_enabled is False

    def test_without_paging(self):
        spec = Specification[Product]().for_page(3, 5).without_paging()
        assert spec.is_paging_enabled is False
        assert (spec.skip, spec.take) == (0, 0)

    def test_immutable(self):
        spec = Specification[Product]()
        with pytest.raises(dataclasses.FrozenInstanceError):
            spec.skip = 5  # type: ignore[misc]

    def test_to_dict(self):
        spec = Specification[Product](
            criteria=Clause("price", SpecificationOperator.GT, 1),
            order_by="name",
        ).for_page(2, 10)
        assert spec.to_dict() == {
            "criteria": {"op": ">", "attr": "price", "val": 1},
            "order_by": "name",
            "skip": 10,
            "take": 10,
        }
