"""Shared fixtures for specifications tests."""

from __future__ import annotations

import pytest

from product_catalog.specifications import (
    InMemorySpecificationEvaluator,
    build_default_registry,
)


@pytest.fixture
def registry():
    """Default in-memory operator registry."""
    return build_default_registry()


@pytest.fixture
def evaluator(registry):
    return InMemorySpecificationEvaluator(registry)
