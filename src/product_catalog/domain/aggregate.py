"""Aggregate Root base class with Generic ID support."""

from __future__ import annotations

from typing import Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict

ID = TypeVar("ID", str, int, UUID)


class AggregateRoot(BaseModel, Generic[ID]):
    """Base class for all Aggregate Roots.

    Generic over ``ID`` to support UUID, int, or str primary keys.
    Aggregates are frozen: once validated, an instance is an immutable
    snapshot and a change means building (and saving) a new one under the
    same ``id``.

    Usage::

        class Product(AggregateRoot[UUID]):
            name: str
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    id: ID
