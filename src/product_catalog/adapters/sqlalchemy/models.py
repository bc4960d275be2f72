from decimal import Decimal
from uuid import UUID

from sqlalchemy import BigInteger, Integer, Numeric, String, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from ...domain.product import DECIMAL_PLACES


class Base(DeclarativeBase):
    """Declarative base for the catalog's SQLAlchemy models."""


class ProductModel(Base):
    """
    Persistence model for :class:`~product_catalog.domain.product.Product`.

    ``position`` is a surrogate auto-increment key recording insertion
    order. It is the store-default order and the tie-breaker after any
    declared sort key, matching the in-memory store's insertion order.
    """

    __tablename__ = "products"

    position: Mapped[int] = mapped_column(
        Integer().with_variant(BigInteger, "postgresql"),
        primary_key=True,
        autoincrement=True,
    )
    id: Mapped[UUID] = mapped_column(Uuid, unique=True, index=True, nullable=False)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(String(1000), nullable=False)
    price: Mapped[Decimal] = mapped_column(
        Numeric(18, DECIMAL_PLACES), nullable=False
    )
    weight: Mapped[Decimal] = mapped_column(
        Numeric(18, DECIMAL_PLACES), nullable=False
    )


# Entity attributes that map 1:1 onto columns.
ENTITY_FIELDS: tuple[str, ...] = ("id", "name", "description", "price", "weight")
