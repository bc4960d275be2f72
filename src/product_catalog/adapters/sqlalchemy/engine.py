"""Async engine construction for the catalog database."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from ...specifications.operators import fold_case

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncEngine


def is_memory_sqlite(url: str) -> bool:
    return url.startswith("sqlite") and (":memory:" in url or url.endswith("://"))


def _sqlite_lower(value: Any) -> str | None:
    return None if value is None else fold_case(str(value))


def setup_sqlite_engine(engine: AsyncEngine) -> None:
    """Replace ``lower`` on every new SQLite connection of ``engine``."""

    @event.listens_for(engine.sync_engine, "connect")
    def _install_functions(dbapi_conn: Any, _connection_record: Any) -> None:
        # the built-in lower() only folds ASCII letters
        dbapi_conn.create_function("lower", 1, _sqlite_lower)


def create_catalog_engine(url: str, *, echo: bool = False) -> AsyncEngine:
    """
    Create an async engine for ``url``.

    In-memory SQLite gets a :class:`StaticPool` so every session shares
    the one database. Every SQLite connection has ``lower`` replaced by
    :func:`fold_case`, which keeps ``icontains`` in step with the
    in-memory evaluator.
    """
    if is_memory_sqlite(url):
        engine = create_async_engine(url, echo=echo, poolclass=StaticPool)
    else:
        engine = create_async_engine(url, echo=echo)
    if engine.dialect.name == "sqlite":
        setup_sqlite_engine(engine)
    return engine
