"""
SQLAlchemy unit of work: one session and one transaction per block.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from types import TracebackType

    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

logger = logging.getLogger("product_catalog.uow")


class SQLAlchemyUnitOfWork:
    """
    Self-managed session scope::

        async with SQLAlchemyUnitOfWork(session_factory) as uow:
            uow.session.add(model)

    The session is created on enter, the transaction committed on a clean
    exit and rolled back on error, and the session always closed.
    Exceptions raised by the database propagate unchanged.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory
        self._session: AsyncSession | None = None

    @property
    def session(self) -> AsyncSession:
        """Get the active session. Raises if the block has not been entered."""
        if self._session is None:
            raise RuntimeError("Session not yet created. Ensure __aenter__ was called.")
        return self._session

    async def __aenter__(self) -> SQLAlchemyUnitOfWork:
        self._session = self._session_factory()
        await self._session.begin()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        session = self.session
        try:
            if exc_type is None:
                await session.commit()
            else:
                logger.debug("Rolling back after %s", exc_type.__name__)
                await session.rollback()
        finally:
            await session.close()
            self._session = None
