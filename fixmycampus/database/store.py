"""Thin persistence interface used by the services.

Wraps an ``AsyncSession`` with the handful of operations the services need
(``get``, ``list``, ``execute`` and ``add``). Every call commits on its own;
driver failures are rolled back, logged and re-raised as ``StoreError``.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional, TypeVar

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.sql.expression import Executable, Select
from sqlalchemy.ext.asyncio import AsyncSession

from fixmycampus.database.config import get_db
from fixmycampus.errors import StoreError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Store:
    """Per-request facade over the database session."""

    def __init__(self, session: AsyncSession):
        self.session = session

    @asynccontextmanager
    async def _guard(self, action: str) -> AsyncIterator[None]:
        try:
            yield
        except SQLAlchemyError as exc:
            await self.session.rollback()
            logger.error(f"Database error while trying to {action}: {exc}", exc_info=True)
            raise StoreError(f"Failed to {action}") from exc

    async def get(self, model: type[T], ident: str, action: str = "fetch record") -> Optional[T]:
        """Fetch one row by primary key, or None.

        Always re-reads the row so that values changed by ``execute`` are
        visible in the same session.
        """
        async with self._guard(action):
            return await self.session.get(model, ident, populate_existing=True)

    async def list(self, statement: Select, action: str = "fetch records") -> list[Any]:
        async with self._guard(action):
            result = await self.session.execute(statement)
            return list(result.scalars().all())

    async def execute(self, statement: Executable, action: str = "write records") -> int:
        """Run a write statement and commit. Returns the affected row count."""
        async with self._guard(action):
            result = await self.session.execute(statement)
            await self.session.commit()
            return result.rowcount

    async def add(self, instance: T, action: str = "save record") -> T:
        async with self._guard(action):
            self.session.add(instance)
            await self.session.commit()
            await self.session.refresh(instance)
            return instance


async def get_store(db: AsyncSession = Depends(get_db)) -> Store:
    return Store(db)
