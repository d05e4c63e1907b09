"""
Global database session and engine management.

This module manages the process-wide AsyncEngine and async_sessionmaker
built from ``settings``. Both are created on first use so importing the
database package never opens a connection pool.
"""

from __future__ import annotations

from functools import lru_cache
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from bankcompare.core.config import settings

from .utils import create_engine, create_sessionmaker


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """Get the global engine, creating it from settings on first call."""
    database = settings.database
    return create_engine(database.url, echo=database.echo)


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """Get the global session factory bound to ``get_engine()``."""
    return create_sessionmaker(get_engine())


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency generator for database sessions.

    Yields:
        AsyncSession: An asynchronous SQLModel session.
    """
    async with get_session_maker()() as session:
        yield session


async def dispose_engine() -> None:
    """Dispose the global engine and forget the cached factories."""
    if get_engine.cache_info().currsize:
        await get_engine().dispose()
    get_session_maker.cache_clear()
    get_engine.cache_clear()
