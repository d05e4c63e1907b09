"""
Database utility functions for engine and session management.

This module provides the core utility functions for creating database engines
and session factories. Built with async SQLAlchemy; sessions are SQLModel's
``AsyncSession`` so repositories can use ``session.exec``.

Functions:
- create_engine: Creates async SQLAlchemy engine with URL normalization
- create_sessionmaker: Creates async session factory with safe defaults
- create_all / drop_all: Create or drop all tables from ORM metadata (for tests/dev)
- to_sync_url: Maps an async URL to its synchronous driver (Alembic offline mode)
"""

from __future__ import annotations

import re

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlmodel.ext.asyncio.session import AsyncSession

from bankcompare.core.logging_config import get_logger

from .base import Base

logger = get_logger(__name__)

_POSTGRES_URL = re.compile(r"^postgres(?:ql)?(?:\+[a-z0-9_]+)?://")
_SQLITE_URL = re.compile(r"^sqlite(?:\+[a-z0-9_]+)?://")


def normalize_url(db_url: str) -> str:
    """Rewrite a database URL so the async driver is used.

    ``postgres://``, ``postgresql://`` and other Postgres variants become
    ``postgresql+asyncpg://``; plain ``sqlite://`` becomes ``sqlite+aiosqlite://``.
    """
    if _POSTGRES_URL.match(db_url):
        return _POSTGRES_URL.sub("postgresql+asyncpg://", db_url, count=1)
    if _SQLITE_URL.match(db_url):
        return _SQLITE_URL.sub("sqlite+aiosqlite://", db_url, count=1)
    return db_url


def to_sync_url(db_url: str) -> str:
    """Map a database URL onto the default synchronous driver."""
    if _POSTGRES_URL.match(db_url):
        return _POSTGRES_URL.sub("postgresql://", db_url, count=1)
    if _SQLITE_URL.match(db_url):
        return _SQLITE_URL.sub("sqlite://", db_url, count=1)
    return db_url


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ignores ON DELETE actions unless enforcement is switched on per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine(db_url: str, echo: bool = False, **kwargs) -> AsyncEngine:
    """Create an async SQLAlchemy engine.

    The helper normalizes the URL to an async driver. SQLite engines get
    foreign key enforcement switched on for every new connection so cascade
    and set-null deletes behave as on PostgreSQL.

    Args:
        db_url: Database connection URL
        echo: Log every emitted SQL statement
        **kwargs: Extra ``create_async_engine`` arguments (e.g. ``poolclass``)

    Returns:
        Configured AsyncEngine instance
    """
    url = normalize_url(db_url)
    engine = create_async_engine(url, echo=echo, pool_pre_ping=True, **kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    logger.debug(f"Created database engine for dialect={engine.dialect.name}")
    return engine


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create an ``async_sessionmaker`` with safe defaults for this project.

    Args:
        engine: Async SQLAlchemy engine

    Returns:
        Configured async session factory
    """
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def create_all(engine: AsyncEngine) -> None:
    """Create all tables for the current ORM metadata.

    This is mainly intended for tests and local development.
    Production should use Alembic migrations instead.

    Args:
        engine: Async SQLAlchemy engine
    """
    # Registers every table on the metadata
    from . import entities  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_all(engine: AsyncEngine) -> None:
    """Drop all tables of the current ORM metadata.

    Args:
        engine: Async SQLAlchemy engine
    """
    from . import entities  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
