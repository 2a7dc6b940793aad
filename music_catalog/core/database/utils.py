"""
Database utility functions for engine and session management.

This module provides the core utility functions for creating database engines
and session factories, and for creating or dropping the catalog tables.

Functions:
- normalize_database_url: Rewrites sync driver URLs to their async drivers
- create_engine: Creates async SQLAlchemy engine with URL normalization
- create_sessionmaker: Creates async session factory with safe defaults
- create_all / drop_all: Create or drop all tables (for tests/dev)
"""

from __future__ import annotations

import re

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from . import entities  # noqa: F401  registers every table on Base.metadata
from .base import Base


def normalize_database_url(db_url: str) -> str:
    """Rewrite a database URL so that an async driver is used.

    ``postgres://``, ``postgresql://`` and other Postgres driver variants
    become ``postgresql+asyncpg://``; a bare ``sqlite://`` becomes
    ``sqlite+aiosqlite://``. Other URLs are returned unchanged.

    Args:
        db_url: Database connection URL

    Returns:
        URL using an async driver
    """
    url = re.sub(r"^postgres(?:ql)?(?:\+[a-z0-9_]+)?://", "postgresql+asyncpg://", db_url, count=1)
    return re.sub(r"^sqlite://", "sqlite+aiosqlite://", url, count=1)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()


def create_engine(db_url: str, echo: bool = False) -> AsyncEngine:
    """Create an async SQLAlchemy engine.

    SQLite connections get ``PRAGMA foreign_keys = ON`` so that the
    ``ON DELETE CASCADE`` rules of ``playlist_songs`` apply.

    Args:
        db_url: Database connection URL
        echo: Echo emitted SQL statements

    Returns:
        Configured AsyncEngine instance
    """
    url = normalize_database_url(db_url)
    engine = create_async_engine(url, echo=echo, pool_pre_ping=True)
    if url.startswith("sqlite"):
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create an ``async_sessionmaker`` with safe defaults for this project.

    Args:
        engine: Async SQLAlchemy engine

    Returns:
        Configured async session factory
    """
    return async_sessionmaker(engine, expire_on_commit=False)


async def create_all(engine: AsyncEngine) -> None:
    """Create all tables for the current ORM metadata.

    This is intended for tests and local development.

    Args:
        engine: Async SQLAlchemy engine
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_all(engine: AsyncEngine) -> None:
    """Drop all tables of the current ORM metadata.

    Args:
        engine: Async SQLAlchemy engine
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
