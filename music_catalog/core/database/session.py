"""
Global database session and engine management.

This module manages the default AsyncEngine and async_sessionmaker built
from settings. Repositories never reach for these globals; callers open a
session here and pass it in.
"""

from __future__ import annotations

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from music_catalog.core.config import settings
from music_catalog.core.logging_config import get_logger

from .utils import create_all, create_engine, create_sessionmaker

logger = get_logger(__name__)

# Create global engine and session factory
engine = create_engine(settings.database_url, echo=settings.database_echo)
async_session_maker = create_sessionmaker(engine)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency generator for database sessions.

    Yields:
        AsyncSession: An asynchronous SQLAlchemy session.
    """
    async with async_session_maker() as session:
        yield session


async def init_db() -> None:
    """
    Initialize the database.

    Creates all catalog tables that do not exist yet on the default engine.
    """
    await create_all(engine)
    logger.info("Database tables created")
