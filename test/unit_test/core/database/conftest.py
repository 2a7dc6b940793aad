"""Test configuration for database unit tests.

This module provides common fixtures and utilities for testing the
catalog database layer with in-memory SQLite and mocked dependencies.
"""

from __future__ import annotations

from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from music_catalog.core.database.entities.playlists import Playlist
from music_catalog.core.database.entities.songs import Song
from music_catalog.core.database.entities.users import User
from music_catalog.core.database.repositories.playlists import PlaylistRepository
from music_catalog.core.database.repositories.songs import SongRepository
from music_catalog.core.database.repositories.users import UserRepository
from music_catalog.core.database.utils import create_all, create_engine, create_sessionmaker


@pytest.fixture(scope="function")
async def in_memory_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create in-memory SQLite engine with all catalog tables."""
    engine = create_engine("sqlite+aiosqlite:///:memory:")
    await create_all(engine)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture(scope="function")
async def in_memory_session(in_memory_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create in-memory SQLite session for testing."""
    async with create_sessionmaker(in_memory_engine)() as session:
        yield session


@pytest.fixture
def mock_session():
    """Mock async database session."""
    session = AsyncMock()
    session.add = MagicMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.refresh = AsyncMock()
    session.delete = AsyncMock()
    session.flush = AsyncMock()
    return session


@pytest.fixture
def user_repo(in_memory_session) -> UserRepository:
    return UserRepository(in_memory_session)


@pytest.fixture
def song_repo(in_memory_session) -> SongRepository:
    return SongRepository(in_memory_session)


@pytest.fixture
def playlist_repo(in_memory_session) -> PlaylistRepository:
    return PlaylistRepository(in_memory_session)


@pytest.fixture(scope="function")
def sample_user_data() -> dict:
    """Sample user data for testing (the password is already a hash)."""
    return {
        "username": "alice",
        "email": "a@x.com",
        "hashed_password": "$2b$04$abcdefghijklmnopqrstuuM0pBqvZ0ZMQ2kqeY9mK0Vx7sZQ4pE1a",
    }


@pytest.fixture(scope="function")
def sample_song_data() -> dict:
    """Sample song data for testing."""
    return {
        "name": "Blue in Green",
        "artist": "Miles Davis",
        "album": "Kind of Blue",
        "genre": "jazz",
        "duration_seconds": 337,
    }


@pytest.fixture
async def saved_user(user_repo, sample_user_data) -> User:
    return await user_repo.create(User(**sample_user_data))


@pytest.fixture
async def saved_song(song_repo, sample_song_data) -> Song:
    return await song_repo.create(Song(**sample_song_data))


@pytest.fixture
async def saved_playlist(playlist_repo, saved_user) -> Playlist:
    return await playlist_repo.create(Playlist(name="Late Night", user_id=saved_user.id))
