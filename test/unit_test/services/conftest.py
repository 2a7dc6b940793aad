"""Fixtures for service tests: a user service over in-memory SQLite."""

from __future__ import annotations

from typing import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from music_catalog.core.database.repositories.users import UserRepository
from music_catalog.core.database.schemas.users import UserCreate
from music_catalog.core.database.utils import create_all, create_engine, create_sessionmaker
from music_catalog.services.user_service import UserService


@pytest.fixture
async def session() -> AsyncGenerator[AsyncSession, None]:
    engine = create_engine("sqlite+aiosqlite:///:memory:")
    await create_all(engine)
    try:
        async with create_sessionmaker(engine)() as session:
            yield session
    finally:
        await engine.dispose()


@pytest.fixture
def user_service(session, bcrypt_rounds) -> UserService:
    return UserService(UserRepository(session), bcrypt_rounds=bcrypt_rounds)


@pytest.fixture
async def alice(user_service):
    """Registered user alice / a@x.com with password 'secret'."""
    return await user_service.register_user(UserCreate(username="alice", email="a@x.com", password="secret"))
