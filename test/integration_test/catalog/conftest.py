"""Fixtures for catalog integration tests.

Each test gets its own SQLite file so that separate sessions see the same
data, the way two requests against a real database would.
"""

from __future__ import annotations

import pytest

from music_catalog.core.database.repositories import build_sql_repos
from music_catalog.core.database.utils import create_all, create_engine, create_sessionmaker, drop_all


@pytest.fixture
async def engine(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'catalog.db'}")
    await create_all(engine)
    try:
        yield engine
    finally:
        await drop_all(engine)
        await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_sessionmaker(engine)


@pytest.fixture
async def repos(session_factory):
    bundle = build_sql_repos(session_factory=session_factory)
    try:
        yield bundle
    finally:
        await bundle.session.close()
