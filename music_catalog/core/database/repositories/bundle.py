"""
Repository bundle for dependency injection.

This module provides a convenience bundle of all repository instances
sharing one session, for services and application components.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from .playlists import PlaylistRepository
from .songs import SongRepository
from .users import UserRepository


@dataclass(frozen=True)
class SqlRepoBundle:
    """Convenience bundle of all SQL repositories for dependency injection."""

    session: AsyncSession
    users: UserRepository
    songs: SongRepository
    playlists: PlaylistRepository


def build_sql_repos_from_session(*, session: AsyncSession) -> SqlRepoBundle:
    """Build a SqlRepoBundle from an existing session.

    Args:
        session: Existing async session

    Returns:
        Bundle containing all repository instances
    """
    return SqlRepoBundle(
        session=session,
        users=UserRepository(session),
        songs=SongRepository(session),
        playlists=PlaylistRepository(session),
    )


def build_sql_repos(*, session_factory: async_sessionmaker[AsyncSession]) -> SqlRepoBundle:
    """Build a SqlRepoBundle around a new session from ``session_factory``.

    The caller owns the session and closes it through ``bundle.session``.

    Args:
        session_factory: Async session factory for creating sessions

    Returns:
        Bundle containing all repository instances
    """
    return build_sql_repos_from_session(session=session_factory())
