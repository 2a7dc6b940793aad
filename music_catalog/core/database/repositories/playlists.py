"""
Playlist repository interface and implementation.

This module provides data access operations for user playlists and their
song associations. Playlists returned by list and lookup queries come with
their songs loaded.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy import delete as sa_delete
from sqlalchemy import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlmodel import select

from music_catalog.core.errors import PlaylistNotFoundError
from music_catalog.core.logging_config import get_logger

from ..entities.playlist_songs import PlaylistSong
from ..entities.playlists import Playlist
from .base import BaseRepository, QueryBuilder

logger = get_logger(__name__)


class PlaylistRepository(BaseRepository[Playlist]):
    """Repository for playlist data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async session for database operations
        """
        super().__init__(session, Playlist)

    async def create(self, playlist: Playlist) -> Playlist:
        """Create a new playlist.

        Args:
            playlist: Playlist SQLModel instance

        Returns:
            Persisted Playlist with generated fields
        """
        self.session.add(playlist)
        await self._commit()
        await self.session.refresh(playlist)
        logger.info(f"Playlist created: {playlist.id} for user {playlist.user_id}")
        return playlist

    async def get_by_id(self, playlist_id: int) -> Optional[Playlist]:
        """Get playlist by its ID with songs loaded.

        Args:
            playlist_id: Playlist ID

        Returns:
            Playlist instance or None
        """
        stmt = (
            select(Playlist)
            .where(Playlist.id == playlist_id)
            .options(selectinload(Playlist.songs))
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_by_id(self, playlist_id: int) -> Playlist:
        """Get playlist by its ID or fail.

        Raises:
            PlaylistNotFoundError: If no playlist has ``playlist_id``
        """
        playlist = await self.get_by_id(playlist_id)
        if playlist is None:
            raise PlaylistNotFoundError(playlist_id)
        return playlist

    async def get_by_name_and_user_id(self, name: str, user_id: int) -> Optional[Playlist]:
        """Get a user's playlist by name.

        Args:
            name: Playlist name (exact match)
            user_id: Owning user ID

        Returns:
            Playlist instance or None
        """
        stmt = (
            select(Playlist)
            .where(Playlist.name == name, Playlist.user_id == user_id)
            .options(selectinload(Playlist.songs))
            .order_by(Playlist.id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def update(self, playlist: Playlist) -> Playlist:
        """Persist changes made to a loaded playlist.

        Args:
            playlist: Playlist instance with updated fields

        Returns:
            Updated Playlist instance
        """
        self.session.add(playlist)
        await self._commit()
        await self.session.refresh(playlist)
        return playlist

    async def delete(self, playlist_id: int) -> bool:
        """Delete playlist by its ID; its song links are removed with it.

        Args:
            playlist_id: Playlist ID to delete

        Returns:
            True if deleted, False if not found
        """
        playlist = await self.get_by_id(playlist_id)
        if playlist is None:
            return False

        await self.session.delete(playlist)
        await self._commit()
        logger.info(f"Playlist deleted: {playlist_id}")
        return True

    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[Playlist]:
        """List playlists with their songs loaded.

        Args:
            limit: Maximum records to return
            offset: Records to skip
            filters: Field filters (user_id, name)

        Returns:
            List of Playlist instances ordered by ID
        """
        stmt = (
            select(Playlist)
            .options(selectinload(Playlist.songs))
            .order_by(Playlist.id)
            .execution_options(populate_existing=True)
        )

        if filters:
            stmt = QueryBuilder.apply_filters(stmt, Playlist, filters)

        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)

        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def add_song(self, playlist_id: int, song_id: int) -> None:
        """Link a song to a playlist by inserting one ``playlist_songs`` row.

        A pair that is already linked violates the composite primary key;
        the resulting ``IntegrityError`` propagates after rollback.

        Args:
            playlist_id: Playlist ID
            song_id: Song ID
        """
        stmt = insert(PlaylistSong).values(playlist_id=playlist_id, song_id=song_id)
        try:
            await self.session.execute(stmt)
            await self.session.commit()
        except SQLAlchemyError as exc:
            await self.session.rollback()
            logger.error(f"Error adding song {song_id} to playlist {playlist_id}: {exc}")
            raise
        logger.info(f"Song {song_id} added to playlist {playlist_id}")

    async def remove_song(self, playlist_id: int, song_id: int) -> bool:
        """Unlink a song from a playlist.

        Args:
            playlist_id: Playlist ID
            song_id: Song ID

        Returns:
            True if a link was removed, False if none existed
        """
        stmt = sa_delete(PlaylistSong).where(
            PlaylistSong.playlist_id == playlist_id,
            PlaylistSong.song_id == song_id,
        )
        try:
            result = await self.session.execute(stmt)
            await self.session.commit()
        except SQLAlchemyError:
            await self.session.rollback()
            raise
        return result.rowcount > 0
