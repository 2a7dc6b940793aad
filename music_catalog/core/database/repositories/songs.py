"""
Song repository interface and implementation.

This module provides data access operations for catalog songs. Lookups by
name or ID return ``None`` for a missing song instead of raising.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from music_catalog.core.errors import SongNotFoundError
from music_catalog.core.logging_config import get_logger

from ..base import _utc_now
from ..entities.songs import Song
from ..schemas.songs import SongUpdate
from .base import BaseRepository, QueryBuilder

logger = get_logger(__name__)


class SongRepository(BaseRepository[Song]):
    """Repository for song data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async session for database operations
        """
        super().__init__(session, Song)

    async def create(self, song: Song) -> Song:
        """Create a new song.

        Args:
            song: Song SQLModel instance

        Returns:
            Persisted Song with generated fields
        """
        self.session.add(song)
        await self._commit()
        await self.session.refresh(song)
        logger.info(f"Song created: {song.id} ({song.name})")
        return song

    async def get_by_id(self, song_id: int) -> Optional[Song]:
        """Get song by its ID.

        Args:
            song_id: Song ID

        Returns:
            Song instance or None
        """
        stmt = select(Song).where(Song.id == song_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_name(self, name: str) -> Optional[Song]:
        """Get the first song with the given name.

        Args:
            name: Song title (exact match)

        Returns:
            Song instance or None
        """
        stmt = select(Song).where(Song.name == name).order_by(Song.id)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def update(self, changes: SongUpdate) -> Song:
        """Apply the fields set on ``changes`` to an existing song.

        Args:
            changes: Partial update carrying the song ID

        Returns:
            Updated Song instance

        Raises:
            SongNotFoundError: If no song has ``changes.id``
        """
        song = await self.get_by_id(changes.id)
        if song is None:
            raise SongNotFoundError(changes.id)

        for field, value in changes.changed_fields().items():
            setattr(song, field, value)
        song.updated_at = _utc_now()

        self.session.add(song)
        await self._commit()
        await self.session.refresh(song)
        return song

    async def delete(self, song_id: int) -> bool:
        """Permanently delete a song by its ID.

        Args:
            song_id: Song ID to delete

        Returns:
            True if deleted, False if not found
        """
        song = await self.get_by_id(song_id)
        if song is None:
            return False

        await self.session.delete(song)
        await self._commit()
        logger.info(f"Song deleted: {song_id}")
        return True

    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[Song]:
        """List songs with optional pagination and filtering.

        Args:
            limit: Maximum records to return
            offset: Records to skip
            filters: Field filters (artist, album, genre)

        Returns:
            List of Song instances ordered by ID
        """
        stmt = select(Song).order_by(Song.id)

        if filters:
            stmt = QueryBuilder.apply_filters(stmt, Song, filters)

        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)

        result = await self.session.execute(stmt)
        return list(result.scalars().all())
