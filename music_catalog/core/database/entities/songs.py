"""
Song entity models.

This module contains the database entity for catalog songs.
"""

from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

from sqlmodel import Field, Relationship

from ..base import Base, _timestamp_type, _utc_now
from .playlist_songs import PlaylistSong

if TYPE_CHECKING:
    from .playlists import Playlist


class SongBase(Base):
    """Base fields for a song."""

    name: str = Field(max_length=255, index=True, description="Song title")
    artist: str = Field(max_length=255, description="Performing artist")
    album: Optional[str] = Field(default=None, max_length=255, description="Album the song appears on")
    genre: Optional[str] = Field(default=None, max_length=64, description="Genre label")
    duration_seconds: Optional[int] = Field(default=None, ge=0, description="Track length in seconds")


class Song(SongBase, table=True):
    """Persistent song in the catalog.

    Table: songs
    """

    __tablename__ = "songs"
    __table_args__ = ({"extend_existing": True},)

    # Primary key
    id: Optional[int] = Field(default=None, primary_key=True)

    # Timestamps
    created_at: datetime = Field(default_factory=_utc_now, sa_type=_timestamp_type())
    updated_at: datetime = Field(
        default_factory=_utc_now, sa_type=_timestamp_type(), sa_column_kwargs={"onupdate": _utc_now}
    )

    # Relationships
    playlists: List["Playlist"] = Relationship(back_populates="songs", link_model=PlaylistSong)

    def __repr__(self) -> str:
        return f"Song(id={self.id}, name={self.name}, artist={self.artist})"
