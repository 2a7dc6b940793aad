"""
Playlist entity models.

This module contains the database entity for user playlists. A playlist is
owned by one user and holds songs through the ``playlist_songs``
association table.
"""

from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

from sqlmodel import Field, Relationship

from ..base import Base, _timestamp_type, _utc_now
from .playlist_songs import PlaylistSong

if TYPE_CHECKING:
    from .songs import Song
    from .users import User


class PlaylistBase(Base):
    """Base fields for a playlist."""

    name: str = Field(max_length=255, index=True, description="Playlist name")
    user_id: int = Field(foreign_key="users.id", index=True, description="Owning user")


class Playlist(PlaylistBase, table=True):
    """Persistent playlist.

    Table: playlists
    """

    __tablename__ = "playlists"
    __table_args__ = ({"extend_existing": True},)

    # Primary key
    id: Optional[int] = Field(default=None, primary_key=True)

    # Timestamps
    created_at: datetime = Field(default_factory=_utc_now, sa_type=_timestamp_type())

    # Relationships
    user: Optional["User"] = Relationship(back_populates="playlists")
    songs: List["Song"] = Relationship(back_populates="playlists", link_model=PlaylistSong)

    def __repr__(self) -> str:
        return f"Playlist(id={self.id}, name={self.name}, user_id={self.user_id})"
