"""
Playlist-to-song association entity.

Each row links one playlist to one song. The composite primary key keeps
the pairs unique, and both foreign keys cascade on delete so removing a
playlist or a song also drops its links.
"""

from __future__ import annotations

from sqlmodel import Field

from ..base import Base


class PlaylistSong(Base, table=True):
    """Association row between a playlist and a song.

    Table: playlist_songs
    """

    __tablename__ = "playlist_songs"
    __table_args__ = ({"extend_existing": True},)

    playlist_id: int = Field(foreign_key="playlists.id", primary_key=True, ondelete="CASCADE")
    song_id: int = Field(foreign_key="songs.id", primary_key=True, ondelete="CASCADE")

    def __repr__(self) -> str:
        return f"PlaylistSong(playlist_id={self.playlist_id}, song_id={self.song_id})"
