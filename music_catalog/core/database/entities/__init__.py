"""
Database entity models.

This package contains all database entity models, one module per table:

- users: User accounts with soft-delete marker
- songs: Catalog songs
- playlists: User-owned playlists
- playlist_songs: Playlist-to-song association rows

Importing the package registers every table on ``Base.metadata`` so
relationships between modules resolve.
"""

from . import playlist_songs, playlists, songs, users
from .playlist_songs import PlaylistSong
from .playlists import Playlist
from .songs import Song
from .users import User

__all__ = [
    "Playlist",
    "PlaylistSong",
    "Song",
    "User",
    "playlist_songs",
    "playlists",
    "songs",
    "users",
]
