"""
Database schema models for requests and responses.

This package contains Pydantic-based schema models for serialization/deserialization.
These schemas are separate from entity models to allow independent evolution of
caller contracts and database representations.
"""

from . import playlists, songs, users
from .playlists import PlaylistCreate, PlaylistRead
from .songs import SongCreate, SongRead, SongUpdate
from .users import UserCreate, UserProfileUpdate, UserRead, UserUpdate, UserWithPlaylistsRead

__all__ = [
    "PlaylistCreate",
    "PlaylistRead",
    "SongCreate",
    "SongRead",
    "SongUpdate",
    "UserCreate",
    "UserProfileUpdate",
    "UserRead",
    "UserUpdate",
    "UserWithPlaylistsRead",
    "playlists",
    "songs",
    "users",
]
