"""
Database repository layer using SQLModel.

This package contains one repository class per table. Each module provides
type-safe async data access operations for its SQLModel entity.

Modules:
- base: BaseRepository interface and QueryBuilder utilities
- users: User accounts, soft deletion and username reclaiming
- songs: Song catalog operations
- playlists: Playlists and playlist-to-song links
- bundle: Repository bundle for dependency injection
"""

from .bundle import SqlRepoBundle, build_sql_repos, build_sql_repos_from_session
from .playlists import PlaylistRepository
from .songs import SongRepository
from .users import UserRepository

__all__ = [
    "PlaylistRepository",
    "SongRepository",
    "SqlRepoBundle",
    "UserRepository",
    "build_sql_repos",
    "build_sql_repos_from_session",
]
