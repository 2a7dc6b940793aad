"""Error types for the music catalog.

Defines a small hierarchy of exceptions raised by repositories and services
to signal missing rows, username conflicts and failed authentication. Store
errors from SQLAlchemy are never wrapped; they reach the caller unchanged.
"""

from __future__ import annotations

from typing import Optional


class MusicCatalogError(Exception):
    """Base error for all music catalog exceptions."""


class NotFoundError(MusicCatalogError):
    """Raised when a requested row does not exist (or is soft-deleted)."""


class UserNotFoundError(NotFoundError):
    """Raised when no active user matches the lookup."""

    def __init__(self, user_id: Optional[int] = None, username: Optional[str] = None) -> None:
        self.user_id = user_id
        self.username = username
        if username is not None:
            super().__init__(f"User not found: '{username}'")
        elif user_id is not None:
            super().__init__(f"User not found: id={user_id}")
        else:
            super().__init__("User not found")


class SongNotFoundError(NotFoundError):
    """Raised when no song matches the given identifier."""

    def __init__(self, song_id: int) -> None:
        self.song_id = song_id
        super().__init__(f"Song not found: id={song_id}")


class PlaylistNotFoundError(NotFoundError):
    """Raised when no playlist matches the given identifier."""

    def __init__(self, playlist_id: int) -> None:
        self.playlist_id = playlist_id
        super().__init__(f"Playlist not found: id={playlist_id}")


class DuplicateUsernameError(MusicCatalogError):
    """Raised when an active user already holds the username."""

    def __init__(self, username: str, message: Optional[str] = None) -> None:
        self.username = username
        super().__init__(message or f"Username already exists: '{username}'")


class UsernameOrEmailTakenError(DuplicateUsernameError):
    """Raised at registration when the username and email are already registered."""

    def __init__(self, username: str, email: str) -> None:
        super().__init__(username, f"Username or email already taken: '{username}' / '{email}'")
        self.email = email


class InvalidCredentialsError(MusicCatalogError):
    """Raised when the username or password is incorrect."""

    def __init__(self) -> None:
        super().__init__("Invalid username or password")


class InvalidPasswordError(MusicCatalogError):
    """Raised when a plaintext password cannot be hashed."""
