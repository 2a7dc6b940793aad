"""
Schema models for user requests and responses.

These schemas are separate from the entity models so that plaintext
passwords only ever live in input schemas and the password hash never
leaves the data-access layer through ``UserRead``.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .playlists import PlaylistRead


class UserCreate(BaseModel):
    """Registration payload carrying the plaintext password."""

    username: str = Field(min_length=1, max_length=64)
    email: str = Field(min_length=3, max_length=320)
    password: str = Field(min_length=1, max_length=128)


class UserProfileUpdate(BaseModel):
    """Profile changes requested by a caller; empty fields are left untouched."""

    username: Optional[str] = Field(default=None, max_length=64)
    email: Optional[str] = Field(default=None, max_length=320)
    password: Optional[str] = Field(default=None, max_length=128)


class UserUpdate(BaseModel):
    """Partial update applied by the user repository.

    ``hashed_password`` must already be hashed.
    """

    id: int
    username: Optional[str] = None
    email: Optional[str] = None
    hashed_password: Optional[str] = None


class UserRead(BaseModel):
    """Schema for reading a user."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None


class UserWithPlaylistsRead(UserRead):
    """User together with the playlists it owns."""

    playlists: List[PlaylistRead] = Field(default_factory=list)
