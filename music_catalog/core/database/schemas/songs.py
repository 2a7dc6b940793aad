"""
Schema models for song requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SongCreate(BaseModel):
    """Schema for creating a song."""

    name: str = Field(min_length=1, max_length=255)
    artist: str = Field(min_length=1, max_length=255)
    album: Optional[str] = Field(default=None, max_length=255)
    genre: Optional[str] = Field(default=None, max_length=64)
    duration_seconds: Optional[int] = Field(default=None, ge=0)


class SongUpdate(BaseModel):
    """Partial song update; ``None`` and empty strings are skipped."""

    id: int
    name: Optional[str] = None
    artist: Optional[str] = None
    album: Optional[str] = None
    genre: Optional[str] = None
    duration_seconds: Optional[int] = Field(default=None, ge=0)

    def changed_fields(self) -> dict:
        """Fields that carry a value, excluding the identifier."""
        values = self.model_dump(exclude={"id"}, exclude_none=True)
        return {key: value for key, value in values.items() if value != ""}


class SongRead(BaseModel):
    """Schema for reading a song."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    artist: str
    album: Optional[str] = None
    genre: Optional[str] = None
    duration_seconds: Optional[int] = None
    created_at: datetime
    updated_at: datetime
