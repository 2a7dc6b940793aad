"""
Schema models for playlist requests and responses.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PlaylistCreate(BaseModel):
    """Schema for creating a playlist."""

    name: str = Field(min_length=1, max_length=255)
    user_id: int


class PlaylistRead(BaseModel):
    """Schema for reading a playlist (without its songs)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    user_id: int
    created_at: datetime
