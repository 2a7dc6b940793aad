"""
Base database models and utilities.

This module provides the foundational database components used across
all entities in the catalog database layer using SQLModel.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import ConfigDict
from sqlalchemy import DateTime
from sqlmodel import SQLModel


class Base(SQLModel):
    """Base class for all SQLModel entities."""

    model_config = ConfigDict(arbitrary_types_allowed=True)


def _utc_now() -> datetime:
    """Get current UTC datetime.

    Returns:
        Current timezone-aware UTC datetime
    """
    return datetime.now(timezone.utc)


def _timestamp_type() -> DateTime:
    """Column type for timestamps; values carry their UTC offset."""
    return DateTime(timezone=True)
