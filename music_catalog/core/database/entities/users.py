"""
User entity models.

This module contains the database entity for catalog users. Users are
soft-deleted: ``deleted_at`` marks a row inactive without removing it, and
active-only queries filter on ``deleted_at IS NULL``.
"""

from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

from sqlmodel import Field, Relationship

from ..base import Base, _timestamp_type, _utc_now

if TYPE_CHECKING:
    from .playlists import Playlist


class UserBase(Base):
    """Base fields for a user."""

    username: str = Field(max_length=64, unique=True, index=True, description="Login name")
    email: str = Field(max_length=320, description="Contact email address")


class User(UserBase, table=True):
    """Persistent user account.

    Only the bcrypt hash of the password is stored. The username stays
    unique across soft-deleted rows too, which is why registration purges a
    soft-deleted holder of the name before inserting.

    Table: users
    """

    __tablename__ = "users"
    __table_args__ = ({"extend_existing": True},)

    # Primary key
    id: Optional[int] = Field(default=None, primary_key=True)

    # Credentials
    hashed_password: str = Field(max_length=255, description="bcrypt hash of the password")

    # Timestamps
    created_at: datetime = Field(default_factory=_utc_now, sa_type=_timestamp_type())
    updated_at: datetime = Field(
        default_factory=_utc_now, sa_type=_timestamp_type(), sa_column_kwargs={"onupdate": _utc_now}
    )
    deleted_at: Optional[datetime] = Field(
        default=None, sa_type=_timestamp_type(), index=True, description="Soft-delete marker"
    )

    # Relationships
    playlists: List["Playlist"] = Relationship(
        back_populates="user",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"},
    )

    @property
    def is_deleted(self) -> bool:
        """Whether the user has been soft-deleted."""
        return self.deleted_at is not None

    def __repr__(self) -> str:
        return f"User(id={self.id}, username={self.username}, deleted={self.is_deleted})"
