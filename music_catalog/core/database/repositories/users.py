"""
User repository interface and implementation.

This module provides data access operations for user accounts, including
soft deletion and the reclaiming of usernames held by soft-deleted rows.
Built on SQLModel entities and an injected async session.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlmodel import col, select

from music_catalog.core.errors import DuplicateUsernameError, UserNotFoundError
from music_catalog.core.logging_config import get_logger

from ..base import _utc_now
from ..entities.users import User
from ..schemas.users import UserUpdate
from .base import BaseRepository, QueryBuilder

logger = get_logger(__name__)


def _is_username_conflict(exc: IntegrityError) -> bool:
    """Whether the integrity error comes from the unique username constraint."""
    return "username" in str(exc.orig).lower()


class UserRepository(BaseRepository[User]):
    """Repository for user data access operations using SQLModel.

    Every read except the ``include_deleted=True`` variants only sees active
    users, i.e. rows whose ``deleted_at`` is null.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async session for database operations
        """
        super().__init__(session, User)

    async def create(self, user: User) -> User:
        """Create a new user, reclaiming the username from a soft-deleted row.

        The lookup of the current holder of the username (soft-deleted rows
        included), the permanent removal of a soft-deleted holder and the
        insert all run in the session's current transaction, so a failed
        insert also undoes the purge.

        Args:
            user: User instance whose ``hashed_password`` is already hashed

        Returns:
            Persisted User with generated fields

        Raises:
            DuplicateUsernameError: If an active user already holds the username
        """
        try:
            existing = await self._get_by_username(user.username, include_deleted=True)
            if existing is not None and existing.is_deleted:
                logger.info(f"Purging soft-deleted user {existing.id} to free username '{user.username}'")
                await self.session.delete(existing)
                await self.session.flush()

            self.session.add(user)
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            if _is_username_conflict(exc):
                logger.warning(f"Username already taken: '{user.username}'")
                raise DuplicateUsernameError(user.username) from exc
            raise
        except SQLAlchemyError as exc:
            await self.session.rollback()
            logger.error(f"Error creating user '{user.username}': {exc}")
            raise

        await self.session.refresh(user)
        logger.info(f"User created: {user.id} ({user.username})")
        return user

    async def get_by_id(self, user_id: int, include_deleted: bool = False) -> Optional[User]:
        """Get a user by its ID.

        Args:
            user_id: User ID
            include_deleted: Also match soft-deleted rows

        Returns:
            User instance or None
        """
        stmt = select(User).where(User.id == user_id)
        if not include_deleted:
            stmt = stmt.where(col(User.deleted_at).is_(None))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_by_id(self, user_id: int, include_deleted: bool = False) -> User:
        """Get a user by its ID or fail.

        Raises:
            UserNotFoundError: If no matching row exists
        """
        user = await self.get_by_id(user_id, include_deleted=include_deleted)
        if user is None:
            raise UserNotFoundError(user_id=user_id)
        return user

    async def find_by_username(self, username: str, include_deleted: bool = False) -> User:
        """Get a user by username with its playlists loaded.

        Args:
            username: Login name
            include_deleted: Also match a soft-deleted row

        Returns:
            The matching User

        Raises:
            UserNotFoundError: If no matching row exists
        """
        user = await self._get_by_username(username, include_deleted=include_deleted, with_playlists=True)
        if user is None:
            logger.debug(f"User not found: '{username}'")
            raise UserNotFoundError(username=username)
        return user

    async def update(self, changes: UserUpdate) -> User:
        """Apply the non-empty fields of ``changes`` to an active user.

        Args:
            changes: Partial update; ``hashed_password`` must already be hashed

        Returns:
            Updated User instance

        Raises:
            UserNotFoundError: If no active user has ``changes.id``
            DuplicateUsernameError: If the new username is already taken
        """
        user = await self.get_by_id(changes.id)
        if user is None:
            raise UserNotFoundError(user_id=changes.id)

        if changes.username:
            user.username = changes.username
        if changes.email:
            user.email = changes.email
        if changes.hashed_password:
            user.hashed_password = changes.hashed_password
        user.updated_at = _utc_now()

        self.session.add(user)
        try:
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            if _is_username_conflict(exc):
                raise DuplicateUsernameError(changes.username or user.username) from exc
            raise
        except SQLAlchemyError:
            await self.session.rollback()
            raise

        await self.session.refresh(user)
        logger.info(f"User updated: {user.id}")
        return user

    async def delete(self, user_id: int) -> bool:
        """Soft-delete a user by setting its ``deleted_at`` marker.

        Args:
            user_id: User ID to delete

        Returns:
            True if an active user was marked, False if none was found
        """
        user = await self.get_by_id(user_id)
        if user is None:
            return False

        user.deleted_at = _utc_now()
        self.session.add(user)
        await self._commit()
        logger.info(f"User soft-deleted: {user_id}")
        return True

    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[User]:
        """List active users with their playlists loaded.

        Args:
            limit: Maximum records to return
            offset: Records to skip
            filters: Field filters (username, email)

        Returns:
            List of User instances ordered by ID
        """
        stmt = (
            select(User)
            .where(col(User.deleted_at).is_(None))
            .options(selectinload(User.playlists))
            .order_by(User.id)
            .execution_options(populate_existing=True)
        )

        if filters:
            stmt = QueryBuilder.apply_filters(stmt, User, filters)

        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)

        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def _get_by_username(
        self, username: str, include_deleted: bool = False, with_playlists: bool = False
    ) -> Optional[User]:
        stmt = select(User).where(User.username == username)
        if not include_deleted:
            stmt = stmt.where(col(User.deleted_at).is_(None))
        if with_playlists:
            stmt = stmt.options(selectinload(User.playlists)).execution_options(populate_existing=True)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
