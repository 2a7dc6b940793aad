"""
Service for user registration and authentication.

The service sits on top of the user repository. It hashes plaintext
passwords before anything reaches the store and checks submitted
credentials against the stored bcrypt hash.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from music_catalog.core.database.entities.users import User
from music_catalog.core.database.repositories.users import UserRepository
from music_catalog.core.database.schemas.users import UserCreate, UserProfileUpdate, UserUpdate
from music_catalog.core.errors import (
    InvalidCredentialsError,
    UsernameOrEmailTakenError,
    UserNotFoundError,
)
from music_catalog.core.logging_config import get_logger
from music_catalog.core.security import dummy_password_hash, hash_password, verify_password

logger = get_logger(__name__)


class UserService:
    """Service layer for user operations."""

    def __init__(self, users: UserRepository, bcrypt_rounds: Optional[int] = None):
        """Initialize the service with the repository it delegates to.

        Args:
            users: User repository bound to the caller's session
            bcrypt_rounds: bcrypt cost factor, defaults to settings
        """
        self.users = users
        self.bcrypt_rounds = bcrypt_rounds

    async def validate_user(self, username: str, password: str) -> Tuple[int, bool]:
        """
        Check a username and password pair.

        Args:
            username: Login name
            password: Plaintext password

        Returns:
            ``(user_id, True)`` when the credentials match an active user,
            ``(0, False)`` otherwise
        """
        logger.debug(f"Validating user: {username}")
        try:
            user = await self.users.find_by_username(username)
        except UserNotFoundError:
            logger.info(f"User not found: {username}")
            verify_password(password, dummy_password_hash(self.bcrypt_rounds))
            return 0, False

        if not verify_password(password, user.hashed_password):
            logger.warning(f"Password comparison failed for user: {username}")
            return 0, False

        return user.id, True

    async def authenticate(self, username: str, password: str) -> User:
        """
        Return the user matching the credentials.

        Raises:
            InvalidCredentialsError: If the user does not exist or the password is wrong
        """
        user_id, ok = await self.validate_user(username, password)
        if not ok:
            raise InvalidCredentialsError()
        return await self.users.find_by_id(user_id)

    async def register_user(self, payload: UserCreate) -> User:
        """
        Register a new user with a hashed password.

        An active user holding the same username and email is rejected up
        front. A same-username user with a different email is left to the
        store's unique constraint, which surfaces as ``DuplicateUsernameError``.

        Args:
            payload: Registration data carrying the plaintext password

        Returns:
            The persisted User

        Raises:
            UsernameOrEmailTakenError: If the username and email are already registered
            DuplicateUsernameError: If another active user holds the username
        """
        try:
            existing = await self.users.find_by_username(payload.username)
        except UserNotFoundError:
            existing = None

        if existing is not None and existing.email == payload.email:
            logger.info(f"Registration rejected, username or email taken: {payload.username}")
            raise UsernameOrEmailTakenError(payload.username, payload.email)

        user = User(
            username=payload.username,
            email=payload.email,
            hashed_password=hash_password(payload.password, rounds=self.bcrypt_rounds),
        )
        return await self.users.create(user)

    async def update_user(self, user_id: int, payload: UserProfileUpdate) -> User:
        """
        Update a user's profile, hashing a new password when one is given.

        Raises:
            UserNotFoundError: If no active user has ``user_id``
        """
        hashed = hash_password(payload.password, rounds=self.bcrypt_rounds) if payload.password else None
        changes = UserUpdate(
            id=user_id,
            username=payload.username,
            email=payload.email,
            hashed_password=hashed,
        )
        return await self.users.update(changes)

    async def delete_user(self, user_id: int) -> bool:
        """Soft-delete a user."""
        return await self.users.delete(user_id)

    async def get_all_users(self) -> List[User]:
        return await self.users.list()

    async def get_user_by_username(self, username: str) -> User:
        return await self.users.find_by_username(username)

    async def get_user_by_id(self, user_id: int) -> User:
        return await self.users.find_by_id(user_id)
