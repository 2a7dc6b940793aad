"""
Password hashing helpers.

Passwords are hashed with bcrypt. The cost factor comes from settings unless
a caller passes ``rounds`` explicitly (tests use the minimum of 4).
"""

from __future__ import annotations

import functools
from typing import Optional

import bcrypt

from .config import settings
from .errors import InvalidPasswordError

# bcrypt only looks at the first 72 bytes of its input.
BCRYPT_MAX_PASSWORD_BYTES = 72


def hash_password(plain_password: str, rounds: Optional[int] = None) -> str:
    """Return the salted bcrypt hash of ``plain_password``.

    Args:
        plain_password: Plaintext password
        rounds: bcrypt cost factor, defaults to ``settings.bcrypt_rounds``

    Returns:
        The hash as a UTF-8 string, suitable for the ``hashed_password`` column

    Raises:
        InvalidPasswordError: If the password is empty or longer than 72 bytes
    """
    password = (plain_password or "").encode("utf-8")
    if not password:
        raise InvalidPasswordError("Password is empty.")
    if len(password) > BCRYPT_MAX_PASSWORD_BYTES:
        raise InvalidPasswordError(f"Password is longer than {BCRYPT_MAX_PASSWORD_BYTES} bytes.")
    salt = bcrypt.gensalt(rounds=rounds or settings.bcrypt_rounds)
    return bcrypt.hashpw(password, salt).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    password = (plain_password or "").encode("utf-8")
    hashed = (password_hash or "").encode("utf-8")
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(password, hashed)
    except ValueError:
        # Malformed hash or over-long password.
        return False


@functools.lru_cache(maxsize=None)
def dummy_password_hash(rounds: Optional[int] = None) -> str:
    """Hash of a throwaway password, checked when the username is unknown.

    Verifying against it costs the same bcrypt work as a real check, so a
    failed login takes about as long whether or not the user exists.
    """
    return hash_password("unknown-user", rounds=rounds)
