"""
Service layer for the music catalog.

Services wrap repositories with business rules; ``UserService`` handles
registration and password authentication.
"""

from .user_service import UserService

__all__ = ["UserService"]
