"""
Core utilities and configuration for the music catalog.

This package provides core functionality including logging configuration,
settings, error types, password hashing and the database layer.
"""

from music_catalog.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
