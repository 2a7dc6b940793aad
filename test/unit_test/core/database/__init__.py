"""Unit tests for the catalog database layer.

Covers entity validation and table metadata, the user, song and playlist
repositories, and the engine and session helpers. All tests use in-memory
SQLite or mocks, so no external database service is required.
"""
