"""Integration tests for the catalog on a file-backed SQLite database."""
