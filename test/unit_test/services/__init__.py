"""Unit tests for the service layer."""
