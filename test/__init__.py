"""Test suite for the music catalog."""
