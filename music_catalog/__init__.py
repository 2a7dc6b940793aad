"""
Music catalog data-access and authentication layer.

Users, songs and playlists are persisted through SQLModel entities and
async repositories; ``services.user_service`` adds password-based
authentication on top of them.
"""

__version__ = "0.1.0"
