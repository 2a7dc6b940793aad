"""Unit tests for playlist repository.

Covers playlist CRUD plus the song association helpers, which write the
``playlist_songs`` table directly.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from music_catalog.core.database.entities.playlist_songs import PlaylistSong
from music_catalog.core.database.entities.playlists import Playlist
from music_catalog.core.database.entities.songs import Song
from music_catalog.core.database.entities.users import User
from music_catalog.core.database.repositories.playlists import PlaylistRepository
from music_catalog.core.errors import PlaylistNotFoundError


async def _link_count(session) -> int:
    return await session.scalar(select(func.count()).select_from(PlaylistSong))


class TestPlaylistRepositoryWithMockSession:
    """PlaylistRepository operations against a mocked session."""

    @pytest.fixture
    def repository(self, mock_session):
        return PlaylistRepository(mock_session)

    async def test_create_success(self, repository, mock_session):
        mock_playlist = MagicMock()
        mock_playlist.id = 1
        mock_playlist.user_id = 2

        result = await repository.create(mock_playlist)

        mock_session.add.assert_called_once_with(mock_playlist)
        mock_session.commit.assert_called_once()
        mock_session.refresh.assert_called_once_with(mock_playlist)
        assert result == mock_playlist

    async def test_add_song_rolls_back_on_failure(self, repository, mock_session):
        mock_session.execute.side_effect = IntegrityError(
            "INSERT", {}, Exception("UNIQUE constraint failed: playlist_songs.playlist_id, playlist_songs.song_id")
        )

        with pytest.raises(IntegrityError):
            await repository.add_song(1, 2)

        mock_session.rollback.assert_awaited_once()
        mock_session.commit.assert_not_called()

    async def test_remove_song_reports_missing_link(self, repository, mock_session):
        result = MagicMock()
        result.rowcount = 0
        mock_session.execute.return_value = result

        assert await repository.remove_song(1, 2) is False
        mock_session.commit.assert_awaited_once()


class TestPlaylistRepository:
    """PlaylistRepository operations against in-memory SQLite."""

    async def test_create_and_get_by_id(self, playlist_repo, saved_user):
        playlist = await playlist_repo.create(Playlist(name="Focus", user_id=saved_user.id))

        found = await playlist_repo.get_by_id(playlist.id)

        assert found is not None
        assert found.name == "Focus"
        assert found.user_id == saved_user.id
        assert found.songs == []

    async def test_get_by_id_missing_returns_none(self, playlist_repo):
        assert await playlist_repo.get_by_id(404) is None

    async def test_find_by_id_missing_raises(self, playlist_repo):
        with pytest.raises(PlaylistNotFoundError) as exc_info:
            await playlist_repo.find_by_id(404)

        assert exc_info.value.playlist_id == 404

    async def test_get_by_name_and_user_id(self, playlist_repo, user_repo, saved_playlist, sample_user_data):
        bob = await user_repo.create(User(**dict(sample_user_data, username="bob")))

        found = await playlist_repo.get_by_name_and_user_id("Late Night", saved_playlist.user_id)

        assert found is not None
        assert found.id == saved_playlist.id
        assert await playlist_repo.get_by_name_and_user_id("Late Night", bob.id) is None
        assert await playlist_repo.get_by_name_and_user_id("Early Morning", saved_playlist.user_id) is None

    async def test_update_renames_playlist(self, playlist_repo, saved_playlist):
        saved_playlist.name = "Later Night"

        updated = await playlist_repo.update(saved_playlist)

        assert updated.name == "Later Night"
        assert (await playlist_repo.get_by_id(saved_playlist.id)).name == "Later Night"

    async def test_create_for_missing_user_fails(self, playlist_repo):
        with pytest.raises(IntegrityError):
            await playlist_repo.create(Playlist(name="Orphan", user_id=999))

    async def test_list_filters_by_owner(self, playlist_repo, saved_playlist, saved_user):
        await playlist_repo.create(Playlist(name="Gym", user_id=saved_user.id))

        everything = await playlist_repo.list()
        named = await playlist_repo.list(filters={"name": "Gym"})

        assert [playlist.name for playlist in everything] == ["Late Night", "Gym"]
        assert [playlist.name for playlist in named] == ["Gym"]
        assert len(await playlist_repo.list(filters={"user_id": saved_user.id}, limit=1)) == 1


class TestPlaylistSongLinks:
    """Song association helpers of PlaylistRepository."""

    async def test_add_song_shows_up_in_playlist(self, playlist_repo, saved_playlist, saved_song):
        await playlist_repo.add_song(saved_playlist.id, saved_song.id)

        playlist = await playlist_repo.get_by_id(saved_playlist.id)

        assert [song.name for song in playlist.songs] == ["Blue in Green"]

    async def test_add_song_twice_fails(self, playlist_repo, in_memory_session, saved_playlist, saved_song):
        playlist_id, song_id = saved_playlist.id, saved_song.id
        await playlist_repo.add_song(playlist_id, song_id)

        with pytest.raises(IntegrityError):
            await playlist_repo.add_song(playlist_id, song_id)

        assert await _link_count(in_memory_session) == 1

    async def test_add_missing_song_fails(self, playlist_repo, in_memory_session, saved_playlist):
        playlist_id = saved_playlist.id

        with pytest.raises(IntegrityError):
            await playlist_repo.add_song(playlist_id, 999)

        assert await _link_count(in_memory_session) == 0

    async def test_remove_song(self, playlist_repo, saved_playlist, saved_song):
        await playlist_repo.add_song(saved_playlist.id, saved_song.id)

        assert await playlist_repo.remove_song(saved_playlist.id, saved_song.id) is True
        assert await playlist_repo.remove_song(saved_playlist.id, saved_song.id) is False
        assert (await playlist_repo.get_by_id(saved_playlist.id)).songs == []

    async def test_delete_playlist_removes_links_but_keeps_songs(
        self, playlist_repo, song_repo, in_memory_session, saved_playlist, saved_song
    ):
        playlist_id, song_id = saved_playlist.id, saved_song.id
        await playlist_repo.add_song(playlist_id, song_id)

        assert await playlist_repo.delete(playlist_id) is True

        assert await playlist_repo.get_by_id(playlist_id) is None
        assert await song_repo.get_by_id(song_id) is not None
        assert await _link_count(in_memory_session) == 0
        assert await playlist_repo.delete(playlist_id) is False

    async def test_delete_song_removes_it_from_playlists(
        self, playlist_repo, song_repo, in_memory_session, saved_playlist, sample_song_data
    ):
        kept = await song_repo.create(Song(**dict(sample_song_data, name="Flamenco Sketches")))
        dropped = await song_repo.create(Song(**sample_song_data))
        await playlist_repo.add_song(saved_playlist.id, kept.id)
        await playlist_repo.add_song(saved_playlist.id, dropped.id)

        assert await song_repo.delete(dropped.id) is True

        playlist = await playlist_repo.get_by_id(saved_playlist.id)
        assert [song.name for song in playlist.songs] == ["Flamenco Sketches"]
        assert await _link_count(in_memory_session) == 1
