"""Tests for the local key-value storage."""

import os
import stat
from unittest.mock import patch

import pytest

from shared.storage import LocalKeyValueStorage


class TestLocalKeyValueStorage:
    def test_load_missing_key_returns_none(self, tmp_path):
        storage = LocalKeyValueStorage(tmp_path / "data")

        assert storage.load("wiz_games_v1") is None

    def test_save_then_load(self, tmp_path):
        storage = LocalKeyValueStorage(str(tmp_path))
        content = '[{"id":"g1","name":"Ночь игр"}]'

        storage.save("wiz_games_v1", content)

        assert storage.load("wiz_games_v1") == content
        assert (tmp_path / "wiz_games_v1.json").read_text(encoding="utf-8") == content

    def test_overwrites_existing_value(self, tmp_path):
        storage = LocalKeyValueStorage(tmp_path)

        storage.save("wiz_players_v1", "[]")
        storage.save("wiz_players_v1", '[{"id":"p1"}]')

        assert storage.load("wiz_players_v1") == '[{"id":"p1"}]'
        assert list(tmp_path.glob(".*.tmp")) == []

    def test_keys_are_independent(self, tmp_path):
        storage = LocalKeyValueStorage(tmp_path)

        storage.save("a", "1")
        storage.save("b", "2")

        assert (storage.load("a"), storage.load("b")) == ("1", "2")

    @pytest.mark.parametrize("key", ["../escape", "../../etc/passwd", ""])
    def test_rejects_keys_outside_data_dir(self, tmp_path, key):
        data_dir = tmp_path / "data"
        storage = LocalKeyValueStorage(data_dir)

        with pytest.raises(ValueError, match="Path traversal rejected"):
            storage.save(key, "[]")
        with pytest.raises(ValueError, match="Path traversal rejected"):
            storage.load(key)
        assert not data_dir.exists()


class TestLocalKeyValueStorageErrorHandling:
    def test_cleans_up_temp_on_fsync_failure(self, tmp_path):
        storage = LocalKeyValueStorage(tmp_path)
        storage.save("wiz_games_v1", "old")

        with (
            patch("os.fsync", side_effect=OSError("fsync failure")),
            pytest.raises(OSError, match="fsync failure"),
        ):
            storage.save("wiz_games_v1", "new")

        assert storage.load("wiz_games_v1") == "old"
        assert list(tmp_path.glob(".wiz_games_v1_*.tmp")) == []

    def test_closes_fd_on_fdopen_failure(self, tmp_path):
        storage = LocalKeyValueStorage(tmp_path)

        with (
            patch("os.fdopen", side_effect=OSError("fdopen failure")) as mock_fdopen,
            patch("os.close", wraps=os.close) as mock_close,
            pytest.raises(OSError, match="fdopen failure"),
        ):
            storage.save("wiz_games_v1", "content")

        mock_close.assert_called_once_with(mock_fdopen.call_args[0][0])
        assert not (tmp_path / "wiz_games_v1.json").exists()


class TestLocalKeyValueStoragePermissions:
    def test_directory_and_file_are_owner_only(self, tmp_path):
        data_dir = tmp_path / "data"
        storage = LocalKeyValueStorage(data_dir)

        storage.save("wiz_games_v1", "[]")

        assert stat.S_IMODE(data_dir.stat().st_mode) == 0o700
        assert stat.S_IMODE((data_dir / "wiz_games_v1.json").stat().st_mode) == 0o600
