"""Tests for storage configuration and the composition root."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from spentwise.bootstrap import Container
from spentwise.config import StorageConfig, load_storage_config
from spentwise.config.loader import CONFIG_DIR_ENV
from spentwise.infrastructure.config.json_preference_backend import JsonPreferenceBackend


# ---------------------------------------------------------------------------
# Directory resolution
# ---------------------------------------------------------------------------


class TestLoadStorageConfig:
    def test_explicit_directory(self, tmp_path: Path) -> None:
        cfg = load_storage_config(tmp_path)
        assert cfg.config_dir == tmp_path
        assert cfg.preferences_path == tmp_path / "preferences.json"

    def test_env_var_is_used_when_no_argument(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.setenv(CONFIG_DIR_ENV, str(tmp_path / "from_env"))
        cfg = load_storage_config()
        assert cfg.config_dir == tmp_path / "from_env"

    def test_platform_dir_fallback(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.delenv(CONFIG_DIR_ENV, raising=False)
        monkeypatch.setattr(
            "spentwise.config.loader.platformdirs.user_config_dir",
            lambda appname, appauthor=False: str(tmp_path / appname),
        )
        cfg = load_storage_config()
        assert cfg.config_dir == tmp_path / "spentwise"

    def test_result_is_cached(self, tmp_path: Path) -> None:
        assert load_storage_config(tmp_path) is load_storage_config(tmp_path)

    def test_filename_must_be_plain(self, tmp_path: Path) -> None:
        with pytest.raises(ValidationError):
            StorageConfig(config_dir=tmp_path, filename="nested/prefs.json")


# ---------------------------------------------------------------------------
# Container
# ---------------------------------------------------------------------------


class TestContainer:
    def test_store_writes_into_config_dir(self, tmp_path: Path) -> None:
        container = Container(config_dir=tmp_path)
        container.settings_store.save_app_preferences(
            dark_mode=True,
            font_size="Small",
            language="English",
            date_format="DD/MM/YYYY",
            time_format="24-hour",
            start_on_boot=False,
            start_minimized=False,
            auto_backup=True,
            default_view="Weekly",
            chart_type="Pie Chart",
            animations_level=20,
        )

        assert (tmp_path / "preferences.json").exists()
        reopened = Container(config_dir=tmp_path)
        assert reopened.settings_store.get_default_view() == "Weekly"

    def test_store_is_created_once(self, tmp_path: Path) -> None:
        container = Container(config_dir=tmp_path)
        assert container.settings_store is container.settings_store
        assert isinstance(container._backend, JsonPreferenceBackend)

    def test_in_memory_container_touches_no_files(self, tmp_path: Path) -> None:
        container = Container(config_dir=tmp_path, in_memory=True)
        container.settings_store.mark_account_created()

        assert container.settings_store.get_account_created()
        assert not any(tmp_path.iterdir())
