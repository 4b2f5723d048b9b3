from __future__ import annotations

from pathlib import Path

import pytest

from core.config import AppSettings, _parse_env_lines, get_settings, use_settings, write_user_env_vars
from core.resources_loader import bundled_data_dir, data_dir, get_dataset_path, require_dataset



def test_settings_read_prefixed_environment(monkeypatch):
    monkeypatch.setenv("PATTERN_CATALOG_OFFLINE_HTTP", "false")
    monkeypatch.setenv("PATTERN_CATALOG_HISTORY_MAX_SIZE", "7")

    settings = AppSettings()

    assert settings.offline_http is False
    assert settings.history_max_size == 7


def test_use_settings_is_scoped_and_nests():
    outer = AppSettings(history_max_size=3)
    inner = AppSettings(history_max_size=4)

    with use_settings(outer):
        assert get_settings() is outer
        with use_settings(inner):
            assert get_settings() is inner
        assert get_settings() is outer

    assert get_settings() is not outer
    assert get_settings().history_max_size == 50


def test_write_user_env_vars_merges_existing(tmp_path):
    env_path = tmp_path / "cfg" / ".env"
    env_path.parent.mkdir()
    env_path.write_text("# old\nPATTERN_CATALOG_LOG_LEVEL=DEBUG\nPATTERN_CATALOG_DATA_DIR='/x'\n", encoding="utf-8")

    write_user_env_vars({"PATTERN_CATALOG_LOG_LEVEL": "INFO"}, env_path=env_path)

    values = _parse_env_lines(env_path.read_text(encoding="utf-8"))
    assert values == {"PATTERN_CATALOG_DATA_DIR": "/x", "PATTERN_CATALOG_LOG_LEVEL": "INFO"}


def test_data_dir_follows_settings_and_is_created(data_path: Path):
    assert not data_path.exists()
    assert data_dir() == data_path
    assert data_path.is_dir()


def test_datasets_prefer_user_override(data_path: Path):
    assert require_dataset("cats.csv") == bundled_data_dir() / "cats.csv"

    data_dir()
    override = data_path / "cats.csv"
    override.write_text("Name,Age,Owner,Breed,Image,Color,Texture,Fur,Size\n", encoding="utf-8")
    assert get_dataset_path("cats.csv") == override


def test_require_dataset_raises_for_missing_file():
    with pytest.raises(FileNotFoundError):
        require_dataset("nope.csv")
