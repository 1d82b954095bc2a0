"""Tests for timelog.paths and timelog.config."""

from pathlib import Path

import pytest

from timelog import paths
from timelog.config import TimelogSettings


@pytest.fixture
def fake_home(tmp_path, monkeypatch):
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: home))
    monkeypatch.delenv(paths.HOME_ENV_VAR, raising=False)
    return home


class TestPaths:
    def test_env_override(self, tmp_path, fake_home, monkeypatch):
        target = tmp_path / "custom"
        monkeypatch.setenv(paths.HOME_ENV_VAR, str(target))
        assert paths.get_data_dir() == target
        assert target.is_dir()
        assert paths.get_log_path() == target / "timelog.txt"

    def test_legacy_directory(self, fake_home):
        legacy = fake_home / ".gtimelog"
        legacy.mkdir()
        assert paths.get_log_path() == legacy / "timelog.txt"

    def test_platform_directory(self, tmp_path, fake_home, monkeypatch):
        data_dir = tmp_path / "data"

        class FakeDirs:
            def __init__(self, **kwargs):
                assert kwargs["appname"] == "gtimelog"
                self.user_data_path = data_dir

        monkeypatch.setattr(paths, "PlatformDirs", FakeDirs)
        assert paths.get_data_dir() == data_dir
        assert data_dir.is_dir()


class TestSettings:
    def test_explicit_path(self, tmp_path):
        settings = TimelogSettings.from_options(tmp_path / "log.txt", autosave=False)
        assert settings.log_path == tmp_path / "log.txt"
        assert settings.autosave is False

    def test_default_path(self, tmp_path, monkeypatch):
        monkeypatch.setenv(paths.HOME_ENV_VAR, str(tmp_path))
        settings = TimelogSettings.from_options()
        assert settings.log_path == tmp_path / "timelog.txt"
        assert settings.autosave is True
