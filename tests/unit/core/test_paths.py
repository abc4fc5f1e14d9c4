"""Unit tests for path management."""

from pathlib import Path

import pytest
from secupdate.core.paths import APP_NAME, get_config_dir, get_config_path


class TestConfigPaths:
    """Tests for configuration path helpers."""

    def test_respects_xdg_config_home(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """XDG_CONFIG_HOME overrides the home-relative default."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert get_config_dir() == tmp_path / APP_NAME

    def test_default_under_home(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without XDG_CONFIG_HOME the directory lives under ~/.config."""
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)

        assert get_config_dir() == Path.home() / ".config" / "secupdate"

    def test_config_file_name(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """The settings file is config.toml inside the config directory."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert get_config_path() == tmp_path / "secupdate" / "config.toml"
