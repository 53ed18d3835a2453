"""Unit tests for configuration loading."""

import json
from pathlib import Path

import pytest

from niri_action.core.config import NiriActionConfig, get_config_dir, load_config
from niri_action.core.errors import ConfigError


class TestLoadConfig:
    """Test reading config.json."""

    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(tmp_path / "config.json")

        assert config.socket_path is None
        assert config.picker_command == ["fuzzel", "--dmenu"]
        assert config.timeout is None

    def test_values_from_file(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({
            "socket_path": "/run/user/1000/niri.sock",
            "picker_command": ["wofi", "--dmenu"],
            "default_directory": "/srv",
            "timeout": 2.5,
        }))

        config = load_config(config_file)

        assert config.socket_path == Path("/run/user/1000/niri.sock")
        assert config.picker_command == ["wofi", "--dmenu"]
        assert config.default_directory == Path("/srv")
        assert config.timeout == 2.5

    def test_invalid_json(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text("{not json")

        with pytest.raises(ConfigError, match="Failed to read"):
            load_config(config_file)

    def test_top_level_must_be_object(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text("[]")

        with pytest.raises(ConfigError, match="top level must be an object"):
            load_config(config_file)

    def test_empty_picker_command_rejected(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"picker_command": []}))

        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(config_file)

    def test_non_positive_timeout_rejected(self):
        with pytest.raises(ValueError):
            NiriActionConfig(timeout=0)

    def test_default_location_follows_xdg(self, monkeypatch, tmp_path):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert get_config_dir() == tmp_path / "niri-action"
        assert NiriActionConfig().workspace_dirs_file == tmp_path / "niri-action" / "workspaces"

    def test_home_is_expanded(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))

        config = NiriActionConfig(workspace_dirs_file="~/dirs")

        assert config.workspace_dirs_file == tmp_path / "dirs"
