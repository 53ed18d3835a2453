"""Unit tests for the workspace directory map and command launch."""

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from niri_action.core.errors import ConfigError, LaunchError
from niri_action.core.workspace_exec import WorkspaceDirectoryMap, launch


MAPPING = """\
# workspace: directory
mail: /home/user/Mail

nixos: /etc/nixos
"""


class TestWorkspaceDirectoryMap:
    """Test parsing and lookup of 'name: path' lines."""

    def test_parse(self):
        dir_map = WorkspaceDirectoryMap.parse(MAPPING, Path("/home/user"))

        assert dir_map.directories == {
            "mail": Path("/home/user/Mail"),
            "nixos": Path("/etc/nixos"),
        }

    def test_lookup(self):
        dir_map = WorkspaceDirectoryMap.parse(MAPPING, Path("/home/user"))

        assert dir_map.directory_for("nixos") == Path("/etc/nixos")

    def test_unknown_name_falls_back_to_default(self):
        dir_map = WorkspaceDirectoryMap.parse(MAPPING, Path("/home/user"))

        assert dir_map.directory_for("scratch") == Path("/home/user")
        assert dir_map.directory_for(None) == Path("/home/user")

    def test_malformed_line(self):
        with pytest.raises(ConfigError, match="Line 2"):
            WorkspaceDirectoryMap.parse("mail: ~/Mail\njust-a-name\n", Path("/"))

    def test_missing_file_gives_empty_map(self, tmp_path):
        dir_map = WorkspaceDirectoryMap.load(tmp_path / "workspaces", tmp_path)

        assert dir_map.directories == {}
        assert dir_map.directory_for("mail") == tmp_path

    def test_load_from_file(self, tmp_path):
        mapping_file = tmp_path / "workspaces"
        mapping_file.write_text(MAPPING)

        dir_map = WorkspaceDirectoryMap.load(mapping_file, tmp_path)

        assert dir_map.directory_for("mail") == Path("/home/user/Mail")


class TestLaunch:
    """Test detached command launch."""

    def test_launch_in_directory(self, tmp_path):
        with patch("subprocess.Popen") as mock_popen:
            mock_popen.return_value = MagicMock(pid=4242)

            process = launch(["foot", "-e", "htop"], tmp_path)

        assert process.pid == 4242
        args, kwargs = mock_popen.call_args
        assert args[0] == ["foot", "-e", "htop"]
        assert kwargs["cwd"] == tmp_path
        assert kwargs["start_new_session"] is True

    def test_missing_executable(self, tmp_path):
        with pytest.raises(LaunchError, match="Failed to launch"):
            launch(["definitely-not-a-real-command-niri-action"], tmp_path)

    def test_empty_command(self, tmp_path):
        with pytest.raises(LaunchError, match="No command given"):
            launch([], tmp_path)

    def test_real_process(self, tmp_path):
        process = launch(["true"], tmp_path)
        assert process.wait(timeout=5) == 0
        assert isinstance(process, subprocess.Popen)
