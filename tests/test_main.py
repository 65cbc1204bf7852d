"""
Tests for the Typer-based command line.
"""

import json
import logging
import os
import sys
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from shortcut_dirs import __version__
from shortcut_dirs.known_folders import KnownFolderError

# shortcut_dirs.main as a name is shadowed by the main() function exported
# in shortcut_dirs/__init__.py, so grab the module from sys.modules.
import shortcut_dirs.main  # noqa: F401

main_module = sys.modules["shortcut_dirs.main"]
app = main_module.app

PROGRAMS = r"C:\Users\alice\AppData\Roaming\Microsoft\Windows\Start Menu\Programs"

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_environment():
    """Keep SHORTCUT_DIRS_* and DEBUG from the real environment out of the tests."""
    env = {
        k: v
        for k, v in os.environ.items()
        if not k.startswith("SHORTCUT_DIRS_") and k != "DEBUG"
    }
    root = logging.getLogger()
    level = root.level
    with patch.dict(os.environ, env, clear=True):
        yield
    for handler in [h for h in root.handlers if getattr(h, "_shortcut_dirs", False)]:
        root.removeHandler(handler)
        handler.close()
    root.setLevel(level)


class TestAll:
    """Tests for the ``all`` command."""

    def test_linux_text(self):
        """Should print both folders."""
        result = runner.invoke(app, ["all", "--platform", "linux", "--home", "/home/alice"])
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "system: /usr/share/applications/",
            "local: /home/alice/.local/share/applications",
        ]

    def test_unsupported_text(self):
        """Should mark missing folders as unavailable without failing."""
        result = runner.invoke(app, ["all", "--platform", "other"])
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "system: <unavailable>",
            "local: <unavailable>",
        ]

    def test_json(self):
        """Should print a JSON object."""
        result = runner.invoke(
            app, ["all", "--json", "--platform", "macos", "--home", "/Users/alice"]
        )
        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "platform": "macos",
            "system": "/Applications/",
            "local": "/Users/alice/Applications",
            "error": None,
        }

    def test_platform_is_case_insensitive(self):
        """Should accept platform names in any case."""
        result = runner.invoke(app, ["all", "--platform", "MACOS", "--home", "/Users/a"])
        assert result.exit_code == 0
        assert "system: /Applications/" in result.output

    def test_windows_failure(self):
        """Should report a known-folder failure with exit code 2."""
        with patch(
            "shortcut_dirs.resolver.get_programs_folder",
            side_effect=KnownFolderError("Programs", "folder redirected"),
        ):
            result = runner.invoke(app, ["all", "--json", "--platform", "windows"])
        assert result.exit_code == 2
        data = json.loads(result.output.splitlines()[0])
        assert data["system"] is None
        assert "folder redirected" in data["error"]


class TestSingle:
    """Tests for the ``system`` and ``local`` commands."""

    def test_system(self):
        """Should print just the path."""
        result = runner.invoke(app, ["system", "--platform", "macos"])
        assert result.exit_code == 0
        assert result.output == "/Applications/\n"

    def test_local_without_home(self):
        """Should exit 1 and print no path when HOME is unset."""
        with patch.dict(os.environ, {}, clear=True):
            result = runner.invoke(app, ["local", "--platform", "linux"])
        assert result.exit_code == 1
        assert "applications" not in result.output

    def test_local_json_absent(self):
        """JSON output should carry null for an absent folder."""
        result = runner.invoke(app, ["local", "--json", "--platform", "other"])
        assert result.exit_code == 1
        assert json.loads(result.output.splitlines()[0]) == {
            "platform": "other",
            "local": None,
        }

    def test_windows(self):
        """Should print the Programs known folder."""
        with patch("shortcut_dirs.resolver.get_programs_folder", return_value=PROGRAMS):
            result = runner.invoke(app, ["local", "--platform", "windows"])
        assert result.exit_code == 0
        assert result.output == PROGRAMS + "\n"

    def test_windows_failure(self):
        """Should exit 2 when the known-folder query fails."""
        with patch(
            "shortcut_dirs.resolver.get_programs_folder",
            side_effect=KnownFolderError("Programs", "access denied", 5),
        ):
            result = runner.invoke(app, ["system", "--platform", "windows"])
        assert result.exit_code == 2
        assert "access denied" in result.output
        assert "0x00000005" in result.output


class TestConfiguration:
    """Tests for config file, environment and flag precedence."""

    def test_config_file(self, tmp_path):
        """Should apply overrides from a JSON config file."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"platform": "linux", "home": "/home/file"}))
        result = runner.invoke(app, ["local", "--config", str(path)])
        assert result.exit_code == 0
        assert result.output == "/home/file/.local/share/applications\n"

    def test_environment_beats_file(self, tmp_path):
        """Environment overrides should win over the config file."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"platform": "linux", "home": "/home/file"}))
        with patch.dict(os.environ, {"SHORTCUT_DIRS_HOME": "/home/env"}):
            result = runner.invoke(app, ["local", "--config", str(path)])
        assert result.exit_code == 0
        assert result.output == "/home/env/.local/share/applications\n"

    def test_flags_beat_environment(self):
        """Command line flags should win over the environment."""
        env = {"SHORTCUT_DIRS_PLATFORM": "linux", "SHORTCUT_DIRS_HOME": "/home/env"}
        with patch.dict(os.environ, env):
            result = runner.invoke(
                app, ["local", "--platform", "macos", "--home", "/Users/flag"]
            )
        assert result.exit_code == 0
        assert result.output == "/Users/flag/Applications\n"

    def test_bad_config_file(self, tmp_path):
        """Should exit 2 on an unreadable config file."""
        path = tmp_path / "config.json"
        path.write_text("{oops")
        result = runner.invoke(app, ["all", "--config", str(path)])
        assert result.exit_code == 2
        assert "configuration error" in result.output

    def test_bad_platform_in_environment(self):
        """Should exit 2 on an unknown platform name."""
        with patch.dict(os.environ, {"SHORTCUT_DIRS_PLATFORM": "vms"}):
            result = runner.invoke(app, ["all"])
        assert result.exit_code == 2
        assert "vms" in result.output

    def test_bad_platform_flag(self):
        """Typer should reject unknown --platform choices."""
        result = runner.invoke(app, ["all", "--platform", "vms"])
        assert result.exit_code == 2

    def test_debug_env_enables_debug_logging(self):
        """DEBUG=1 should reach the logging default when no level is configured."""
        with patch.dict(os.environ, {"DEBUG": "1"}), patch.object(
            main_module, "setup_logging", wraps=main_module.setup_logging
        ) as spy:
            result = runner.invoke(app, ["system", "--platform", "linux"])
        assert result.exit_code == 0
        assert spy.call_args.kwargs["log_level"] is None
        assert logging.getLogger().level == logging.DEBUG

    def test_environment_log_level_beats_file(self, tmp_path):
        """SHORTCUT_DIRS_LOG_LEVEL=INFO should override a DEBUG config file."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"platform": "linux", "log_level": "DEBUG"}))
        with patch.dict(os.environ, {"SHORTCUT_DIRS_LOG_LEVEL": "INFO"}):
            result = runner.invoke(app, ["system", "--config", str(path)])
        assert result.exit_code == 0
        assert result.output == "/usr/share/applications/\n"
        assert logging.getLogger().level == logging.INFO

    def test_log_dir(self, tmp_path):
        """Should write a log file when --log-dir is given."""
        result = runner.invoke(
            app, ["system", "--platform", "linux", "-v", "--log-dir", str(tmp_path)]
        )
        assert result.exit_code == 0
        assert (tmp_path / "shortcut_dirs.log").exists()


def test_version():
    """--version should print the package version."""
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output
