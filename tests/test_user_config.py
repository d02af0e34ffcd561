"""Tests for hierarchical user configuration and macro settings."""

import json
from pathlib import Path

import pytest

from linesmith.exceptions import ConfigError
from linesmith.macros.config import MACRO_CONFIG, get_macro_config
from linesmith.paths import get_paths
from linesmith.user_config import UserConfig


class TestUserConfig:

    def test_defaults(self, isolated_environment):
        config = UserConfig(isolated_environment)
        assert config.get("macros.indent_size") == 4
        assert config.get("editor.backup_enabled") is True
        assert config.get("missing.key", "fallback") == "fallback"

    def test_local_overrides_global(self, isolated_environment):
        global_path = Path.home() / ".linesmith" / "config.json"
        global_path.parent.mkdir(parents=True)
        global_path.write_text(json.dumps({"macros": {"indent_size": 8, "log_level_method": "debug"}}))

        local_path = isolated_environment / ".linesmith" / "config.json"
        local_path.parent.mkdir(parents=True)
        local_path.write_text(json.dumps({"macros": {"indent_size": 2}}))

        config = UserConfig(isolated_environment)
        assert config.get("macros.indent_size") == 2
        assert config.get("macros.log_level_method") == "debug"
        assert config.get("editor.backup_enabled") is True

    def test_set_local_saves_and_reloads(self, isolated_environment):
        config = UserConfig(isolated_environment)

        assert config.set_local("editor.backup_enabled", False)

        saved = json.loads((isolated_environment / ".linesmith" / "config.json").read_text())
        assert saved == {"editor": {"backup_enabled": False}}
        assert config.get("editor.backup_enabled") is False

    def test_files_come_from_the_project_layout(self, isolated_environment):
        config = UserConfig(isolated_environment)
        paths = get_paths(isolated_environment)

        assert config.local_config_path == paths.local_config
        assert config.global_config_path == paths.global_config == Path.home() / ".linesmith" / "config.json"

    def test_broken_config_file_is_ignored(self, isolated_environment):
        local_path = isolated_environment / ".linesmith" / "config.json"
        local_path.parent.mkdir(parents=True)
        local_path.write_text("{not json")

        assert UserConfig(isolated_environment).get("macros.indent_size") == 4


class TestMacroConfig:

    def test_defaults(self):
        config = get_macro_config()
        assert config["indent_size"] == MACRO_CONFIG["indent_size"]
        assert "LoggerV3.getLambdaLogger()" in config["logger_init_markers"]

    def test_user_override(self, isolated_environment):
        UserConfig(isolated_environment).set_local("macros.indent_size", 2)
        assert get_macro_config()["indent_size"] == 2

    @pytest.mark.parametrize("key, value", [
        ("indent_size", 0),
        ("indent_size", "4"),
        ("log_level_method", "trace"),
    ])
    def test_invalid_values(self, isolated_environment, key, value):
        UserConfig(isolated_environment).set_local(f"macros.{key}", value)
        with pytest.raises(ConfigError):
            get_macro_config()
